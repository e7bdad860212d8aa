from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date, today_local
from ..container import Container
from ..core.enums import AggregationMode
from ..core.exceptions import EmployeeNotFoundError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _selected_date():
        value = request.args.get("date")
        return parse_iso_date(value) if value else today_local()

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    @app.route("/api/org-chart", methods=["GET"], endpoint="org_chart")
    def org_chart():
        try:
            on = _selected_date()
            mode_arg = request.args.get("mode")
            mode = AggregationMode.parse(mode_arg) if mode_arg else container.org_chart_service.default_mode
            nodes = container.org_chart_service.build_tree(on, mode)
            return jsonify({
                "success": True,
                "date": on.isoformat(),
                "mode": mode.value,
                "data": [n.to_dict() for n in nodes],
            }), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Error building org chart")
            return jsonify({"success": False, "message": "Internal error while building org chart"}), 500

    @app.route("/api/employees/<int:employee_id>/status", methods=["GET"], endpoint="employee_status")
    def employee_status(employee_id: int):
        try:
            on = _selected_date()
            status = container.availability_service.resolve_status(employee_id, on)
            return jsonify({"success": True, "date": on.isoformat(), "employee_id": employee_id, **status.to_dict()}), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except EmployeeNotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except Exception:
            logger.exception("Error resolving status for employee %s", employee_id)
            return jsonify({"success": False, "message": "Internal error while resolving status"}), 500
