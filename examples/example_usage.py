"""Example: use the service layer directly (without Flask).

Controllers are a thin layer; the org chart and availability rules live in services.
"""

import importlib
from datetime import date

from config import get_settings_module

from org_availability.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        data_source=settings.DATA_SOURCE,
        data_dir=settings.DATA_DIR,
        organization_name=settings.COMPANY_NAME,
    )

    on = date.today().replace(day=11)
    for node in container.org_chart_service.build_tree(on, "all-count"):
        summary = node.summary.to_dict() if node.summary else ""
        print(f"{node.node_id:>22} <- {node.parent_id:<22} {node.name:<20} {node.label:<24} {summary}")

    print(container.availability_service.resolve_status(301, on))


if __name__ == "__main__":
    main()
