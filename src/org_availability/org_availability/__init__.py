"""Org Availability package.

This package is organized by feature modules (hierarchy, attendance,
aggregation, orgchart, ...) with a thin Flask controller layer on top of pure
service functions and repository protocols.
"""
