"""Attendify package.

Multi-tenant attendance tracking organized by feature modules (directory,
attendance, reports) with a thin Flask controller layer over service and
repository layers.
"""
