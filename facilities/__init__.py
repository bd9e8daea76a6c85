"""Facility directory application.

This package contains models, services, serializers and views
implementing the read-only facility directory API consumed by the
front-end results and facility pages.
"""
