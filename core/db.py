"""
Database alias selection.

Django keeps one lazily opened connection per alias for the life of the
process, so callers only pick the alias. Public tracking routes write through
the elevated alias; dashboard endpoints read through the restricted one.
"""

from django.conf import settings
from django.db import DEFAULT_DB_ALIAS


def tracking_db() -> str:
    return getattr(settings, "TRACKING_DATABASE", DEFAULT_DB_ALIAS)


def dashboard_db() -> str:
    return getattr(settings, "DASHBOARD_DATABASE", DEFAULT_DB_ALIAS)
