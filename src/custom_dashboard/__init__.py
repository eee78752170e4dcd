"""Custom Dashboard - multi-tenant dashboard configuration service."""

__version__ = "0.1.0"
