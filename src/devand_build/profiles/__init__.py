"""Profile tables for each deployment target."""

from .table import ProfileTable

__all__ = ["ProfileTable"]
