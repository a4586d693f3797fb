"""Database models package."""
from server_helpers.db.models.app_version import AppVersion

__all__ = ["AppVersion"]
