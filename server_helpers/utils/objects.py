"""Helpers for loosely typed payloads coming from clients and data sources."""
from __future__ import annotations

import json
from typing import Any, Dict, Optional

from server_helpers.utils.exceptions import QueryError

DEFAULT_APP_ENVIRONMENTS = [{"name": "production", "is_default": True, "priority": 3}]


def parse_json(json_string: str, error_message: Optional[str] = None) -> Any:
    try:
        return json.loads(json_string)
    except (TypeError, ValueError) as err:
        raise QueryError(error_message, str(err), {}) from err


def clean_object(obj: Dict[str, Any]) -> None:
    """Remove ``None`` values from ``obj`` and any nested dicts, in place."""

    for key in list(obj.keys()):
        value = obj[key]
        if value is None:
            del obj[key]
        elif isinstance(value, dict):
            clean_object(value)


def validate_default_value(value: Any, params: Dict[str, Any]) -> Any:
    if params.get("data_type") == "boolean":
        return value or "false"
    return value
