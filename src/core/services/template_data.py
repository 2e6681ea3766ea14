"""
Template data parsing for page records.

A page's template payload is persisted either as a native object or as a
JSON-encoded string. This module normalizes both into a mapping so the
renderer never sees a malformed top-level payload.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)


def parse_template_data(raw: Any) -> Mapping[str, Any] | None:
    """
    Normalize a persisted template payload.

    - None -> None
    - mapping -> returned as-is (not copied; callers must not mutate it)
    - string -> decoded JSON object, or None if it is not one
    - anything else -> None

    Never raises.
    """
    if raw is None:
        return None

    if isinstance(raw, Mapping):
        return raw

    if isinstance(raw, str):
        try:
            decoded = json.loads(raw)
        except (ValueError, RecursionError) as e:
            logger.warning("parse_template_data: invalid JSON payload: %s", e)
            return None
        if not isinstance(decoded, dict):
            logger.warning(
                "parse_template_data: expected a JSON object, got %s", type(decoded).__name__
            )
            return None
        return decoded

    return None


def extract_components(payload: Any) -> list[Any]:
    """Component list of a parsed payload; empty when missing or not a list."""
    if not isinstance(payload, Mapping):
        return []
    components = payload.get("components")
    if isinstance(components, list):
        return components
    return []
