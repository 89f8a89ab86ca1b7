from __future__ import annotations

import json
import logging

log = logging.getLogger(__name__)


def parse_json_list(raw: str | None) -> list[str]:
    """Decode a serialized JSON array of strings; anything unusable becomes []."""
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        log.warning("could not parse JSON list field: %.60r", raw)
        return []
    if not isinstance(value, list):
        log.warning("JSON field is not a list: %.60r", raw)
        return []
    return [str(item) for item in value if item is not None]


def dump_json_list(items: list[str] | None) -> str | None:
    if items is None:
        return None
    return json.dumps(items, ensure_ascii=False)
