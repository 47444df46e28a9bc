"""General parsing utilities for recipe extraction."""

import json
import math
import re
from typing import Any, Optional

from recime_recipes.app.services.extraction.constants import (
    DURATION_RE,
    ISO8601_DURATION_RE,
)


def clean_text(text: str) -> str:
    """Normalize whitespace in text."""
    return re.sub(r"\s+", " ", text or "").strip()


def parse_iso8601_duration(duration: str) -> Optional[int]:
    """Parse an ISO-8601 duration string (e.g., PT1H30M) into minutes."""
    if not duration:
        return None
    match = ISO8601_DURATION_RE.fullmatch(duration.strip())
    if not match or not any(match.groups()):
        return None
    try:
        days = int(match.group(1) or 0)
        hours = int(match.group(2) or 0)
        minutes = int(match.group(3) or 0)
        seconds = float(match.group(4) or 0)
    except ValueError:
        return None
    total_minutes = days * 24 * 60 + hours * 60 + minutes + (1 if seconds >= 30 else 0)
    return total_minutes or None


def parse_duration(text: Optional[str]) -> Optional[int]:
    """Parse a duration like "25 minutes" or "1 hour" into minutes.

    Only the first number+unit pair counts, so "1 hour 30 minutes" yields 60.
    Falls back to ISO-8601 (``PT45M``) when no free-text duration is present.
    Returns None when nothing is found; callers keep their current value.
    """
    if not text:
        return None
    match = DURATION_RE.search(text)
    if match:
        try:
            value = int(match.group(1))
        except ValueError:
            # digit runs past the int conversion limit
            return None
        unit = match.group(2).lower()
        if unit.startswith("hour") or unit.startswith("hr"):
            return value * 60
        return value
    return parse_iso8601_duration(text)


def first_integer(text: Optional[str]) -> Optional[int]:
    """Return the first run of digits in text as an int."""
    if not text:
        return None
    match = re.search(r"\d+", text)
    if not match:
        return None
    try:
        return int(match.group())
    except ValueError:
        return None


def parse_servings(value) -> Optional[int]:
    """Parse servings from a schema.org recipeYield value."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, (int, float)):
        return max(0, int(value))
    if isinstance(value, str):
        return first_integer(value)
    if isinstance(value, list) and value:
        return parse_servings(value[0])
    return None


def json_path(node: Any, *path, default: Any = None) -> Any:
    """Walk dict keys and list indexes, returning ``default`` where the path runs out.

    A missing key, an out-of-range index, a type mismatch along the way, or a
    JSON ``null`` at the end all yield ``default`` instead of raising.
    """
    current = node
    for key in path:
        if isinstance(current, dict) and isinstance(key, str):
            current = current.get(key)
        elif isinstance(current, list) and isinstance(key, int) and -len(current) <= key < len(current):
            current = current[key]
        else:
            return default
        if current is None:
            return default
    return current


def json_text(value: Any) -> str:
    """Stringify a JSON value: strings as-is, scalars via str, containers as compact JSON."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, ensure_ascii=False)
