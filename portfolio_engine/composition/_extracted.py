"""Tolerant readers for the open ``extracted_data`` map.

Ingestion handlers populate ``extracted_data`` with whatever a platform
returned. Readers here treat a missing key and a value of the wrong JSON type
identically, so scoring and block building never raise on sparse input.
"""

from __future__ import annotations

import dataclasses as dc
import math
import typing as typ

if typ.TYPE_CHECKING:
    from .domain import JsonMapping

type Number = int | float


def text_value(data: JsonMapping, key: str) -> str | None:
    """Return a non-empty string field, or ``None``."""
    value = data.get(key)
    if isinstance(value, str) and value:
        return value
    return None


def number_value(data: JsonMapping, key: str) -> Number | None:
    """Return a finite numeric field, or ``None``.

    Booleans are rejected even though ``bool`` subclasses ``int``.
    """
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def positive_number(data: JsonMapping, key: str) -> Number | None:
    """Return a numeric field only when it is non-zero."""
    value = number_value(data, key)
    return value if value else None


def flag_value(data: JsonMapping, key: str) -> bool:
    """Return True only for a literal ``true`` field."""
    return data.get(key) is True


def string_list(data: JsonMapping, key: str) -> list[str] | None:
    """Return the string members of a list field, or ``None`` if absent."""
    value = data.get(key)
    if not isinstance(value, list):
        return None
    return [item for item in typ.cast("list[object]", value) if isinstance(item, str)]


@dc.dataclass(frozen=True, slots=True)
class RepositorySummary:
    """One entry of a GitHub profile's ``top_repos`` list."""

    name: str
    description: str
    stars: Number


def top_repositories(data: JsonMapping) -> list[RepositorySummary]:
    """Read ``top_repos`` entries, skipping anything that is not a mapping."""
    raw = data.get("top_repos")
    if not isinstance(raw, list):
        return []
    repositories: list[RepositorySummary] = []
    for entry in typ.cast("list[object]", raw):
        if not isinstance(entry, dict):
            continue
        repo = typ.cast("JsonMapping", entry)
        repositories.append(
            RepositorySummary(
                name=text_value(repo, "name") or "",
                description=text_value(repo, "description") or "",
                stars=number_value(repo, "stars") or 0,
            ),
        )
    return repositories


def plain_number(value: Number) -> str:
    """Render a number without a trailing ``.0`` for integral floats."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def compact_number(value: Number) -> str:
    """Render counts as ``1.2K`` / ``3.4M`` once they reach a thousand."""
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"{value / 1_000:.1f}K"
    return plain_number(value)


def round_half_up(value: float, digits: int = 0) -> float:
    """Round ``value`` half away from zero for non-negative inputs."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor
