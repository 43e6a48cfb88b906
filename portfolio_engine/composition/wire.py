"""JSON wire codec for content records and composed portfolios.

Parsing validates only structure the engine depends on (identifiers, the
content type, and timestamps). Serialization turns the frozen dataclass
models into plain JSON-compatible mappings using the renderer field names.
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import enum
import typing as typ

from portfolio_engine.logging import get_logger, log_warning

from .domain import ContentSource, ContentType, NormalizedContent
from .errors import InvalidContentError
from .identifiers import ensure_utc, format_timestamp

if typ.TYPE_CHECKING:
    from .blocks import Block
    from .domain import JsonMapping, ScoredContent
    from .portfolio import Portfolio

logger = get_logger(__name__)

# Python attribute names that differ from their wire names.
_WIRE_FIELD_NAMES: typ.Final[dict[str, str]] = {"content_type": "type"}


def _require_text(payload: JsonMapping, field: str) -> str:
    value = payload.get(field)
    if not isinstance(value, str) or not value.strip():
        msg = f"Content field {field!r} must be a non-empty string."
        raise InvalidContentError(msg, field=field)
    return value


def _optional_text(payload: JsonMapping, field: str, default: str | None = None) -> str | None:
    value = payload.get(field)
    if value is None:
        return default
    if not isinstance(value, str):
        msg = f"Content field {field!r} must be a string when provided."
        raise InvalidContentError(msg, field=field)
    return value


def _parse_content_type(payload: JsonMapping) -> ContentType:
    raw = payload.get("type")
    try:
        return ContentType(typ.cast("str", raw))
    except ValueError as exc:
        allowed = ", ".join(member.value for member in ContentType)
        msg = f"Content type {raw!r} is not one of: {allowed}."
        raise InvalidContentError(msg, field="type") from exc


def _parse_source(payload: JsonMapping, content_id: str) -> ContentSource:
    raw = payload.get("source")
    try:
        return ContentSource(typ.cast("str", raw))
    except ValueError:
        log_warning(
            logger,
            "Unknown source %r on content %s; treating it as 'other'.",
            raw,
            content_id,
        )
        return ContentSource.OTHER


def parse_timestamp(value: object, *, field: str = "created_at") -> dt.datetime:
    """Parse an ISO-8601 timestamp into an aware UTC datetime.

    Raises
    ------
    InvalidContentError
        If ``value`` is not an ISO-8601 string.
    """
    if not isinstance(value, str):
        msg = f"Content field {field!r} must be an ISO-8601 timestamp string."
        raise InvalidContentError(msg, field=field)
    try:
        parsed = dt.datetime.fromisoformat(value)
    except ValueError as exc:
        msg = f"Content field {field!r} is not a valid ISO-8601 timestamp: {value!r}."
        raise InvalidContentError(msg, field=field) from exc
    return ensure_utc(parsed)


def parse_normalized_content(payload: object) -> NormalizedContent:
    """Parse a JSON object into ``NormalizedContent``.

    Parameters
    ----------
    payload : object
        Decoded JSON value describing one content record.

    Returns
    -------
    NormalizedContent
        The parsed record. Unknown ``source`` values become ``other``.

    Raises
    ------
    InvalidContentError
        If the payload is not an object, or ``content_id``, ``type``, or
        ``created_at`` is missing or malformed.
    """
    if not isinstance(payload, dict):
        msg = "Content must be a JSON object."
        raise InvalidContentError(msg)
    data = typ.cast("JsonMapping", payload)

    content_id = _require_text(data, "content_id")
    extracted = data.get("extracted_data")
    if extracted is None:
        extracted = {}
    elif not isinstance(extracted, dict):
        msg = "Content field 'extracted_data' must be an object when provided."
        raise InvalidContentError(msg, field="extracted_data")

    return NormalizedContent(
        content_id=content_id,
        content_type=_parse_content_type(data),
        source=_parse_source(data, content_id),
        title=_optional_text(data, "title", "") or "",
        description=_optional_text(data, "description", "") or "",
        created_at=parse_timestamp(data.get("created_at")),
        original_url=_optional_text(data, "original_url"),
        file_path=_optional_text(data, "file_path"),
        extracted_data=dict(typ.cast("JsonMapping", extracted)),
    )


def to_wire(value: object) -> object:
    """Convert models, enums, and timestamps into JSON-compatible values."""
    match value:
        case enum.Enum():
            return value.value
        case dt.datetime():
            return format_timestamp(value)
        case list() | tuple():
            return [to_wire(item) for item in typ.cast("list[object]", value)]
        case dict():
            return {
                str(to_wire(key)): to_wire(item)
                for key, item in typ.cast("dict[object, object]", value).items()
            }
        case _ if dc.is_dataclass(value) and not isinstance(value, type):
            return {
                _WIRE_FIELD_NAMES.get(field.name, field.name): to_wire(
                    getattr(value, field.name)
                )
                for field in dc.fields(value)
            }
        case _:
            return value


def serialize_normalized_content(content: NormalizedContent) -> JsonMapping:
    """Serialize a content record with wire field names."""
    return typ.cast("JsonMapping", to_wire(content))


def serialize_scored_content(scored: ScoredContent) -> JsonMapping:
    """Serialize scored content as the flat record plus scores."""
    payload = serialize_normalized_content(scored.content)
    payload["scores"] = to_wire(scored.scores)
    payload["final_score"] = scored.final_score
    return payload


def serialize_block(block: Block) -> JsonMapping:
    """Serialize one block, including nested children."""
    return typ.cast("JsonMapping", to_wire(block))


def serialize_portfolio(portfolio: Portfolio) -> JsonMapping:
    """Serialize a portfolio document in renderer field order."""
    return {
        "portfolio_id": portfolio.portfolio_id,
        "user_id": portfolio.user_id,
        "category": portfolio.category.value,
        "version": portfolio.version,
        "meta": to_wire(portfolio.meta),
        "sections": to_wire(portfolio.sections),
        "navigation": to_wire(portfolio.navigation),
        "analytics": to_wire(portfolio.analytics),
    }


__all__ = [
    "parse_normalized_content",
    "parse_timestamp",
    "serialize_block",
    "serialize_normalized_content",
    "serialize_portfolio",
    "serialize_scored_content",
    "to_wire",
]
