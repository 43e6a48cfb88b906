"""Request parsing helpers for Falcon resource adapters.

This module centralizes the payload validation shared by resource classes:
JSON-object shape checks, required fields, category names, and content lists.
Shape problems raise ``falcon.HTTPBadRequest`` directly. Category and content
parsers raise the domain errors instead, which ``handlers`` translates.

Examples
--------
>>> payload = require_payload_dict(await req.get_media())
>>> category = parse_category_field(payload)
"""

from __future__ import annotations

import typing as typ
import urllib.parse

import falcon

from portfolio_engine.composition import (
    InvalidContentError,
    parse_category,
    parse_normalized_content,
)

if typ.TYPE_CHECKING:
    from portfolio_engine.composition import Category, NormalizedContent

    from .types import JsonPayload


def require_payload_dict(payload: object) -> JsonPayload:
    """Validate that request media is a JSON object mapping.

    Raises
    ------
    falcon.HTTPBadRequest
        Raised when request media is not a JSON object.
    """
    if not isinstance(payload, dict):
        msg = "JSON object payload is required."
        raise falcon.HTTPBadRequest(description=msg)
    return typ.cast("JsonPayload", payload)


def require_field(payload: JsonPayload, field_name: str) -> object:
    """Return a required payload field or raise HTTP 400."""
    if field_name not in payload or payload[field_name] is None:
        msg = f"Missing required field: {field_name}"
        raise falcon.HTTPBadRequest(description=msg)
    return payload[field_name]


def require_text_field(payload: JsonPayload, field_name: str) -> str:
    """Return a required non-blank string field or raise HTTP 400."""
    value = require_field(payload, field_name)
    if not isinstance(value, str) or not value.strip():
        msg = f"Field {field_name} must be a non-empty string."
        raise falcon.HTTPBadRequest(description=msg)
    return value


def optional_text_field(payload: JsonPayload, field_name: str) -> str:
    """Return an optional string field, defaulting to an empty string."""
    value = payload.get(field_name)
    if value is None:
        return ""
    if not isinstance(value, str):
        msg = f"Field {field_name} must be a string."
        raise falcon.HTTPBadRequest(description=msg)
    return value


def parse_category_field(payload: JsonPayload) -> Category:
    """Parse the required ``category`` field.

    Raises
    ------
    InvalidCategoryError
        Raised when the category is not one of the known names.
    falcon.HTTPBadRequest
        Raised when the field is missing.
    """
    return parse_category(require_field(payload, "category"))


def parse_content_item(payload: JsonPayload, field_name: str = "content") -> NormalizedContent:
    """Parse a single normalized content record from a payload field."""
    return parse_normalized_content(require_field(payload, field_name))


def parse_content_list(payload: JsonPayload, field_name: str) -> list[NormalizedContent]:
    """Parse a list of normalized content records from a payload field.

    Raises
    ------
    falcon.HTTPBadRequest
        Raised when the field is missing or not a list.
    InvalidContentError
        Raised when any record is malformed; the message names its index.
    """
    raw_items = require_field(payload, field_name)
    if not isinstance(raw_items, list):
        msg = f"Field {field_name} must be a list of content objects."
        raise falcon.HTTPBadRequest(description=msg)

    contents: list[NormalizedContent] = []
    for index, raw_item in enumerate(typ.cast("list[object]", raw_items)):
        try:
            contents.append(parse_normalized_content(raw_item))
        except InvalidContentError as exc:
            msg = f"{field_name}[{index}]: {exc}"
            raise InvalidContentError(msg, field=exc.field) from exc
    return contents


def require_url_field(payload: JsonPayload, field_name: str = "url") -> str:
    """Return a required absolute URL field or raise HTTP 400."""
    url = require_text_field(payload, field_name)
    parsed = urllib.parse.urlsplit(url)
    if not parsed.scheme or not parsed.netloc:
        msg = "Invalid URL format"
        raise falcon.HTTPBadRequest(description=msg)
    return url


__all__ = [
    "optional_text_field",
    "parse_category_field",
    "parse_content_item",
    "parse_content_list",
    "require_field",
    "require_payload_dict",
    "require_text_field",
    "require_url_field",
]
