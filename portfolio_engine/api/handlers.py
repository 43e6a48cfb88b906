"""Shared Falcon endpoint handlers for portfolio API resources.

The module provides ``translate_domain_errors``, which maps composition
errors onto Falcon HTTP errors, and the scoring and composition handlers
shared by resource adapters.

Examples
--------
>>> with translate_domain_errors("/content/score"):
...     category = parse_category_field(payload)
>>> media, status = handle_compose(payload, min_content_items=0)
"""

from __future__ import annotations

import contextlib
import typing as typ

import falcon

from portfolio_engine.composition import (
    ComposeOptions,
    InsufficientContentError,
    PortfolioEngineError,
    compose_portfolio,
    score_content_batch,
    serialize_portfolio,
    serialize_scored_content,
)
from portfolio_engine.logging import get_logger, log_warning

from .helpers import (
    optional_text_field,
    parse_category_field,
    parse_content_list,
    require_text_field,
)
from .serializers import serialize_processing_summary

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .types import JsonPayload

logger = get_logger(__name__)


@contextlib.contextmanager
def translate_domain_errors(route: str) -> cabc.Iterator[None]:
    """Translate composition errors raised inside the block into HTTP errors.

    Parameters
    ----------
    route : str
        Route template included in the warning log.

    Raises
    ------
    falcon.HTTPUnprocessableEntity
        Raised for ``InsufficientContentError``.
    falcon.HTTPBadRequest
        Raised for every other ``PortfolioEngineError``.
    """
    try:
        yield
    except InsufficientContentError as exc:
        log_warning(logger, "Rejected request to %s: %s", route, exc)
        raise falcon.HTTPUnprocessableEntity(
            title="Insufficient content",
            description=str(exc),
            code=exc.code,
        ) from exc
    except PortfolioEngineError as exc:
        log_warning(logger, "Rejected request to %s: %s", route, exc)
        raise falcon.HTTPBadRequest(
            title="Validation failed",
            description=str(exc),
            code=exc.code,
        ) from exc


def handle_score_batch(payload: JsonPayload) -> tuple[JsonPayload, str]:
    """Score a list of content records and return them ranked.

    Returns
    -------
    tuple[JsonPayload, str]
        Response payload with ``total`` and ranked ``content``, and the HTTP
        status code.
    """
    category = parse_category_field(payload)
    contents = parse_content_list(payload, "contents")
    scored = score_content_batch(contents, category)
    return {
        "success": True,
        "total": len(scored),
        "content": [serialize_scored_content(item) for item in scored],
    }, falcon.HTTP_200


def handle_compose(
    payload: JsonPayload,
    *,
    min_content_items: int,
) -> tuple[JsonPayload, str]:
    """Score content and compose a portfolio from it.

    Parameters
    ----------
    payload : JsonPayload
        Request payload with ``user_id``, ``category``, ``title``, optional
        ``subtitle``, and a ``content`` list.
    min_content_items : int
        Configured minimum number of content items.

    Returns
    -------
    tuple[JsonPayload, str]
        Response payload with the portfolio and a processing summary, and the
        HTTP status code.

    Raises
    ------
    falcon.HTTPBadRequest
        Raised when required fields are missing or malformed.
    InsufficientContentError
        Raised when fewer than ``min_content_items`` records are supplied.
    """
    options = ComposeOptions(
        user_id=require_text_field(payload, "user_id"),
        category=parse_category_field(payload),
        title=require_text_field(payload, "title"),
        subtitle=optional_text_field(payload, "subtitle"),
        min_content_items=min_content_items,
    )
    contents = parse_content_list(payload, "content")
    scored = score_content_batch(contents, options.category)
    portfolio = compose_portfolio(scored, options)
    return {
        "success": True,
        "portfolio": serialize_portfolio(portfolio),
        "processing_summary": serialize_processing_summary(
            portfolio,
            total_inputs=len(contents),
        ),
    }, falcon.HTTP_200


__all__ = ["handle_compose", "handle_score_batch", "translate_domain_errors"]
