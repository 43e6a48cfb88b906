"""Portfolio composition resources."""

from __future__ import annotations

import falcon

from portfolio_engine.api.handlers import handle_compose, translate_domain_errors
from portfolio_engine.api.helpers import require_payload_dict
from portfolio_engine.api.resources.base import _ResourceBase


class ComposePortfolioResource(_ResourceBase):
    """Compose a portfolio from normalized content records.

    Raises
    ------
    falcon.HTTPBadRequest
        Raised when the payload, category, or any content record is invalid.
    falcon.HTTPUnprocessableEntity
        Raised when fewer records are supplied than the configured minimum.
    """

    async def on_post(self, req: falcon.Request, resp: falcon.Response) -> None:
        """Score the submitted content and return the composed portfolio."""
        payload = require_payload_dict(await req.get_media())
        with translate_domain_errors("/portfolios/compose"):
            resp.media, resp.status = handle_compose(
                payload,
                min_content_items=self._settings.min_content_items,
            )
