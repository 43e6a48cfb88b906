"""Content scoring and platform detection resources."""

from __future__ import annotations

import falcon

from portfolio_engine.api.handlers import handle_score_batch, translate_domain_errors
from portfolio_engine.api.helpers import (
    parse_category_field,
    parse_content_item,
    require_payload_dict,
    require_url_field,
)
from portfolio_engine.api.serializers import serialize_platform_detection
from portfolio_engine.composition import (
    detect_platform,
    score_content,
    serialize_scored_content,
)


class ScoreContentResource:
    """Score one content record for a category."""

    async def on_post(self, req: falcon.Request, resp: falcon.Response) -> None:
        """Score the ``content`` record against ``category``.

        Raises
        ------
        falcon.HTTPBadRequest
            Raised when the payload, category, or content is invalid.
        """
        payload = require_payload_dict(await req.get_media())
        with translate_domain_errors("/content/score"):
            category = parse_category_field(payload)
            content = parse_content_item(payload)
        resp.media = {
            "success": True,
            "scored_content": serialize_scored_content(score_content(content, category)),
        }
        resp.status = falcon.HTTP_200


class ScoreBatchResource:
    """Score and rank a batch of content records."""

    async def on_post(self, req: falcon.Request, resp: falcon.Response) -> None:
        """Score ``contents`` against ``category`` and rank the results."""
        payload = require_payload_dict(await req.get_media())
        with translate_domain_errors("/content/score-batch"):
            resp.media, resp.status = handle_score_batch(payload)


class DetectPlatformResource:
    """Detect which platform a URL belongs to."""

    async def on_post(self, req: falcon.Request, resp: falcon.Response) -> None:
        """Return the platform, extractability, and display metadata for ``url``."""
        payload = require_payload_dict(await req.get_media())
        url = require_url_field(payload)
        resp.media = serialize_platform_detection(url, detect_platform(url))
        resp.status = falcon.HTTP_200
