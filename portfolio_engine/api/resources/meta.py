"""Service metadata resources."""

from __future__ import annotations

import typing as typ

import falcon

from portfolio_engine import __version__
from portfolio_engine.api.serializers import serialize_category
from portfolio_engine.composition import Category

if typ.TYPE_CHECKING:
    from portfolio_engine.api.types import JsonPayload


class HealthResource:
    """Report service liveness."""

    async def on_get(self, req: falcon.Request, resp: falcon.Response) -> None:
        """Return the service name and version."""
        del req
        payload: JsonPayload = {
            "status": "ok",
            "service": "portfolio-engine",
            "version": __version__,
        }
        resp.media = payload
        resp.status = falcon.HTTP_200


class CategoriesResource:
    """List the supported categories and their scoring weights."""

    async def on_get(self, req: falcon.Request, resp: falcon.Response) -> None:
        """Return every category in declaration order."""
        del req
        resp.media = {"items": [serialize_category(category) for category in Category]}
        resp.status = falcon.HTTP_200
