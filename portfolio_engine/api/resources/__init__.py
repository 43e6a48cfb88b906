"""Falcon resources for the portfolio engine endpoints.

Utilities provided
------------------
- Shared base class: ``_ResourceBase``
- Metadata resources: ``HealthResource``, ``CategoriesResource``
- Content resources: ``ScoreContentResource``, ``ScoreBatchResource``,
  ``DetectPlatformResource``
- Portfolio resources: ``ComposePortfolioResource``

Examples
--------
>>> from portfolio_engine.api.resources import ComposePortfolioResource
>>> app.add_route("/portfolios/compose", ComposePortfolioResource(settings, scorer))
"""

from .base import _ResourceBase
from .content import DetectPlatformResource, ScoreBatchResource, ScoreContentResource
from .meta import CategoriesResource, HealthResource
from .portfolios import ComposePortfolioResource

__all__ = [
    "CategoriesResource",
    "ComposePortfolioResource",
    "DetectPlatformResource",
    "HealthResource",
    "ScoreBatchResource",
    "ScoreContentResource",
    "_ResourceBase",
]
