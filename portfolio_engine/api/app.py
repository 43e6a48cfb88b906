"""Falcon ASGI application factory for the portfolio engine."""

from __future__ import annotations

from falcon import asgi

from portfolio_engine.logging import configure_logging, get_logger, log_info
from portfolio_engine.settings import EngineSettings

from .resources import (
    CategoriesResource,
    ComposePortfolioResource,
    DetectPlatformResource,
    HealthResource,
    ScoreBatchResource,
    ScoreContentResource,
)

logger = get_logger(__name__)


def create_app(settings: EngineSettings | None = None) -> asgi.App:
    """Build and return the Falcon ASGI application.

    Parameters
    ----------
    settings : EngineSettings | None
        Runtime settings; read from the environment when omitted.

    Returns
    -------
    asgi.App
        Application with every portfolio engine route registered.
    """
    resolved = EngineSettings.from_environment() if settings is None else settings
    if resolved.log_level is not None:
        configure_logging(resolved.log_level)

    app = asgi.App()
    app.add_route("/health", HealthResource())
    app.add_route("/categories", CategoriesResource())
    app.add_route("/content/score", ScoreContentResource())
    app.add_route("/content/score-batch", ScoreBatchResource())
    app.add_route("/content/detect-platform", DetectPlatformResource())
    app.add_route("/portfolios/compose", ComposePortfolioResource(resolved))

    log_info(
        logger,
        "Portfolio engine API ready: min_content_items=%d.",
        resolved.min_content_items,
    )
    return app
