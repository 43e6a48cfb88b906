"""REST API adapter for the portfolio engine.

This package exposes the Falcon application factory used by runtime adapters
and integration tests.

Examples
--------
>>> from portfolio_engine.api import create_app
>>> app = create_app()  # doctest: +SKIP
"""

from __future__ import annotations

from .app import create_app

__all__ = ["create_app"]
