"""Shared base resource for Falcon portfolio API adapters.

Resources are constructed once per application with the engine settings, so
request handlers never read the environment.

Examples
--------
>>> class MyResource(_ResourceBase): ...
>>> resource = MyResource(settings)
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from portfolio_engine.settings import EngineSettings


class _ResourceBase:
    """Store the collaborators every resource needs."""

    def __init__(self, settings: EngineSettings) -> None:
        self._settings = settings
