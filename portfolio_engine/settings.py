"""Environment-driven configuration for the portfolio engine.

Every setting has a safe default: malformed environment values are ignored
rather than raised, so a misconfigured deployment still composes portfolios
with the reference behaviour.

Examples
--------
>>> settings = EngineSettings.from_environment({"PORTFOLIO_ENGINE_MIN_CONTENT_ITEMS": "1"})
>>> settings.min_content_items
1
"""

from __future__ import annotations

import dataclasses as dc
import os
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

LOG_LEVEL_ENV = "PORTFOLIO_ENGINE_LOG_LEVEL"
MIN_CONTENT_ITEMS_ENV = "PORTFOLIO_ENGINE_MIN_CONTENT_ITEMS"


def parse_non_negative_int(value: str | None, default: int) -> int:
    """Parse a non-negative integer, returning ``default`` on bad input."""
    if value is None:
        return default
    try:
        parsed = int(value.strip())
    except ValueError:
        return default
    return max(0, parsed)


@dc.dataclass(frozen=True, slots=True)
class EngineSettings:
    """Runtime settings for the HTTP adapter.

    Attributes
    ----------
    log_level : str | None
        Requested femtologging level; ``None`` leaves logging unconfigured.
    min_content_items : int
        Minimum number of content items required before a portfolio is
        composed. ``0`` keeps the permissive behaviour of composing an
        empty skeleton.
    """

    log_level: str | None = None
    min_content_items: int = 0

    @classmethod
    def from_environment(
        cls,
        environ: cabc.Mapping[str, str] | None = None,
    ) -> EngineSettings:
        """Build settings from environment variables.

        Parameters
        ----------
        environ : Mapping[str, str] | None
            Environment mapping to read; defaults to ``os.environ``.

        Returns
        -------
        EngineSettings
            Settings with defaults applied for missing or invalid values.
        """
        env = os.environ if environ is None else environ
        raw_level = (env.get(LOG_LEVEL_ENV) or "").strip()
        return cls(
            log_level=raw_level or None,
            min_content_items=parse_non_negative_int(env.get(MIN_CONTENT_ITEMS_ENV), 0),
        )


__all__ = ["EngineSettings", "parse_non_negative_int"]
