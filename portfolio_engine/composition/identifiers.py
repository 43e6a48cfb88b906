"""Identifier and timestamp sources for composed documents.

Composition is deterministic apart from generated identifiers and the
current time, so both are injectable. Callers that need reproducible output
pass their own ``IdFactory`` and ``Clock``.
"""

from __future__ import annotations

import datetime as dt
import typing as typ
import uuid

if typ.TYPE_CHECKING:
    import collections.abc as cabc

type IdFactory = cabc.Callable[[str], str]
type Clock = cabc.Callable[[], dt.datetime]

PORTFOLIO_ID_PREFIX = "p"
BLOCK_ID_PREFIX = "b"

_ID_LENGTH = 12
_MAX_ALLOCATION_ATTEMPTS = 16


def generate_id(prefix: str = "") -> str:
    """Return a short random identifier such as ``b_1a2b3c4d5e6f``."""
    token = uuid.uuid4().hex[:_ID_LENGTH]
    return f"{prefix}_{token}" if prefix else token


def utc_now() -> dt.datetime:
    """Return the current time as an aware UTC datetime."""
    return dt.datetime.now(dt.UTC)


def ensure_utc(value: dt.datetime) -> dt.datetime:
    """Interpret naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=dt.UTC)
    return value.astimezone(dt.UTC)


def format_timestamp(value: dt.datetime) -> str:
    """Format a timestamp as ISO-8601 UTC with milliseconds and a ``Z`` suffix."""
    text = ensure_utc(value).isoformat(timespec="milliseconds")
    return text.removesuffix("+00:00") + "Z"


class BlockIdAllocator:
    """Hand out block identifiers that are unique within one document.

    One allocator is created per composition call and discarded afterwards.

    Parameters
    ----------
    id_factory : IdFactory
        Source of candidate identifiers, called with the block prefix.
    """

    def __init__(self, id_factory: IdFactory = generate_id) -> None:
        self._id_factory = id_factory
        self._issued: set[str] = set()

    def allocate(self) -> str:
        """Return a block identifier not previously issued by this allocator.

        Raises
        ------
        RuntimeError
            If the factory keeps returning identifiers already in use.
        """
        for _ in range(_MAX_ALLOCATION_ATTEMPTS):
            candidate = self._id_factory(BLOCK_ID_PREFIX)
            if candidate not in self._issued:
                self._issued.add(candidate)
                return candidate
        msg = "Block id factory keeps returning identifiers already in use."
        raise RuntimeError(msg)

    @property
    def issued(self) -> frozenset[str]:
        """Return every identifier handed out so far."""
        return frozenset(self._issued)
