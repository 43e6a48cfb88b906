"""Unit tests for the femtologging wrapper."""

from __future__ import annotations

import typing as typ

import pytest

from portfolio_engine import logging as engine_logging
from portfolio_engine.logging import LogLevel, log_debug, log_info, log_warning, normalise_level


class _RecordingLogger:
    """Logger double capturing femtologging ``log`` calls."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, object | None]] = []

    def log(
        self,
        level: str,
        message: str,
        /,
        *,
        exc_info: object | None = None,
        stack_info: bool = False,
    ) -> None:
        del stack_info
        self.records.append((level, message, exc_info))


@pytest.mark.parametrize(
    ("requested", "expected"),
    [
        (None, (LogLevel.INFO, True)),
        ("", (LogLevel.INFO, True)),
        ("verbose", (LogLevel.INFO, True)),
        (" debug ", (LogLevel.DEBUG, False)),
        ("ERROR", (LogLevel.ERROR, False)),
    ],
)
def test_normalise_level(requested: str | None, expected: tuple[LogLevel, bool]) -> None:
    """Level names are normalised and unknown names fall back to INFO."""
    assert normalise_level(requested) == expected


def test_warn_alias_is_deprecated() -> None:
    """``WARN`` resolves to ``WARNING`` with a deprecation warning."""
    with pytest.deprecated_call():
        resolved, used_default = normalise_level("warn")

    assert resolved is LogLevel.WARNING
    assert used_default is False


def test_configure_logging_passes_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """``configure_logging`` forwards the normalised level to femtologging."""
    calls: list[dict[str, typ.Any]] = []
    monkeypatch.setattr(
        engine_logging,
        "basicConfig",
        lambda **kwargs: calls.append(kwargs),
    )

    level, used_default = engine_logging.configure_logging("debug", force=True)

    assert (level, used_default) == (LogLevel.DEBUG, False)
    assert calls == [{"level": LogLevel.DEBUG, "force": True}]


def test_log_helpers_format_templates() -> None:
    """Helpers interpolate percent-style templates before emitting."""
    logger = _RecordingLogger()

    log_info(logger, "Composed %s with %d blocks", "p_1", 7)
    log_debug(logger, "plain message")
    log_warning(logger, "Rejected %s", "/compose", exc_info=True)

    assert logger.records == [
        (LogLevel.INFO, "Composed p_1 with 7 blocks", None),
        (LogLevel.DEBUG, "plain message", None),
        (LogLevel.WARNING, "Rejected /compose", True),
    ]
