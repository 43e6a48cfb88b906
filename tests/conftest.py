"""Shared pytest fixtures for composition and API tests.

Fixtures provide a fixed reference time, deterministic identifier factories,
and a Falcon test client wired with explicit settings so tests never depend
on the ambient environment.
"""

from __future__ import annotations

import typing as typ

import pytest
from _content_factories import REFERENCE_TIME, SequentialIds, fixed_clock, make_content

from portfolio_engine.composition import ContentSource, ContentType, NormalizedContent
from portfolio_engine.settings import EngineSettings

if typ.TYPE_CHECKING:
    import datetime as dt

    from falcon import testing

    from portfolio_engine.composition.identifiers import Clock


@pytest.fixture
def reference_time() -> dt.datetime:
    """Return the fixed time every test content record is aged against."""
    return REFERENCE_TIME


@pytest.fixture
def clock() -> Clock:
    """Return a clock frozen at the reference time."""
    return fixed_clock()


@pytest.fixture
def sequential_ids() -> SequentialIds:
    """Return a deterministic identifier factory."""
    return SequentialIds()


@pytest.fixture
def mixed_contents() -> list[NormalizedContent]:
    """Return one record of each common shape a creator submits."""
    return [
        make_content(
            "c_video",
            content_type=ContentType.VIDEO,
            source=ContentSource.YOUTUBE,
            title="Launch keynote",
            description="Product launch keynote streamed to a global audience.",
            extracted_data={
                "view_count": 250_000,
                "like_count": 12_000,
                "thumbnail_url": "https://img.example/keynote.jpg",
                "embed_url": "https://www.youtube.com/embed/abc123",
                "duration_seconds": 1_800,
                "width": 1920,
                "height": 1080,
            },
        ),
        make_content(
            "c_repo",
            content_type=ContentType.CODE,
            source=ContentSource.GITHUB,
            title="engine",
            description="Composable data pipeline toolkit.",
            extracted_data={"stars": 1_500, "forks": 120, "language": "Python"},
            original_url="https://github.com/ada/engine",
        ),
        make_content(
            "c_bio",
            title="Bio",
            description="Engineer building developer tools.",
            extracted_data={"text_type": "bio"},
        ),
        make_content(
            "c_about",
            title="How I work",
            description="Small iterations, measured outcomes.",
            extracted_data={"text_type": "about"},
        ),
        make_content(
            "c_shot",
            content_type=ContentType.IMAGE,
            source=ContentSource.UPLOAD,
            title="Dashboard",
            file_path="uploads/dashboard.png",
            extracted_data={"width": 2400, "height": 1600},
        ),
        make_content(
            "c_linkedin",
            content_type=ContentType.EXTERNAL_LINK,
            source=ContentSource.LINKEDIN,
            title="LinkedIn",
            original_url="https://www.linkedin.com/posts/ada",
        ),
    ]


@pytest.fixture
def engine_settings() -> EngineSettings:
    """Return settings with every optional behaviour disabled."""
    return EngineSettings()


@pytest.fixture
def api_client(engine_settings: EngineSettings) -> testing.TestClient:
    """Build a Falcon test client for the portfolio engine endpoints."""
    from falcon import testing

    from portfolio_engine.api import create_app

    return testing.TestClient(create_app(engine_settings))
