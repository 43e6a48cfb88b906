"""Unit tests for content scoring heuristics and batch ranking."""

from __future__ import annotations

import itertools
import math

import pytest
from _content_factories import REFERENCE_TIME, make_content, make_scored, with_scores

from portfolio_engine.composition import (
    CATEGORY_KEYWORDS,
    CATEGORY_WEIGHTS,
    Category,
    ContentSource,
    ContentType,
    InvalidCategoryError,
    rank_scored_content,
    score_content,
    score_content_batch,
)
from portfolio_engine.composition._extracted import round_half_up
from portfolio_engine.composition.scoring import (
    score_credibility,
    score_engagement,
    score_freshness,
    score_quality,
    score_relevance,
)

_EVERY_KEYWORD = " ".join(
    keyword for keywords in CATEGORY_KEYWORDS.values() for keyword in keywords
)

_EXTRACTED_PROFILES: dict[str, dict[str, object]] = {
    "empty": {},
    "extreme": {
        "view_count": 10**12,
        "like_count": 10**12,
        "stars": 10**9,
        "width": 7680,
        "height": 4320,
        "duration_seconds": 10**6,
        "page_count": 10**4,
        "thumbnail_url": "https://cdn.example.com/thumb.jpg",
        "readme_preview": "r" * 5_000,
        "extracted_text": _EVERY_KEYWORD,
    },
    "negative": {
        "view_count": -50,
        "like_count": -5,
        "stars": -1,
        "width": -1920,
        "height": -1080,
        "duration_seconds": -30,
    },
}


@pytest.mark.parametrize("category", list(Category))
def test_category_weights_sum_to_one(category: Category) -> None:
    """Every category weight vector sums to one."""
    assert math.isclose(CATEGORY_WEIGHTS[category].total(), 1.0), (
        f"Expected {category} weights to sum to 1.0."
    )


def test_github_repository_scores_for_tech() -> None:
    """A starred GitHub repository gets the expected sub-scores and final score."""
    content = make_content(
        content_type=ContentType.CODE,
        source=ContentSource.GITHUB,
        extracted_data={"stars": 150},
    )

    scored = score_content(content, Category.TECH, now=REFERENCE_TIME)

    assert scored.scores.relevance == pytest.approx(0.2), (
        "Expected only the GitHub relevance boost to apply."
    )
    assert scored.scores.quality == pytest.approx(0.5)
    assert scored.scores.credibility == pytest.approx(0.7), (
        "Expected 150 stars to clear the 10 and 100 star tiers only."
    )
    assert scored.scores.engagement == pytest.approx(0.3)
    assert scored.scores.freshness == pytest.approx(1.0)
    assert scored.final_score == 0.47, "Expected weighted score rounded to 0.47."


def test_popular_youtube_video_scores_high_credibility_and_engagement() -> None:
    """View and like counts lift YouTube credibility and engagement."""
    content = make_content(
        content_type=ContentType.VIDEO,
        source=ContentSource.YOUTUBE,
        extracted_data={"view_count": 150_000, "like_count": 6_000},
    )

    assert score_credibility(content) == pytest.approx(0.8), (
        "Expected all three view tiers to add credibility."
    )
    assert score_engagement(content) == pytest.approx(0.95), (
        "Expected both view tiers and the like ratio to add engagement."
    )


def test_social_link_scores() -> None:
    """Social profile links lose credibility but gain engagement."""
    content = make_content(
        content_type=ContentType.EXTERNAL_LINK,
        source=ContentSource.LINKEDIN,
    )

    assert score_credibility(content) == pytest.approx(0.2)
    assert score_engagement(content) == pytest.approx(0.45)


def test_text_engagement_is_penalised() -> None:
    """Plain text starts below the engagement baseline."""
    assert score_engagement(make_content()) == pytest.approx(0.2)


@pytest.mark.parametrize(
    ("extracted_data", "description", "expected"),
    [
        (
            {
                "thumbnail_url": "https://img.example/t.jpg",
                "width": 1920,
                "height": 1080,
                "duration_seconds": 90,
            },
            "A detailed walkthrough of the full release process, end to end.",
            0.95,
        ),
        ({"width": 3840, "height": 2160, "duration_seconds": 90}, "", 0.85),
        ({"width": 3840, "height": 2160}, "", 0.75),
        ({"duration_seconds": 90}, "", 0.6),
        (
            {
                "thumbnail_url": "https://img.example/t.jpg",
                "width": 3840,
                "height": 2160,
                "duration_seconds": 90,
            },
            "A detailed walkthrough of the full release process, end to end.",
            1.0,
        ),
    ],
    ids=["hd_with_metadata", "4k_with_duration", "4k_only", "duration_only", "clamped"],
)
def test_video_quality(
    extracted_data: dict[str, object],
    description: str,
    expected: float,
) -> None:
    """Video quality rewards resolution, duration, thumbnails, and descriptions."""
    content = make_content(
        content_type=ContentType.VIDEO,
        source=ContentSource.UPLOAD,
        description=description,
        extracted_data=extracted_data,
    )

    assert score_quality(content) == pytest.approx(expected), (
        f"Expected video quality {expected}."
    )


def test_pdf_quality_rewards_extracted_text() -> None:
    """Readable multi-page documents score higher quality."""
    content = make_content(
        content_type=ContentType.PDF,
        source=ContentSource.UPLOAD,
        extracted_data={"extracted_text": "Quarterly results", "page_count": 3},
    )

    assert score_quality(content) == pytest.approx(0.7)


def test_github_readme_adds_quality() -> None:
    """A long README preview adds quality to GitHub content."""
    content = make_content(
        content_type=ContentType.CODE,
        source=ContentSource.GITHUB,
        extracted_data={"readme_preview": "x" * 201},
    )

    assert score_quality(content) == pytest.approx(0.65)


def test_large_image_adds_quality() -> None:
    """Images of at least 1000 pixels on both sides add quality."""
    large = make_content(
        content_type=ContentType.IMAGE,
        extracted_data={"width": 1000, "height": 1000},
    )
    narrow = make_content(
        content_type=ContentType.IMAGE,
        extracted_data={"width": 4000, "height": 999},
    )

    assert score_quality(large) == pytest.approx(0.65)
    assert score_quality(narrow) == pytest.approx(0.5)


@pytest.mark.parametrize(
    ("category", "title", "expected"),
    [
        (Category.LEGAL, "Attorney", 0.2),
        (Category.FINANCE, "finance tax audit budget equity", 1.0),
        (Category.DESIGN, "", 0.0),
    ],
)
def test_relevance_counts_keyword_matches(
    category: Category,
    title: str,
    expected: float,
) -> None:
    """Relevance grows by 0.2 per category keyword, capped at 1.0."""
    content = make_content(title=title)

    assert score_relevance(content, category) == pytest.approx(expected)


def test_relevance_boost_is_capped() -> None:
    """The content-type boost never lifts relevance above 1.0."""
    content = make_content(
        content_type=ContentType.IMAGE,
        title="design ui ux graphic visual brand",
    )

    assert score_relevance(content, Category.DESIGN) == pytest.approx(1.0)


def test_relevance_reads_extracted_text() -> None:
    """Keywords found in extracted document text count toward relevance."""
    content = make_content(
        content_type=ContentType.PDF,
        extracted_data={"extracted_text": "Patent litigation summary"},
    )

    assert score_relevance(content, Category.LEGAL) == pytest.approx(0.4)


@pytest.mark.parametrize(
    ("age_days", "expected"),
    [
        (0, 1.0),
        (29, 1.0),
        (30, 0.8),
        (89, 0.8),
        (90, 0.6),
        (364, 0.6),
        (365, 0.4),
        (729, 0.4),
        (730, 0.2),
        (3_000, 0.2),
    ],
)
def test_freshness_steps(age_days: int, expected: float) -> None:
    """Freshness decays in steps at 30, 90, 365, and 730 days."""
    content = make_content(age_days=age_days)

    assert score_freshness(content, REFERENCE_TIME) == expected, (
        f"Expected freshness {expected} at {age_days} days."
    )


def test_freshness_treats_naive_timestamps_as_utc() -> None:
    """Naive reference times are interpreted as UTC."""
    content = make_content(age_days=45)
    naive_now = REFERENCE_TIME.replace(tzinfo=None)

    assert score_freshness(content, naive_now) == 0.8


def test_malformed_extracted_data_is_treated_as_absent() -> None:
    """Wrongly typed extracted fields never raise and score as missing."""
    content = make_content(
        content_type=ContentType.VIDEO,
        source=ContentSource.YOUTUBE,
        extracted_data={
            "view_count": "lots",
            "like_count": None,
            "width": True,
            "thumbnail_url": 42,
        },
    )

    scored = score_content(content, Category.ENTERTAINMENT, now=REFERENCE_TIME)

    assert scored.scores.credibility == pytest.approx(0.5)
    assert scored.scores.quality == pytest.approx(0.5)
    assert 0.0 <= scored.final_score <= 1.0


def test_rank_keeps_input_order_for_ties() -> None:
    """Equal final scores keep their relative input order."""
    contents = [make_content(f"c_{index}") for index in range(4)]
    scored = [score_content(item, Category.TECH, now=REFERENCE_TIME) for item in contents]

    ranked = rank_scored_content(reversed(scored))

    assert [item.content_id for item in ranked] == ["c_3", "c_2", "c_1", "c_0"], (
        "Expected a stable sort for tied scores."
    )


def test_score_content_batch_ranks_descending() -> None:
    """Batch scoring returns items ordered by final score."""
    contents = [
        make_content("c_old", age_days=1_000),
        make_content(
            "c_repo",
            content_type=ContentType.CODE,
            source=ContentSource.GITHUB,
            extracted_data={"stars": 5_000},
        ),
        make_content("c_new"),
    ]

    ranked = score_content_batch(contents, Category.TECH, now=REFERENCE_TIME)

    assert [item.content_id for item in ranked] == ["c_repo", "c_new", "c_old"]
    scores = [item.final_score for item in ranked]
    assert scores == sorted(scores, reverse=True)


def test_score_content_batch_accepts_empty_input() -> None:
    """An empty batch scores to an empty list."""
    assert score_content_batch([], Category.LEGAL, now=REFERENCE_TIME) == []


@pytest.mark.parametrize("profile", sorted(_EXTRACTED_PROFILES))
@pytest.mark.parametrize("category", list(Category))
def test_scores_stay_within_unit_interval(category: Category, profile: str) -> None:
    """Every sub-score and final score lies in [0, 1] for any input."""
    for content_type, source, age_days in itertools.product(
        ContentType,
        ContentSource,
        (-30.0, 10.0, 5_000.0),
    ):
        content = make_content(
            content_type=content_type,
            source=source,
            title=_EVERY_KEYWORD if profile == "extreme" else "",
            description="d" * 500 if profile == "extreme" else "",
            age_days=age_days,
            extracted_data=_EXTRACTED_PROFILES[profile],
        )

        scored = score_content(content, category, now=REFERENCE_TIME)

        scores = scored.scores
        for name, value in (
            ("relevance", scores.relevance),
            ("quality", scores.quality),
            ("credibility", scores.credibility),
            ("engagement", scores.engagement),
            ("freshness", scores.freshness),
            ("final_score", scored.final_score),
        ):
            assert 0.0 <= value <= 1.0, (
                f"Expected {name} in [0, 1] for {content_type}/{source}, got {value}."
            )


def test_view_tiers_accumulate_one_increment_at_a_time() -> None:
    """Tier bonuses are added in sequence, matching step-by-step accumulation."""
    content = make_content(
        content_type=ContentType.VIDEO,
        source=ContentSource.YOUTUBE,
        extracted_data={"view_count": 150_000, "like_count": 6_000},
    )

    credibility = 0.3
    for bonus in (0.2, 0.1, 0.1, 0.1):
        credibility += bonus
    engagement = 0.3
    for bonus in (0.25, 0.15, 0.15, 0.1):
        engagement += bonus

    assert score_credibility(content) == credibility, (
        "Expected the exact float produced by sequential tier increments."
    )
    assert score_engagement(content) == engagement


def test_influencer_batch_ranks_engaging_video_first() -> None:
    """The more engaging video leads an Influencers ranking."""
    quiet = make_scored(
        content_id="c_quiet",
        content_type=ContentType.VIDEO,
        scores=with_scores(engagement=0.4),
    )
    engaging = make_scored(
        content_id="c_engaging",
        content_type=ContentType.VIDEO,
        scores=with_scores(engagement=0.9),
    )
    weights = CATEGORY_WEIGHTS[Category.INFLUENCERS]
    batch = [
        make_scored(
            item.content,
            scores=item.scores,
            final_score=round_half_up(item.scores.weighted_by(weights), 2),
        )
        for item in (quiet, engaging)
    ]

    ranked = rank_scored_content(batch)

    assert [item.content_id for item in ranked] == ["c_engaging", "c_quiet"], (
        "Expected the 0.9 engagement video ahead of the 0.4 one."
    )


def test_influencer_scoring_prefers_popular_video() -> None:
    """Scored end to end, a widely watched video outranks an uploaded one."""
    uploaded = make_content(
        "c_upload",
        content_type=ContentType.VIDEO,
        source=ContentSource.UPLOAD,
    )
    popular = make_content(
        "c_popular",
        content_type=ContentType.VIDEO,
        source=ContentSource.YOUTUBE,
        extracted_data={"view_count": 500_000, "like_count": 40_000},
    )

    ranked = score_content_batch([uploaded, popular], Category.INFLUENCERS, now=REFERENCE_TIME)

    assert [item.content_id for item in ranked] == ["c_popular", "c_upload"]
    assert ranked[0].scores.engagement > ranked[1].scores.engagement


def test_score_content_resolves_category_names() -> None:
    """Category names score identically to their enum members."""
    content = make_content()

    by_name = score_content(content, "Tech", now=REFERENCE_TIME)
    by_member = score_content(content, Category.TECH, now=REFERENCE_TIME)

    assert by_name == by_member


@pytest.mark.parametrize("category", ["tech", "Cooking", ""])
def test_score_content_rejects_unknown_categories(category: str) -> None:
    """Unknown categories raise the domain error rather than a lookup error."""
    with pytest.raises(InvalidCategoryError):
        score_content(make_content(), category, now=REFERENCE_TIME)


def test_score_content_batch_rejects_unknown_category_for_empty_input() -> None:
    """The category is validated even when there is nothing to score."""
    with pytest.raises(InvalidCategoryError):
        score_content_batch([], "Bogus", now=REFERENCE_TIME)
