"""Content scoring for portfolio composition.

Each content item receives five sub-scores in [0, 1] from fixed heuristics.
The category weight vector combines them into ``final_score``, rounded
half-up to two decimals. Scoring is pure: it reads only the content, the
category, and the reference time ``now``.

Examples
--------
>>> scored = score_content_batch(contents, Category.TECH, now=reference_time)
>>> [item.final_score for item in scored]
[0.82, 0.71, 0.55]
"""

from __future__ import annotations

import operator
import types
import typing as typ

from ._extracted import number_value, positive_number, round_half_up, text_value
from .domain import (
    Category,
    ContentScores,
    ContentSource,
    ContentType,
    ScoredContent,
    parse_category,
)
from .identifiers import ensure_utc, utc_now

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    import datetime as dt

    from .domain import NormalizedContent

CATEGORY_WEIGHTS: typ.Final[cabc.Mapping[Category, ContentScores]] = (
    types.MappingProxyType({
        Category.FINANCE: ContentScores(
            relevance=0.25, quality=0.20, credibility=0.35, engagement=0.10, freshness=0.10
        ),
        Category.ENTERTAINMENT: ContentScores(
            relevance=0.20, quality=0.30, credibility=0.10, engagement=0.30, freshness=0.10
        ),
        Category.DESIGN: ContentScores(
            relevance=0.25, quality=0.35, credibility=0.10, engagement=0.20, freshness=0.10
        ),
        Category.LEGAL: ContentScores(
            relevance=0.20, quality=0.15, credibility=0.40, engagement=0.05, freshness=0.20
        ),
        Category.TECH: ContentScores(
            relevance=0.30, quality=0.25, credibility=0.20, engagement=0.15, freshness=0.10
        ),
        Category.MARKETING: ContentScores(
            relevance=0.25, quality=0.20, credibility=0.15, engagement=0.30, freshness=0.10
        ),
        Category.INFLUENCERS: ContentScores(
            relevance=0.15, quality=0.25, credibility=0.10, engagement=0.40, freshness=0.10
        ),
        Category.BUSINESS: ContentScores(
            relevance=0.25, quality=0.15, credibility=0.35, engagement=0.10, freshness=0.15
        ),
    })
)

CATEGORY_KEYWORDS: typ.Final[cabc.Mapping[Category, tuple[str, ...]]] = (
    types.MappingProxyType({
        Category.FINANCE: (
            "finance", "financial", "investment", "banking", "accounting", "cfo",
            "revenue", "profit", "roi", "portfolio", "audit", "tax", "budget",
            "forecast", "valuation", "equity", "debt", "capital", "cash flow",
        ),
        Category.ENTERTAINMENT: (
            "entertainment", "film", "music", "video", "content", "creative",
            "production", "acting", "directing", "streaming", "media", "show",
            "performance", "artist", "celebrity", "viral", "views",
        ),
        Category.DESIGN: (
            "design", "ui", "ux", "graphic", "visual", "brand", "logo", "creative",
            "interface", "prototype", "figma", "sketch", "adobe", "illustration",
            "typography", "color", "layout", "wireframe", "aesthetic",
        ),
        Category.LEGAL: (
            "legal", "law", "attorney", "lawyer", "litigation", "contract",
            "compliance", "regulation", "court", "case", "settlement", "rights",
            "intellectual property", "patent", "trademark", "counsel",
        ),
        Category.TECH: (
            "tech", "technology", "software", "engineering", "developer", "code",
            "programming", "api", "cloud", "data", "ai", "machine learning",
            "startup", "product", "architecture", "system", "scale", "devops",
        ),
        Category.MARKETING: (
            "marketing", "growth", "seo", "sem", "social", "campaign", "brand",
            "conversion", "analytics", "content", "digital", "advertising",
            "engagement", "reach", "impression", "click", "lead", "funnel",
        ),
        Category.INFLUENCERS: (
            "influencer", "creator", "followers", "viral", "social media",
            "instagram", "tiktok", "youtube", "brand deal", "sponsorship",
            "engagement rate", "audience", "content creator", "reach",
        ),
        Category.BUSINESS: (
            "business", "strategy", "consulting", "management", "operations",
            "startup", "entrepreneur", "ceo", "founder", "leadership", "growth",
            "scale", "revenue", "team", "process", "efficiency", "optimization",
        ),
    })
)

# Content-type affinity bonus added to keyword relevance.
_RELEVANCE_BOOSTS: typ.Final[
    cabc.Mapping[Category, tuple[ContentSource | ContentType, float]]
] = types.MappingProxyType({
    Category.TECH: (ContentSource.GITHUB, 0.2),
    Category.ENTERTAINMENT: (ContentType.VIDEO, 0.2),
    Category.DESIGN: (ContentType.IMAGE, 0.2),
    Category.FINANCE: (ContentType.PDF, 0.1),
})

_KEYWORDS_FOR_FULL_RELEVANCE = 5
_SECONDS_PER_DAY = 86_400.0

# (maximum age in days, exclusive; freshness score)
_FRESHNESS_STEPS: typ.Final[tuple[tuple[float, float], ...]] = (
    (30, 1.0),
    (90, 0.8),
    (365, 0.6),
    (730, 0.4),
)
_STALE_FRESHNESS = 0.2

_TRUSTED_SOURCES = frozenset({ContentSource.YOUTUBE, ContentSource.GITHUB})
_SOCIAL_LINK_SOURCES = frozenset({
    ContentSource.INSTAGRAM,
    ContentSource.TIKTOK,
    ContentSource.LINKEDIN,
})


def _clamp(value: float) -> float:
    return max(0.0, min(value, 1.0))


def score_relevance(content: NormalizedContent, category: Category) -> float:
    """Score keyword overlap with the category plus a content-type boost."""
    extracted_text = text_value(content.extracted_data, "extracted_text") or ""
    search_text = f"{content.title} {content.description} {extracted_text}".lower()
    matches = sum(1 for keyword in CATEGORY_KEYWORDS[category] if keyword in search_text)
    relevance = min(matches / _KEYWORDS_FOR_FULL_RELEVANCE, 1.0)

    boost = _RELEVANCE_BOOSTS.get(category)
    if boost is not None:
        tag, amount = boost
        if tag is content.source or tag is content.content_type:
            relevance += amount
    return min(relevance, 1.0)


def score_quality(content: NormalizedContent) -> float:
    """Score production quality from resolution, metadata, and text richness."""
    data = content.extracted_data
    score = 0.5
    if text_value(data, "thumbnail_url"):
        score += 0.1
    if len(content.description) > 50:
        score += 0.1

    width = positive_number(data, "width")
    height = positive_number(data, "height")
    match content.content_type:
        case ContentType.VIDEO:
            if width and height:
                if width >= 1280 or height >= 720:
                    score += 0.15
                if width >= 3840 or height >= 2160:
                    score += 0.1
            if (number_value(data, "duration_seconds") or 0) > 0:
                score += 0.1
        case ContentType.IMAGE:
            if width and height and width >= 1000 and height >= 1000:
                score += 0.15
        case ContentType.PDF:
            if text_value(data, "extracted_text"):
                score += 0.15
                if (number_value(data, "page_count") or 0) > 1:
                    score += 0.05
        case _:
            pass

    readme = text_value(data, "readme_preview")
    if content.source is ContentSource.GITHUB and readme and len(readme) > 200:
        score += 0.15
    return _clamp(score)


def score_credibility(content: NormalizedContent) -> float:
    """Score trust signals: source, audience size, and document type."""
    data = content.extracted_data
    score = 0.3
    if content.source in _TRUSTED_SOURCES:
        score += 0.2

    if content.source is ContentSource.YOUTUBE:
        views = number_value(data, "view_count") or 0
        for tier in (1_000, 10_000, 100_000):
            if views > tier:
                score += 0.1
    elif content.source is ContentSource.GITHUB:
        stars = number_value(data, "stars") or 0
        if stars > 10:
            score += 0.1
        if stars > 100:
            score += 0.1
        if stars > 1_000:
            score += 0.15

    if content.content_type is ContentType.PDF:
        score += 0.15
    elif content.content_type is ContentType.EXTERNAL_LINK:
        score -= 0.1
    return _clamp(score)


def score_engagement(content: NormalizedContent) -> float:
    """Score how likely the content is to hold a viewer's attention."""
    data = content.extracted_data
    score = 0.3
    if content.content_type is ContentType.VIDEO:
        score += 0.25
    elif content.content_type is ContentType.IMAGE:
        score += 0.2

    if content.source is ContentSource.YOUTUBE:
        views = positive_number(data, "view_count")
        likes = positive_number(data, "like_count")
        if views:
            for tier in (10_000, 100_000):
                if views > tier:
                    score += 0.15
            if likes and likes / views > 0.03:
                score += 0.1

    if (
        content.content_type is ContentType.EXTERNAL_LINK
        and content.source in _SOCIAL_LINK_SOURCES
    ):
        score += 0.15
    if content.content_type in {ContentType.TEXT, ContentType.PDF}:
        score -= 0.1
    return _clamp(score)


def score_freshness(content: NormalizedContent, now: dt.datetime) -> float:
    """Score recency with a step decay over the content's age in days."""
    age = ensure_utc(now) - ensure_utc(content.created_at)
    age_days = age.total_seconds() / _SECONDS_PER_DAY
    for max_age_days, freshness in _FRESHNESS_STEPS:
        if age_days < max_age_days:
            return freshness
    return _STALE_FRESHNESS


def score_content(
    content: NormalizedContent,
    category: Category | str,
    *,
    now: dt.datetime | None = None,
) -> ScoredContent:
    """Score a single content item for ``category``.

    Parameters
    ----------
    content : NormalizedContent
        Content to score. Missing or mistyped ``extracted_data`` fields are
        treated as absent.
    category : Category | str
        Category whose keywords and weights apply. A category name is
        resolved through ``parse_category``.
    now : datetime | None, optional
        Reference time for freshness; defaults to the current UTC time.

    Returns
    -------
    ScoredContent
        The content with its five sub-scores and the weighted final score.

    Raises
    ------
    InvalidCategoryError
        Raised when ``category`` is not a known category.
    """
    category = parse_category(category)
    reference = utc_now() if now is None else now
    scores = ContentScores(
        relevance=score_relevance(content, category),
        quality=score_quality(content),
        credibility=score_credibility(content),
        engagement=score_engagement(content),
        freshness=score_freshness(content, reference),
    )
    final_score = _clamp(round_half_up(scores.weighted_by(CATEGORY_WEIGHTS[category]), 2))
    return ScoredContent(content=content, scores=scores, final_score=final_score)


def rank_scored_content(scored: cabc.Iterable[ScoredContent]) -> list[ScoredContent]:
    """Sort by ``final_score`` descending; equal scores keep input order."""
    return sorted(scored, key=operator.attrgetter("final_score"), reverse=True)


def score_content_batch(
    contents: cabc.Iterable[NormalizedContent],
    category: Category | str,
    *,
    now: dt.datetime | None = None,
) -> list[ScoredContent]:
    """Score every item and return them ranked by ``final_score``.

    All items are scored against the same reference time so freshness is
    consistent within a batch.
    """
    resolved = parse_category(category)
    reference = utc_now() if now is None else now
    return rank_scored_content(
        score_content(content, resolved, now=reference) for content in contents
    )


__all__ = [
    "CATEGORY_KEYWORDS",
    "CATEGORY_WEIGHTS",
    "rank_scored_content",
    "score_content",
    "score_content_batch",
    "score_credibility",
    "score_engagement",
    "score_freshness",
    "score_quality",
    "score_relevance",
]
