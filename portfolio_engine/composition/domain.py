"""Domain models for portfolio composition.

Closed vocabularies (categories, content types, sources, sections and block
types) are ``StrEnum`` members whose values are the wire strings consumed by
client renderers.
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

from .errors import InvalidCategoryError

if typ.TYPE_CHECKING:
    import datetime as dt

type JsonMapping = dict[str, object]


class Category(enum.StrEnum):
    """Professional domains that drive scoring weights and hook blocks."""

    FINANCE = "Finance"
    ENTERTAINMENT = "Entertainment"
    DESIGN = "Design"
    LEGAL = "Legal"
    TECH = "Tech"
    MARKETING = "Marketing"
    INFLUENCERS = "Influencers"
    BUSINESS = "Business"


class ContentType(enum.StrEnum):
    """Kinds of normalized content produced by ingestion handlers."""

    VIDEO = "video"
    IMAGE = "image"
    PDF = "pdf"
    TEXT = "text"
    CODE = "code"
    EXTERNAL_LINK = "external_link"


class ContentSource(enum.StrEnum):
    """Platform tags recorded against normalized content."""

    YOUTUBE = "youtube"
    GITHUB = "github"
    UPLOAD = "upload"
    INPUT = "input"
    INSTAGRAM = "instagram"
    LINKEDIN = "linkedin"
    TIKTOK = "tiktok"
    TWITTER = "twitter"
    BEHANCE = "behance"
    DRIBBBLE = "dribbble"
    WEBSITE = "website"
    OTHER = "other"


class TextType(enum.StrEnum):
    """Roles a free-text item can play, read from ``extracted_data``."""

    BIO = "bio"
    INTRO = "intro"
    ABOUT = "about"
    TESTIMONIAL = "testimonial"
    DESCRIPTION = "description"
    GENERAL = "general"


class SectionId(enum.StrEnum):
    """The five fixed portfolio sections, declared in render order."""

    HOOK = "hook"
    CREDIBILITY = "credibility"
    WORK = "work"
    PROCESS = "process"
    ACTION = "action"


class BlockType(enum.StrEnum):
    """Renderable block variants understood by client renderers."""

    MEDIA = "media"
    EXPANDABLE_TEXT = "expandable_text"
    METRIC = "metric"
    COMPARISON = "comparison"
    GALLERY = "gallery"
    TIMELINE = "timeline"
    EXTERNAL_LINK = "external_link"
    SCROLL_CONTAINER = "scroll_container"
    HOTSPOT_MEDIA = "hotspot_media"
    CTA = "cta"


def parse_category(raw_value: object) -> Category:
    """Resolve a category name into a ``Category`` member.

    Raises
    ------
    InvalidCategoryError
        Raised when ``raw_value`` is not one of the eight category names.
    """
    if isinstance(raw_value, Category):
        return raw_value
    if isinstance(raw_value, str):
        try:
            return Category(raw_value)
        except ValueError:
            pass
    raise InvalidCategoryError(raw_value)


@dc.dataclass(frozen=True, slots=True)
class NormalizedContent:
    """A content record as produced by an ingestion handler.

    Attributes
    ----------
    content_id : str
        Identifier unique within one composition request.
    content_type : ContentType
        Kind of content; serialized as ``type`` on the wire.
    source : ContentSource
        Platform the content came from.
    title : str
        Display title, possibly empty.
    description : str
        Free-form description, possibly empty.
    created_at : dt.datetime
        Creation timestamp used for freshness scoring.
    original_url : str | None
        URL the content was fetched from, when it has one.
    file_path : str | None
        Storage path of an uploaded file, when it has one.
    extracted_data : JsonMapping
        Open map of type-specific fields; every key is optional.
    """

    content_id: str
    content_type: ContentType
    source: ContentSource
    title: str
    description: str
    created_at: dt.datetime
    original_url: str | None = None
    file_path: str | None = None
    extracted_data: JsonMapping = dc.field(default_factory=dict)


@dc.dataclass(frozen=True, slots=True)
class ContentScores:
    """Five scoring dimensions, each in the range [0, 1].

    The same shape doubles as a category weight vector, in which case the
    components sum to 1.0.
    """

    relevance: float
    quality: float
    credibility: float
    engagement: float
    freshness: float

    def total(self) -> float:
        """Return the sum of all five components."""
        return (
            self.relevance
            + self.quality
            + self.credibility
            + self.engagement
            + self.freshness
        )

    def weighted_by(self, weights: ContentScores) -> float:
        """Return the dot product of these scores with ``weights``."""
        return (
            self.relevance * weights.relevance
            + self.quality * weights.quality
            + self.credibility * weights.credibility
            + self.engagement * weights.engagement
            + self.freshness * weights.freshness
        )


@dc.dataclass(frozen=True, slots=True)
class ScoredContent:
    """Normalized content annotated with sub-scores and a final score."""

    content: NormalizedContent
    scores: ContentScores
    final_score: float

    @property
    def content_id(self) -> str:
        """Return the wrapped content identifier."""
        return self.content.content_id

    @property
    def extracted_data(self) -> JsonMapping:
        """Return the wrapped content's extracted data."""
        return self.content.extracted_data
