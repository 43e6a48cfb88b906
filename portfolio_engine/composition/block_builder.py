"""Block payload construction.

``build_block`` turns one scored content item into a block of the requested
type. Builders read ``extracted_data`` through the tolerant readers in
``_extracted`` and substitute fixed fallbacks for anything missing, so no
builder raises on sparse content.
"""

from __future__ import annotations

import types
import typing as typ

from ._extracted import (
    compact_number,
    flag_value,
    number_value,
    plain_number,
    positive_number,
    round_half_up,
    string_list,
    text_value,
    top_repositories,
)
from .blocks import (
    Block,
    BlockStyle,
    BlockVisibility,
    ComparisonContent,
    ComparisonImage,
    ComparisonSlider,
    CtaContent,
    CtaPrimaryAction,
    ExpandableTextContent,
    ExternalLinkContent,
    FullContent,
    GalleryContent,
    GalleryItem,
    GalleryLayout,
    GalleryLightbox,
    HotspotBaseMedia,
    HotspotInteraction,
    HotspotMediaContent,
    LinkPreview,
    MediaContent,
    MediaPlayback,
    MediaSource,
    MediaThumbnail,
    Metric,
    MetricContent,
    MetricTrend,
    Padding,
    Priority,
    ScrollContainerContent,
    ScrollIndicators,
    ScrollSnap,
    TextPreview,
    TimelineContent,
    TimelineEntry,
    TimelineMarker,
    VisibilityState,
)
from .domain import BlockType, ContentSource, ContentType, SectionId, TextType
from .identifiers import BlockIdAllocator, format_timestamp, utc_now

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .blocks import BlockContent
    from .domain import ScoredContent
    from .identifiers import Clock

PREVIEW_LENGTH = 200
MAX_TAGS = 5
MAX_METRICS = 4
MAX_PROFILE_REPOSITORIES = 3
HIGH_PRIORITY_SCORE = 0.7

COMPARISON_PLACEHOLDER_URL = "/placeholder-before.jpg"

TEXT_TYPE_HEADERS: typ.Final[cabc.Mapping[TextType, str]] = types.MappingProxyType({
    TextType.BIO: "About Me",
    TextType.INTRO: "Introduction",
    TextType.ABOUT: "About",
    TextType.TESTIMONIAL: "Testimonial",
    TextType.DESCRIPTION: "Description",
})

# Link card platforms; any other source renders as a generic website.
LINK_PLATFORMS: typ.Final[frozenset[ContentSource]] = frozenset({
    ContentSource.INSTAGRAM,
    ContentSource.TIKTOK,
    ContentSource.LINKEDIN,
    ContentSource.GITHUB,
    ContentSource.YOUTUBE,
})


def _is_github_profile(item: ScoredContent) -> bool:
    return item.content.source is ContentSource.GITHUB and flag_value(
        item.extracted_data, "is_profile"
    )


def _image_url(item: ScoredContent) -> str:
    return (
        item.content.file_path
        or text_value(item.extracted_data, "thumbnail_url")
        or ""
    )


def _truncate(text: str, limit: int) -> str:
    return text[:limit] + ("..." if len(text) > limit else "")


def _media_content(item: ScoredContent) -> MediaContent:
    content = item.content
    data = item.extracted_data
    is_video = (
        content.content_type is ContentType.VIDEO or content.source is ContentSource.YOUTUBE
    )
    return MediaContent(
        media_type="video" if is_video else "image",
        sources=[
            MediaSource(
                url=content.file_path or text_value(data, "embed_url") or "",
                quality="high",
                mime_type="video/mp4" if is_video else "image/jpeg",
            ),
        ],
        thumbnail=MediaThumbnail(
            url=text_value(data, "thumbnail_url") or content.file_path or "",
            blurhash=None,
        ),
        alt_text=content.title or "Media content",
        caption=content.description or None,
        playback=(
            MediaPlayback(autoplay=True, loop=True, muted=True, controls=True)
            if is_video
            else None
        ),
        aspect_ratio="16:9",
    )


def github_profile_summary(item: ScoredContent) -> str:
    """Render a GitHub profile's bio, stats, and top repositories as text."""
    data = item.extracted_data
    lines: list[str] = []
    if bio := text_value(data, "bio"):
        lines.append(bio)
    followers = number_value(data, "followers")
    if followers is not None:
        repositories = plain_number(number_value(data, "public_repos") or 0)
        lines.append(
            f"\n\n📊 {plain_number(followers)} followers • {repositories} repositories"
        )
    if location := text_value(data, "location"):
        lines.append(f"📍 {location}")
    if company := text_value(data, "company"):
        lines.append(f"🏢 {company}")
    if top_repos := top_repositories(data):
        lines.append("\n\n🔥 Top Projects:")
        lines.extend(
            f"• {repo.name} - {repo.description or 'No description'} "
            f"(⭐{plain_number(repo.stars)})"
            for repo in top_repos[:MAX_PROFILE_REPOSITORIES]
        )
    return "\n".join(lines) or "GitHub Profile"


def _text_header(item: ScoredContent) -> str:
    header = item.content.title or "Details"
    if item.content.content_type is not ContentType.TEXT:
        return header
    try:
        text_type = TextType(text_value(item.extracted_data, "text_type") or "")
    except ValueError:
        return header
    return TEXT_TYPE_HEADERS.get(text_type, header)


def _expandable_text_content(item: ScoredContent) -> ExpandableTextContent:
    data = item.extracted_data
    if _is_github_profile(item):
        full_text = github_profile_summary(item)
    else:
        full_text = (
            text_value(data, "extracted_text")
            or text_value(data, "description")
            or item.content.description
        )

    tags = string_list(data, "tags")
    if tags is None:
        tags = string_list(data, "topics")
    if tags is None:
        tags = string_list(data, "skills") or []

    return ExpandableTextContent(
        preview=TextPreview(text=_truncate(full_text, PREVIEW_LENGTH), max_lines=3),
        full_content=FullContent(text=full_text, format="plain"),
        header=_text_header(item),
        tags=tags[:MAX_TAGS],
    )


def _metric_content(item: ScoredContent) -> MetricContent:
    data = item.extracted_data
    metrics: list[Metric] = []

    if views := positive_number(data, "view_count"):
        metrics.append(
            Metric(
                label="Views",
                value=compact_number(views),
                unit=None,
                trend=MetricTrend(direction="up", percentage=0),
            ),
        )

    counters: list[tuple[str, str]] = []
    if flag_value(data, "is_profile"):
        counters.extend((("Followers", "followers"), ("Repos", "public_repos")))
    counters.extend((("Stars", "stars"), ("Forks", "forks")))
    for label, key in counters:
        value = number_value(data, key)
        if value is not None:
            metrics.append(
                Metric(label=label, value=compact_number(value), unit=None, trend=None),
            )

    if not metrics:
        quality = int(round_half_up(item.final_score * 100))
        metrics.append(
            Metric(
                label="Quality Score",
                value=str(quality),
                unit="%",
                trend=MetricTrend(direction="up", percentage=10),
            ),
        )

    return MetricContent(
        metrics=metrics[:MAX_METRICS],
        layout="horizontal" if len(metrics) <= 2 else "grid",
        style="prominent",
    )


def _comparison_content(item: ScoredContent) -> ComparisonContent:
    # The "before" image is a fixed placeholder until content can carry pairs.
    return ComparisonContent(
        before=ComparisonImage(url=COMPARISON_PLACEHOLDER_URL, label="Before"),
        after=ComparisonImage(url=_image_url(item), label="After"),
        slider=ComparisonSlider(initial_position=50, orientation="horizontal"),
        caption=item.content.description or None,
    )


def _gallery_content(item: ScoredContent) -> GalleryContent:
    url = _image_url(item)
    return GalleryContent(
        items=[
            GalleryItem(
                url=url,
                thumbnail_url=url,
                caption=item.content.description or None,
                media_type="image",
            ),
        ],
        layout=GalleryLayout(type="grid", columns=2),
        lightbox=GalleryLightbox(enabled=True, show_captions=True),
    )


def _timeline_content(item: ScoredContent, clock: Clock) -> TimelineContent:
    text = text_value(item.extracted_data, "extracted_text") or item.content.description
    return TimelineContent(
        entries=[
            TimelineEntry(
                date=format_timestamp(clock()),
                title=item.content.title or "Entry",
                description=text[:PREVIEW_LENGTH],
                marker=TimelineMarker(icon="circle.fill", color="#007AFF"),
            ),
        ],
        orientation="vertical",
        style="connected",
    )


def _link_description(item: ScoredContent) -> str:
    data = item.extracted_data
    if _is_github_profile(item):
        parts: list[str] = []
        if followers := positive_number(data, "followers"):
            parts.append(f"{compact_number(followers)} followers")
        if public_repos := positive_number(data, "public_repos"):
            parts.append(f"{plain_number(public_repos)} repos")
        if location := text_value(data, "location"):
            parts.append(location)
        return " • ".join(parts) if parts else item.content.description

    stars = number_value(data, "stars")
    if item.content.source is ContentSource.GITHUB and stars is not None:
        parts = []
        if language := text_value(data, "language"):
            parts.append(language)
        parts.append(f"⭐ {compact_number(stars)}")
        if forks := positive_number(data, "forks"):
            parts.append(f"🍴 {compact_number(forks)}")
        return " • ".join(parts)

    return item.content.description


def _external_link_content(item: ScoredContent) -> ExternalLinkContent:
    content = item.content
    platform = content.source if content.source in LINK_PLATFORMS else ContentSource.WEBSITE
    return ExternalLinkContent(
        url=content.original_url or "",
        platform=str(platform),
        preview=LinkPreview(
            title=content.title or "External Link",
            description=_link_description(item),
            thumbnail_url=text_value(item.extracted_data, "thumbnail_url"),
            favicon_url=None,
        ),
        style="card",
        open_in="browser",
    )


def _hotspot_media_content(item: ScoredContent) -> HotspotMediaContent:
    return HotspotMediaContent(
        base_media=HotspotBaseMedia(url=_image_url(item), media_type="image"),
        hotspots=[],
        interaction=HotspotInteraction(tap_behavior="show_tooltip", animation="pulse"),
    )


def _cta_content() -> CtaContent:
    return CtaContent(
        primary_action=CtaPrimaryAction(
            label="Contact",
            action_type="open_chat",
            payload={},
            style="filled",
        ),
        secondary_action=None,
        urgency_text=None,
    )


def build_block(
    item: ScoredContent,
    block_type: BlockType,
    section_id: SectionId,
    *,
    allocator: BlockIdAllocator | None = None,
    clock: Clock | None = None,
) -> Block:
    """Build a block of ``block_type`` for ``item`` placed in ``section_id``.

    Parameters
    ----------
    item : ScoredContent
        Content to render.
    block_type : BlockType
        Block variant to produce.
    section_id : SectionId
        Section the block is placed in; hook blocks start expanded.
    allocator : BlockIdAllocator | None, optional
        Source of block identifiers shared across one document. A fresh
        allocator is used when omitted.
    clock : Clock | None, optional
        Time source for timeline entries; defaults to the current UTC time.

    Returns
    -------
    Block
        The block, with ``high`` priority when ``final_score`` exceeds 0.7.
    """
    ids = BlockIdAllocator() if allocator is None else allocator
    now = utc_now if clock is None else clock
    visibility = BlockVisibility(
        initial=(
            VisibilityState.EXPANDED
            if section_id is SectionId.HOOK
            else VisibilityState.COLLAPSED
        ),
        priority=Priority.HIGH if item.final_score > HIGH_PRIORITY_SCORE else Priority.MEDIUM,
    )
    style = BlockStyle(padding=Padding.MEDIUM)
    block_id = ids.allocate()

    content: BlockContent
    match block_type:
        case BlockType.MEDIA:
            content = _media_content(item)
        case BlockType.EXPANDABLE_TEXT:
            content = _expandable_text_content(item)
        case BlockType.METRIC:
            content = _metric_content(item)
        case BlockType.COMPARISON:
            content = _comparison_content(item)
        case BlockType.GALLERY:
            content = _gallery_content(item)
        case BlockType.TIMELINE:
            content = _timeline_content(item, now)
        case BlockType.EXTERNAL_LINK:
            content = _external_link_content(item)
        case BlockType.SCROLL_CONTAINER:
            child = Block(
                block_id=ids.allocate(),
                block_type=BlockType.MEDIA,
                content=_media_content(item),
                visibility=visibility,
                style=style,
            )
            content = ScrollContainerContent(
                scroll_direction="horizontal",
                children=[child],
                snap=ScrollSnap(enabled=True, alignment="center"),
                indicators=ScrollIndicators(show=True, style="dots"),
            )
        case BlockType.HOTSPOT_MEDIA:
            content = _hotspot_media_content(item)
        case BlockType.CTA:
            content = _cta_content()
        case _:
            typ.assert_never(block_type)

    return Block(
        block_id=block_id,
        block_type=block_type,
        content=content,
        visibility=visibility,
        style=style,
    )


__all__ = [
    "COMPARISON_PLACEHOLDER_URL",
    "TEXT_TYPE_HEADERS",
    "build_block",
    "github_profile_summary",
]
