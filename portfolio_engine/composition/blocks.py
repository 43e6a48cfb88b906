"""Block payload variants.

Each ``BlockType`` has exactly one payload dataclass, tagged with a ``kind``
class attribute. ``Block`` refuses a payload whose ``kind`` does not match its
``block_type``, so a block and its content can never disagree. Field names are
the wire names used by client renderers.
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

from .domain import BlockType

if typ.TYPE_CHECKING:
    from .domain import JsonMapping


class VisibilityState(enum.StrEnum):
    """Initial disclosure state of a block."""

    COLLAPSED = "collapsed"
    EXPANDED = "expanded"


class Priority(enum.StrEnum):
    """Render priority hint for a block."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Padding(enum.StrEnum):
    """Padding presets understood by renderers."""

    NONE = "none"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dc.dataclass(frozen=True, slots=True)
class BlockVisibility:
    """Disclosure state and priority of a block."""

    initial: VisibilityState
    priority: Priority


@dc.dataclass(frozen=True, slots=True)
class BlockStyle:
    """Presentation hints for a block."""

    padding: Padding


# media


@dc.dataclass(frozen=True, slots=True)
class MediaSource:
    """A playable or displayable media URL."""

    url: str
    quality: typ.Literal["high", "medium", "low"]
    mime_type: str


@dc.dataclass(frozen=True, slots=True)
class MediaThumbnail:
    """Poster image shown before media loads."""

    url: str
    blurhash: str | None


@dc.dataclass(frozen=True, slots=True)
class MediaPlayback:
    """Playback behaviour for video media."""

    autoplay: bool
    loop: bool
    muted: bool
    controls: bool


@dc.dataclass(frozen=True, slots=True)
class MediaContent:
    """Payload of a ``media`` block."""

    kind: typ.ClassVar[BlockType] = BlockType.MEDIA

    media_type: typ.Literal["video", "image"]
    sources: list[MediaSource]
    thumbnail: MediaThumbnail
    alt_text: str
    caption: str | None
    playback: MediaPlayback | None
    aspect_ratio: str


# expandable_text


@dc.dataclass(frozen=True, slots=True)
class TextPreview:
    """Collapsed text excerpt."""

    text: str
    max_lines: int


@dc.dataclass(frozen=True, slots=True)
class FullContent:
    """Expanded text body."""

    text: str
    format: typ.Literal["plain", "markdown"]


@dc.dataclass(frozen=True, slots=True)
class ExpandableTextContent:
    """Payload of an ``expandable_text`` block."""

    kind: typ.ClassVar[BlockType] = BlockType.EXPANDABLE_TEXT

    preview: TextPreview
    full_content: FullContent
    header: str
    tags: list[str]


# metric


@dc.dataclass(frozen=True, slots=True)
class MetricTrend:
    """Direction and magnitude of a metric's change."""

    direction: typ.Literal["up", "down", "neutral"]
    percentage: int


@dc.dataclass(frozen=True, slots=True)
class Metric:
    """A single labelled figure."""

    label: str
    value: str
    unit: str | None
    trend: MetricTrend | None


@dc.dataclass(frozen=True, slots=True)
class MetricContent:
    """Payload of a ``metric`` block."""

    kind: typ.ClassVar[BlockType] = BlockType.METRIC

    metrics: list[Metric]
    layout: typ.Literal["horizontal", "grid"]
    style: str


# comparison


@dc.dataclass(frozen=True, slots=True)
class ComparisonImage:
    """One side of a before/after comparison."""

    url: str
    label: str


@dc.dataclass(frozen=True, slots=True)
class ComparisonSlider:
    """Slider configuration for a comparison."""

    initial_position: int
    orientation: typ.Literal["horizontal", "vertical"]


@dc.dataclass(frozen=True, slots=True)
class ComparisonContent:
    """Payload of a ``comparison`` block."""

    kind: typ.ClassVar[BlockType] = BlockType.COMPARISON

    before: ComparisonImage
    after: ComparisonImage
    slider: ComparisonSlider
    caption: str | None


# gallery


@dc.dataclass(frozen=True, slots=True)
class GalleryItem:
    """One image in a gallery."""

    url: str
    thumbnail_url: str
    caption: str | None
    media_type: typ.Literal["image", "video"]


@dc.dataclass(frozen=True, slots=True)
class GalleryLayout:
    """Grid arrangement for gallery items."""

    type: typ.Literal["grid", "carousel", "masonry"]
    columns: int


@dc.dataclass(frozen=True, slots=True)
class GalleryLightbox:
    """Full-screen viewer settings."""

    enabled: bool
    show_captions: bool


@dc.dataclass(frozen=True, slots=True)
class GalleryContent:
    """Payload of a ``gallery`` block."""

    kind: typ.ClassVar[BlockType] = BlockType.GALLERY

    items: list[GalleryItem]
    layout: GalleryLayout
    lightbox: GalleryLightbox


# timeline


@dc.dataclass(frozen=True, slots=True)
class TimelineMarker:
    """Icon and colour marking a timeline entry."""

    icon: str
    color: str


@dc.dataclass(frozen=True, slots=True)
class TimelineEntry:
    """One dated entry on a timeline."""

    date: str
    title: str
    description: str
    marker: TimelineMarker


@dc.dataclass(frozen=True, slots=True)
class TimelineContent:
    """Payload of a ``timeline`` block."""

    kind: typ.ClassVar[BlockType] = BlockType.TIMELINE

    entries: list[TimelineEntry]
    orientation: typ.Literal["vertical", "horizontal"]
    style: str


# external_link


@dc.dataclass(frozen=True, slots=True)
class LinkPreview:
    """Card preview for an external link."""

    title: str
    description: str
    thumbnail_url: str | None
    favicon_url: str | None


@dc.dataclass(frozen=True, slots=True)
class ExternalLinkContent:
    """Payload of an ``external_link`` block."""

    kind: typ.ClassVar[BlockType] = BlockType.EXTERNAL_LINK

    url: str
    platform: str
    preview: LinkPreview
    style: typ.Literal["card", "button", "minimal"]
    open_in: typ.Literal["browser", "in_app"]


# scroll_container


@dc.dataclass(frozen=True, slots=True)
class ScrollSnap:
    """Snap behaviour of a scroll container."""

    enabled: bool
    alignment: typ.Literal["start", "center", "end"]


@dc.dataclass(frozen=True, slots=True)
class ScrollIndicators:
    """Page indicators of a scroll container."""

    show: bool
    style: str


@dc.dataclass(frozen=True, slots=True)
class ScrollContainerContent:
    """Payload of a ``scroll_container`` block."""

    kind: typ.ClassVar[BlockType] = BlockType.SCROLL_CONTAINER

    scroll_direction: typ.Literal["horizontal", "vertical"]
    children: list[Block]
    snap: ScrollSnap
    indicators: ScrollIndicators


# hotspot_media


@dc.dataclass(frozen=True, slots=True)
class HotspotBaseMedia:
    """Image that hotspots are placed on."""

    url: str
    media_type: typ.Literal["image"]


@dc.dataclass(frozen=True, slots=True)
class HotspotInteraction:
    """Tap behaviour for hotspots."""

    tap_behavior: str
    animation: str


@dc.dataclass(frozen=True, slots=True)
class HotspotMediaContent:
    """Payload of a ``hotspot_media`` block."""

    kind: typ.ClassVar[BlockType] = BlockType.HOTSPOT_MEDIA

    base_media: HotspotBaseMedia
    hotspots: list[JsonMapping]
    interaction: HotspotInteraction


# cta


@dc.dataclass(frozen=True, slots=True)
class CtaPrimaryAction:
    """Main call-to-action button."""

    label: str
    action_type: str
    payload: JsonMapping
    style: typ.Literal["filled", "outlined", "text"]


@dc.dataclass(frozen=True, slots=True)
class CtaSecondaryAction:
    """Optional secondary action shown beside the primary button."""

    label: str
    action_type: str
    payload: JsonMapping


@dc.dataclass(frozen=True, slots=True)
class CtaContent:
    """Payload of a ``cta`` block."""

    kind: typ.ClassVar[BlockType] = BlockType.CTA

    primary_action: CtaPrimaryAction
    secondary_action: CtaSecondaryAction | None
    urgency_text: str | None


type BlockContent = (
    MediaContent
    | ExpandableTextContent
    | MetricContent
    | ComparisonContent
    | GalleryContent
    | TimelineContent
    | ExternalLinkContent
    | ScrollContainerContent
    | HotspotMediaContent
    | CtaContent
)


@dc.dataclass(frozen=True, slots=True)
class Block:
    """A renderable unit inside a section."""

    block_id: str
    block_type: BlockType
    content: BlockContent
    visibility: BlockVisibility
    style: BlockStyle

    def __post_init__(self) -> None:
        """Validate that the payload variant matches the block type."""
        if type(self.content).kind is not self.block_type:
            msg = (
                f"Block {self.block_id!r} declares type {self.block_type!s} "
                f"but carries {type(self.content).__name__}."
            )
            raise ValueError(msg)

    def iter_blocks(self) -> typ.Iterator[Block]:
        """Yield this block followed by any nested child blocks."""
        yield self
        if isinstance(self.content, ScrollContainerContent):
            for child in self.content.children:
                yield from child.iter_blocks()
