"""Section, navigation, and portfolio document models."""

from __future__ import annotations

import dataclasses as dc
import itertools
import typing as typ

from .domain import BlockType, Category, SectionId

if typ.TYPE_CHECKING:
    from .blocks import Block

type SectionLayout = typ.Literal["full", "contained", "split"]


@dc.dataclass(frozen=True, slots=True)
class SectionVisibility:
    """Initial visibility of a section and its minimum block count."""

    min_content_required: int
    initial: typ.Literal["visible", "hidden"] = "visible"


@dc.dataclass(frozen=True, slots=True)
class Section:
    """One of the five fixed portfolio sections."""

    section_id: SectionId
    order: int
    layout: SectionLayout
    visibility: SectionVisibility
    blocks: list[Block]


@dc.dataclass(frozen=True, slots=True)
class PortfolioMeta:
    """Display metadata and timestamps for a portfolio."""

    title: str
    subtitle: str
    created_at: str
    updated_at: str
    language: str = "en"
    theme: typ.Literal["light", "dark", "auto"] = "auto"


@dc.dataclass(frozen=True, slots=True)
class DeepLinks:
    """URL templates for linking into a portfolio."""

    enabled: bool
    base_url: str
    section_format: str
    block_format: str


@dc.dataclass(frozen=True, slots=True)
class StatePreservation:
    """Client state restored when a portfolio is reopened."""

    enabled: bool
    restore_scroll_position: bool
    restore_expanded_state: bool


@dc.dataclass(frozen=True, slots=True)
class QuickNavItem:
    """Shortcut entry pointing at a section."""

    label: str
    target_section: SectionId
    icon: str


@dc.dataclass(frozen=True, slots=True)
class QuickNav:
    """Quick navigation bar configuration."""

    enabled: bool
    items: list[QuickNavItem]


@dc.dataclass(frozen=True, slots=True)
class Navigation:
    """Anchors, deep links, and quick navigation for a portfolio."""

    anchors: dict[SectionId, str]
    deep_links: DeepLinks
    state_preservation: StatePreservation
    quick_nav: QuickNav


@dc.dataclass(frozen=True, slots=True)
class Analytics:
    """Client analytics events to record."""

    enabled: bool
    track_events: list[str]


@dc.dataclass(frozen=True, slots=True)
class Portfolio:
    """A composed portfolio document.

    Construction validates the document-level invariants: sections appear in
    strictly ascending order, the action section holds exactly one ``cta``
    block, and block identifiers (including nested children) are unique.

    Raises
    ------
    ValueError
        If any document-level invariant is violated.
    """

    portfolio_id: str
    user_id: str
    category: Category
    meta: PortfolioMeta
    sections: list[Section]
    navigation: Navigation
    analytics: Analytics
    version: str = "v1"

    def __post_init__(self) -> None:
        """Validate ordering, the call-to-action, and block id uniqueness."""
        orders = [section.order for section in self.sections]
        if any(later <= earlier for earlier, later in itertools.pairwise(orders)):
            msg = f"Sections must be strictly ascending by order; got {orders}."
            raise ValueError(msg)

        action = self.section(SectionId.ACTION)
        if action is None or [block.block_type for block in action.blocks] != [
            BlockType.CTA
        ]:
            msg = "The action section must contain exactly one cta block."
            raise ValueError(msg)

        block_ids = [block.block_id for block in self.iter_blocks()]
        if len(block_ids) != len(set(block_ids)):
            msg = "Block identifiers must be unique within a portfolio."
            raise ValueError(msg)

    def section(self, section_id: SectionId) -> Section | None:
        """Return the section with ``section_id`` when it was emitted."""
        return next(
            (section for section in self.sections if section.section_id == section_id),
            None,
        )

    def iter_blocks(self) -> typ.Iterator[Block]:
        """Yield every block in document order, including nested children."""
        for section in self.sections:
            for block in section.blocks:
                yield from block.iter_blocks()

    @property
    def block_count(self) -> int:
        """Return the number of top-level blocks across all sections."""
        return sum(len(section.blocks) for section in self.sections)
