"""Portfolio assembly.

``compose_portfolio`` runs section assignment, block type selection, and
block construction over ranked content, then wraps the sections with
navigation and analytics. Identifiers and timestamps come from injectable
sources; everything else is a pure function of the inputs.

Examples
--------
>>> scored = score_content_batch(contents, Category.DESIGN)
>>> portfolio = compose_portfolio(
...     scored,
...     ComposeOptions(user_id="u_1", category=Category.DESIGN, title="Ada"),
... )
>>> [section.section_id for section in portfolio.sections][-1]
<SectionId.ACTION: 'action'>
"""

from __future__ import annotations

import dataclasses as dc
import types
import typing as typ

from portfolio_engine.logging import get_logger, log_info

from .block_builder import build_block
from .block_types import select_block_type
from .blocks import (
    Block,
    BlockStyle,
    BlockVisibility,
    CtaContent,
    CtaPrimaryAction,
    CtaSecondaryAction,
    Padding,
    Priority,
    VisibilityState,
)
from .domain import BlockType, Category, SectionId, parse_category
from .errors import InsufficientContentError
from .identifiers import (
    PORTFOLIO_ID_PREFIX,
    BlockIdAllocator,
    format_timestamp,
    generate_id,
    utc_now,
)
from .portfolio import (
    Analytics,
    DeepLinks,
    Navigation,
    Portfolio,
    PortfolioMeta,
    QuickNav,
    QuickNavItem,
    Section,
    SectionVisibility,
    StatePreservation,
)
from .sections import CONTENT_SECTIONS, SECTION_CONFIGS, assign_content_to_sections

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .domain import ScoredContent
    from .identifiers import Clock, IdFactory

logger = get_logger(__name__)

DEEP_LINK_SCHEME = "reshuffle://portfolio"

QUICK_NAV_LABELS: typ.Final[cabc.Mapping[SectionId, tuple[str, str]]] = (
    types.MappingProxyType({
        SectionId.HOOK: ("Overview", "star.fill"),
        SectionId.CREDIBILITY: ("About", "person.fill"),
        SectionId.WORK: ("Work", "briefcase.fill"),
        SectionId.PROCESS: ("Process", "gearshape.fill"),
        SectionId.ACTION: ("Contact", "message.fill"),
    })
)

TRACKED_EVENTS: typ.Final[tuple[str, ...]] = (
    "portfolio_view",
    "section_view",
    "block_interaction",
    "cta_click",
    "external_link_click",
    "share",
)


@dc.dataclass(frozen=True, slots=True)
class ComposeOptions:
    """Caller-supplied inputs for one composition.

    Attributes
    ----------
    user_id : str
        Owner of the portfolio; carried in the contact action payload.
    category : Category
        Category the content was scored against. A category name is resolved
        to its ``Category`` member.
    title : str
        Portfolio title.
    subtitle : str
        Portfolio subtitle.
    min_content_items : int
        Minimum number of content items required; ``0`` accepts an empty
        list and yields the bare section skeleton.
    """

    user_id: str
    category: Category
    title: str
    subtitle: str = ""
    min_content_items: int = 0

    def __post_init__(self) -> None:
        """Resolve the category, rejecting unknown names."""
        object.__setattr__(self, "category", parse_category(self.category))


def _build_section(
    section_id: SectionId,
    items: cabc.Sequence[ScoredContent],
    category: Category,
    allocator: BlockIdAllocator,
    clock: Clock,
) -> Section:
    config = SECTION_CONFIGS[section_id]
    blocks = [
        build_block(
            item,
            select_block_type(item, section_id, category),
            section_id,
            allocator=allocator,
            clock=clock,
        )
        for item in items
    ]
    return Section(
        section_id=section_id,
        order=config.order,
        layout="full" if section_id is SectionId.HOOK else "contained",
        visibility=SectionVisibility(min_content_required=config.min_blocks),
        blocks=blocks,
    )


def _build_action_section(user_id: str, allocator: BlockIdAllocator) -> Section:
    config = SECTION_CONFIGS[SectionId.ACTION]
    cta = Block(
        block_id=allocator.allocate(),
        block_type=BlockType.CTA,
        content=CtaContent(
            primary_action=CtaPrimaryAction(
                label="Get in Touch",
                action_type="open_chat",
                payload={"user_id": user_id},
                style="filled",
            ),
            secondary_action=CtaSecondaryAction(
                label="Save Card",
                action_type="save_card",
                payload={},
            ),
            urgency_text=None,
        ),
        visibility=BlockVisibility(initial=VisibilityState.EXPANDED, priority=Priority.HIGH),
        style=BlockStyle(padding=Padding.LARGE),
    )
    return Section(
        section_id=SectionId.ACTION,
        order=config.order,
        layout="contained",
        visibility=SectionVisibility(min_content_required=config.min_blocks),
        blocks=[cta],
    )


def build_navigation(portfolio_id: str, sections: cabc.Sequence[Section]) -> Navigation:
    """Build anchors, deep-link templates, and quick navigation for sections."""
    base_url = f"{DEEP_LINK_SCHEME}/{portfolio_id}"
    items: list[QuickNavItem] = []
    for section in sections:
        label, icon = QUICK_NAV_LABELS[section.section_id]
        items.append(QuickNavItem(label=label, target_section=section.section_id, icon=icon))
    return Navigation(
        anchors={section.section_id: f"section_{section.section_id}" for section in sections},
        deep_links=DeepLinks(
            enabled=True,
            base_url=base_url,
            section_format=f"{base_url}/{{section_id}}",
            block_format=f"{base_url}/block/{{block_id}}",
        ),
        state_preservation=StatePreservation(
            enabled=True,
            restore_scroll_position=True,
            restore_expanded_state=True,
        ),
        quick_nav=QuickNav(enabled=True, items=items),
    )


def build_analytics() -> Analytics:
    """Return the fixed analytics configuration."""
    return Analytics(enabled=True, track_events=list(TRACKED_EVENTS))


def compose_portfolio(
    scored: cabc.Sequence[ScoredContent],
    options: ComposeOptions,
    *,
    id_factory: IdFactory = generate_id,
    clock: Clock = utc_now,
) -> Portfolio:
    """Compose a portfolio document from ranked, scored content.

    Parameters
    ----------
    scored : Sequence[ScoredContent]
        Content ranked by ``final_score`` descending, as returned by
        ``score_content_batch``.
    options : ComposeOptions
        Owner, category, titles, and the minimum content guard.
    id_factory : IdFactory, optional
        Source of portfolio and block identifiers.
    clock : Clock, optional
        Time source for the document timestamps.

    Returns
    -------
    Portfolio
        Required sections (hook, credibility, work, action) are always
        present; the process section only when content was assigned to it.

    Raises
    ------
    InsufficientContentError
        If fewer than ``options.min_content_items`` items are supplied.
    """
    if len(scored) < options.min_content_items:
        raise InsufficientContentError(
            required=options.min_content_items,
            available=len(scored),
        )

    portfolio_id = id_factory(PORTFOLIO_ID_PREFIX)
    allocator = BlockIdAllocator(id_factory)
    assignments = assign_content_to_sections(scored)

    sections: list[Section] = []
    for section_id in CONTENT_SECTIONS:
        items = assignments[section_id]
        if not items and not SECTION_CONFIGS[section_id].required:
            continue
        sections.append(_build_section(section_id, items, options.category, allocator, clock))
    sections.append(_build_action_section(options.user_id, allocator))

    timestamp = format_timestamp(clock())
    portfolio = Portfolio(
        portfolio_id=portfolio_id,
        user_id=options.user_id,
        category=options.category,
        meta=PortfolioMeta(
            title=options.title,
            subtitle=options.subtitle,
            created_at=timestamp,
            updated_at=timestamp,
        ),
        sections=sections,
        navigation=build_navigation(portfolio_id, sections),
        analytics=build_analytics(),
    )
    log_info(
        logger,
        "Composed portfolio %s for user %s: category=%s sections=%d blocks=%d inputs=%d.",
        portfolio_id,
        options.user_id,
        options.category,
        len(sections),
        portfolio.block_count,
        len(scored),
    )
    return portfolio


__all__ = [
    "QUICK_NAV_LABELS",
    "TRACKED_EVENTS",
    "ComposeOptions",
    "build_analytics",
    "build_navigation",
    "compose_portfolio",
]
