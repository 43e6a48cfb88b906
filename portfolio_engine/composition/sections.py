"""Section configuration and content-to-section assignment.

Assignment runs in two passes over the ranked content list. The first pass
fills the hook, credibility, work, and process sections in that order, each
taking the highest-ranked unused items its filter accepts, up to its block
limit. The second pass backfills required sections that fell short of their
minimum from whatever remains, ignoring filters. Content is never placed in
more than one section, and the action section is never fed from content.
"""

from __future__ import annotations

import dataclasses as dc
import types
import typing as typ

from portfolio_engine.logging import get_logger, log_debug

from ._extracted import flag_value, text_value
from .domain import BlockType, ContentSource, ContentType, ScoredContent, SectionId, TextType

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = get_logger(__name__)

type ContentFilter = cabc.Callable[[ScoredContent], bool]
type SectionAssignments = dict[SectionId, list[ScoredContent]]

SOCIAL_PROFILE_SOURCES: typ.Final[frozenset[ContentSource]] = frozenset({
    ContentSource.GITHUB,
    ContentSource.LINKEDIN,
    ContentSource.INSTAGRAM,
    ContentSource.TWITTER,
    ContentSource.TIKTOK,
})

_HOOK_TEXT_TYPES = frozenset({TextType.INTRO, TextType.BIO})
_PROCESS_TEXT_TYPES = frozenset({TextType.ABOUT, TextType.DESCRIPTION, TextType.GENERAL})
_HOOK_SCORE_THRESHOLD = 0.6
_CREDIBILITY_SCORE_THRESHOLD = 0.5
_WORK_QUALITY_THRESHOLD = 0.4


def _text_type(item: ScoredContent) -> str | None:
    return text_value(item.extracted_data, "text_type")


def _accepts_hook(item: ScoredContent) -> bool:
    content = item.content
    if content.content_type is ContentType.VIDEO or content.source is ContentSource.YOUTUBE:
        return True
    if content.content_type is ContentType.TEXT and _text_type(item) in _HOOK_TEXT_TYPES:
        return True
    return item.final_score > _HOOK_SCORE_THRESHOLD


def _accepts_credibility(item: ScoredContent) -> bool:
    content = item.content
    if content.content_type is ContentType.PDF:
        return True
    if content.content_type is ContentType.EXTERNAL_LINK:
        return content.source in SOCIAL_PROFILE_SOURCES
    if content.source is ContentSource.GITHUB:
        return True
    return item.scores.credibility > _CREDIBILITY_SCORE_THRESHOLD


def _accepts_work(item: ScoredContent) -> bool:
    match item.content.content_type:
        case ContentType.IMAGE | ContentType.VIDEO | ContentType.CODE:
            return True
        case ContentType.EXTERNAL_LINK:
            return item.content.source not in SOCIAL_PROFILE_SOURCES
        case ContentType.TEXT | ContentType.PDF:
            return False
        case _:
            return item.scores.quality > _WORK_QUALITY_THRESHOLD


def _accepts_process(item: ScoredContent) -> bool:
    match item.content.content_type:
        case ContentType.TEXT:
            return _text_type(item) in _PROCESS_TEXT_TYPES
        case ContentType.PDF:
            return not flag_value(item.extracted_data, "is_resume")
        case _:
            return False


def _accepts_nothing(_item: ScoredContent) -> bool:
    return False


@dc.dataclass(frozen=True, slots=True)
class SectionConfig:
    """Static placement rules for one section.

    Attributes
    ----------
    section_id : SectionId
        Section the rules apply to.
    order : int
        Render position, starting at 1.
    required : bool
        Whether the section is emitted even when empty.
    min_blocks : int
        Minimum block count the backfill pass tries to reach.
    max_blocks : int
        Maximum number of items the greedy pass assigns.
    preferred_types : tuple[BlockType, ...]
        Block types suited to the section, most preferred first.
    content_filter : ContentFilter
        Predicate deciding which items the greedy pass may take.
    """

    section_id: SectionId
    order: int
    required: bool
    min_blocks: int
    max_blocks: int
    preferred_types: tuple[BlockType, ...]
    content_filter: ContentFilter


SECTION_CONFIGS: typ.Final[cabc.Mapping[SectionId, SectionConfig]] = types.MappingProxyType({
    SectionId.HOOK: SectionConfig(
        section_id=SectionId.HOOK,
        order=1,
        required=True,
        min_blocks=1,
        max_blocks=2,
        preferred_types=(BlockType.METRIC, BlockType.MEDIA, BlockType.EXPANDABLE_TEXT),
        content_filter=_accepts_hook,
    ),
    SectionId.CREDIBILITY: SectionConfig(
        section_id=SectionId.CREDIBILITY,
        order=2,
        required=True,
        min_blocks=1,
        max_blocks=3,
        preferred_types=(
            BlockType.EXPANDABLE_TEXT,
            BlockType.EXTERNAL_LINK,
            BlockType.METRIC,
        ),
        content_filter=_accepts_credibility,
    ),
    SectionId.WORK: SectionConfig(
        section_id=SectionId.WORK,
        order=3,
        required=True,
        min_blocks=1,
        max_blocks=6,
        preferred_types=(
            BlockType.GALLERY,
            BlockType.SCROLL_CONTAINER,
            BlockType.MEDIA,
            BlockType.COMPARISON,
            BlockType.EXTERNAL_LINK,
        ),
        content_filter=_accepts_work,
    ),
    SectionId.PROCESS: SectionConfig(
        section_id=SectionId.PROCESS,
        order=4,
        required=False,
        min_blocks=0,
        max_blocks=2,
        preferred_types=(
            BlockType.TIMELINE,
            BlockType.EXPANDABLE_TEXT,
            BlockType.HOTSPOT_MEDIA,
        ),
        content_filter=_accepts_process,
    ),
    SectionId.ACTION: SectionConfig(
        section_id=SectionId.ACTION,
        order=5,
        required=True,
        min_blocks=1,
        max_blocks=1,
        preferred_types=(BlockType.CTA,),
        content_filter=_accepts_nothing,
    ),
})

# Sections fed from content; the action section holds only the generated cta.
CONTENT_SECTIONS: typ.Final[tuple[SectionId, ...]] = (
    SectionId.HOOK,
    SectionId.CREDIBILITY,
    SectionId.WORK,
    SectionId.PROCESS,
)


def assign_content_to_sections(scored: cabc.Sequence[ScoredContent]) -> SectionAssignments:
    """Partition ranked content into section buckets.

    Parameters
    ----------
    scored : Sequence[ScoredContent]
        Content ranked by ``final_score`` descending.

    Returns
    -------
    dict[SectionId, list[ScoredContent]]
        One entry per section, in section order. The action bucket is always
        empty and the buckets are pairwise disjoint by ``content_id``.
    """
    assignments: SectionAssignments = {section_id: [] for section_id in SECTION_CONFIGS}
    used: set[str] = set()

    def take(section_id: SectionId, candidates: cabc.Iterable[ScoredContent], limit: int) -> None:
        bucket = assignments[section_id]
        for item in candidates:
            if len(bucket) >= limit:
                return
            if item.content_id in used:
                continue
            bucket.append(item)
            used.add(item.content_id)

    for section_id in CONTENT_SECTIONS:
        config = SECTION_CONFIGS[section_id]
        take(
            section_id,
            (item for item in scored if config.content_filter(item)),
            config.max_blocks,
        )

    for section_id in CONTENT_SECTIONS:
        config = SECTION_CONFIGS[section_id]
        if config.required and len(assignments[section_id]) < config.min_blocks:
            take(section_id, scored, config.min_blocks)

    log_debug(
        logger,
        "Assigned %d of %d content items: %s.",
        len(used),
        len(scored),
        ", ".join(f"{section_id}={len(items)}" for section_id, items in assignments.items()),
    )
    return assignments


__all__ = [
    "CONTENT_SECTIONS",
    "SECTION_CONFIGS",
    "SOCIAL_PROFILE_SOURCES",
    "ContentFilter",
    "SectionAssignments",
    "SectionConfig",
    "assign_content_to_sections",
]
