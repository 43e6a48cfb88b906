"""Block type selection for assigned content."""

from __future__ import annotations

import types
import typing as typ

from ._extracted import flag_value
from .domain import BlockType, Category, ContentSource, ContentType, ScoredContent, SectionId
from .sections import SECTION_CONFIGS

if typ.TYPE_CHECKING:
    import collections.abc as cabc

CATEGORY_HOOK_TYPES: typ.Final[cabc.Mapping[Category, BlockType]] = types.MappingProxyType({
    Category.FINANCE: BlockType.METRIC,
    Category.ENTERTAINMENT: BlockType.MEDIA,
    Category.DESIGN: BlockType.COMPARISON,
    Category.LEGAL: BlockType.EXPANDABLE_TEXT,
    Category.TECH: BlockType.MEDIA,
    Category.MARKETING: BlockType.METRIC,
    Category.INFLUENCERS: BlockType.MEDIA,
    Category.BUSINESS: BlockType.METRIC,
})

CONTENT_TYPE_BLOCKS: typ.Final[cabc.Mapping[ContentType, BlockType]] = types.MappingProxyType({
    ContentType.VIDEO: BlockType.MEDIA,
    ContentType.IMAGE: BlockType.MEDIA,
    ContentType.PDF: BlockType.EXPANDABLE_TEXT,
    ContentType.TEXT: BlockType.EXPANDABLE_TEXT,
    ContentType.CODE: BlockType.EXPANDABLE_TEXT,
    ContentType.EXTERNAL_LINK: BlockType.EXTERNAL_LINK,
})

# Content types rendered the same way whichever section they land in.
_FIXED_BLOCK_TYPES = frozenset({ContentType.PDF, ContentType.TEXT, ContentType.EXTERNAL_LINK})


def select_block_type(
    item: ScoredContent,
    section_id: SectionId,
    category: Category,
) -> BlockType:
    """Choose the block type used to render ``item`` in ``section_id``.

    Documents, text, and links keep their natural block type everywhere, and
    GitHub profiles always render as link cards. Otherwise the hook section
    uses the category's signature block, and other sections use the content
    type's natural block when the section prefers it, falling back to the
    section's first preference.
    """
    content = item.content
    if content.content_type in _FIXED_BLOCK_TYPES:
        return CONTENT_TYPE_BLOCKS[content.content_type]
    if content.source is ContentSource.GITHUB and flag_value(item.extracted_data, "is_profile"):
        return BlockType.EXTERNAL_LINK
    if section_id is SectionId.HOOK:
        return CATEGORY_HOOK_TYPES[category]

    preferred = SECTION_CONFIGS[section_id].preferred_types
    mapped = CONTENT_TYPE_BLOCKS[content.content_type]
    return mapped if mapped in preferred else preferred[0]


__all__ = ["CATEGORY_HOOK_TYPES", "CONTENT_TYPE_BLOCKS", "select_block_type"]
