"""Portfolio composition: scoring, section assignment, and block building."""

from __future__ import annotations

from .block_builder import build_block, github_profile_summary
from .block_types import CATEGORY_HOOK_TYPES, select_block_type
from .blocks import Block, BlockContent, BlockStyle, BlockVisibility
from .composer import ComposeOptions, build_analytics, build_navigation, compose_portfolio
from .domain import (
    BlockType,
    Category,
    ContentScores,
    ContentSource,
    ContentType,
    JsonMapping,
    NormalizedContent,
    ScoredContent,
    SectionId,
    TextType,
    parse_category,
)
from .errors import (
    InsufficientContentError,
    InvalidCategoryError,
    InvalidContentError,
    PortfolioEngineError,
)
from .identifiers import BlockIdAllocator, format_timestamp, generate_id, utc_now
from .platforms import (
    content_type_for_platform,
    detect_platform,
    extract_github_repo,
    extract_youtube_id,
    is_extractable,
    platform_display_name,
    platform_icon,
)
from .portfolio import Navigation, Portfolio, PortfolioMeta, Section
from .scoring import (
    CATEGORY_KEYWORDS,
    CATEGORY_WEIGHTS,
    rank_scored_content,
    score_content,
    score_content_batch,
)
from .sections import SECTION_CONFIGS, SectionConfig, assign_content_to_sections
from .wire import (
    parse_normalized_content,
    serialize_block,
    serialize_normalized_content,
    serialize_portfolio,
    serialize_scored_content,
)

__all__ = [
    "CATEGORY_HOOK_TYPES",
    "CATEGORY_KEYWORDS",
    "CATEGORY_WEIGHTS",
    "SECTION_CONFIGS",
    "Block",
    "BlockContent",
    "BlockIdAllocator",
    "BlockStyle",
    "BlockType",
    "BlockVisibility",
    "Category",
    "ComposeOptions",
    "ContentScores",
    "ContentSource",
    "ContentType",
    "InsufficientContentError",
    "InvalidCategoryError",
    "InvalidContentError",
    "JsonMapping",
    "Navigation",
    "NormalizedContent",
    "Portfolio",
    "PortfolioEngineError",
    "PortfolioMeta",
    "ScoredContent",
    "Section",
    "SectionConfig",
    "SectionId",
    "TextType",
    "assign_content_to_sections",
    "build_analytics",
    "build_block",
    "build_navigation",
    "compose_portfolio",
    "content_type_for_platform",
    "detect_platform",
    "extract_github_repo",
    "extract_youtube_id",
    "format_timestamp",
    "generate_id",
    "github_profile_summary",
    "is_extractable",
    "parse_category",
    "parse_normalized_content",
    "platform_display_name",
    "platform_icon",
    "rank_scored_content",
    "score_content",
    "score_content_batch",
    "select_block_type",
    "serialize_block",
    "serialize_normalized_content",
    "serialize_portfolio",
    "serialize_scored_content",
    "utc_now",
]
