"""Serializers for API-only response payloads.

Domain records are serialized by ``portfolio_engine.composition.wire``; this
module covers the summaries that exist only at the HTTP boundary.
"""

from __future__ import annotations

import typing as typ

from portfolio_engine.composition import (
    CATEGORY_HOOK_TYPES,
    CATEGORY_WEIGHTS,
    content_type_for_platform,
    is_extractable,
    platform_display_name,
    platform_icon,
)

if typ.TYPE_CHECKING:
    from portfolio_engine.composition import Category, ContentSource, Portfolio

    from .types import JsonPayload


def serialize_category(category: Category) -> JsonPayload:
    """Serialize a category with its weights and signature hook block."""
    weights = CATEGORY_WEIGHTS[category]
    return {
        "id": category.value,
        "weights": {
            "relevance": weights.relevance,
            "quality": weights.quality,
            "credibility": weights.credibility,
            "engagement": weights.engagement,
            "freshness": weights.freshness,
        },
        "hook_block_type": CATEGORY_HOOK_TYPES[category].value,
    }


def serialize_platform_detection(url: str, platform: ContentSource) -> JsonPayload:
    """Serialize a platform detection result for a URL."""
    extractable = is_extractable(platform)
    note = (
        f"Content will be extracted from {platform}"
        if extractable
        else f"Link will be saved as clickable {platform} link (no extraction)"
    )
    return {
        "url": url,
        "platform": platform.value,
        "display_name": platform_display_name(platform),
        "icon": platform_icon(platform),
        "content_type": content_type_for_platform(platform).value,
        "extractable": extractable,
        "note": note,
    }


def serialize_processing_summary(portfolio: Portfolio, *, total_inputs: int) -> JsonPayload:
    """Summarize how many inputs, sections, and blocks a composition produced."""
    return {
        "total_inputs": total_inputs,
        "sections_generated": len(portfolio.sections),
        "blocks_generated": portfolio.block_count,
    }
