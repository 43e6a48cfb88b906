"""Unit tests for section configuration and content-to-section assignment."""

from __future__ import annotations

import typing as typ

import pytest
from _content_factories import make_scored, with_scores

from portfolio_engine.composition import (
    SECTION_CONFIGS,
    ContentSource,
    ContentType,
    SectionId,
    assign_content_to_sections,
)
from portfolio_engine.composition.sections import CONTENT_SECTIONS

if typ.TYPE_CHECKING:
    from portfolio_engine.composition import ScoredContent


def _ids(items: list[ScoredContent]) -> list[str]:
    return [item.content_id for item in items]


def test_section_orders_follow_declaration() -> None:
    """Sections are ordered hook, credibility, work, process, action."""
    orders = [(section_id, config.order) for section_id, config in SECTION_CONFIGS.items()]

    assert orders == [
        (SectionId.HOOK, 1),
        (SectionId.CREDIBILITY, 2),
        (SectionId.WORK, 3),
        (SectionId.PROCESS, 4),
        (SectionId.ACTION, 5),
    ]
    assert SectionId.ACTION not in CONTENT_SECTIONS


def test_only_process_is_optional() -> None:
    """Every section except process is required."""
    optional = [sid for sid, config in SECTION_CONFIGS.items() if not config.required]

    assert optional == [SectionId.PROCESS]


def test_assignment_returns_every_section_for_empty_input() -> None:
    """Empty input yields five empty buckets."""
    assignments = assign_content_to_sections([])

    assert list(assignments) == list(SectionId)
    assert all(not items for items in assignments.values())


def test_hook_accepts_videos_and_intro_text_up_to_limit() -> None:
    """The hook takes videos and intro text, at most two items."""
    scored = [
        make_scored(
            content_id="c_video",
            content_type=ContentType.VIDEO,
            source=ContentSource.UPLOAD,
            final_score=0.9,
        ),
        make_scored(
            content_id="c_intro",
            extracted_data={"text_type": "intro"},
            final_score=0.8,
        ),
        make_scored(
            content_id="c_bio",
            extracted_data={"text_type": "bio"},
            final_score=0.7,
        ),
    ]

    assignments = assign_content_to_sections(scored)

    assert _ids(assignments[SectionId.HOOK]) == ["c_video", "c_intro"], (
        "Expected the two highest-ranked hook candidates."
    )


def test_credibility_takes_documents_and_social_profiles() -> None:
    """PDFs, GitHub content, and social profile links land in credibility."""
    scored = [
        make_scored(
            content_id="c_pdf",
            content_type=ContentType.PDF,
            source=ContentSource.UPLOAD,
            final_score=0.5,
        ),
        make_scored(
            content_id="c_linkedin",
            content_type=ContentType.EXTERNAL_LINK,
            source=ContentSource.LINKEDIN,
            final_score=0.45,
        ),
        make_scored(
            content_id="c_repo",
            content_type=ContentType.CODE,
            source=ContentSource.GITHUB,
            final_score=0.4,
        ),
    ]

    assignments = assign_content_to_sections(scored)

    assert _ids(assignments[SectionId.CREDIBILITY]) == ["c_pdf", "c_linkedin", "c_repo"]


def test_work_rejects_social_links_and_accepts_portfolio_links() -> None:
    """Non-social links are work samples; social profiles are not."""
    scored = [
        make_scored(
            content_id="c_behance",
            content_type=ContentType.EXTERNAL_LINK,
            source=ContentSource.BEHANCE,
            final_score=0.5,
            scores=with_scores(credibility=0.2),
        ),
        make_scored(
            content_id="c_image",
            content_type=ContentType.IMAGE,
            source=ContentSource.UPLOAD,
            final_score=0.4,
            scores=with_scores(credibility=0.2),
        ),
    ]

    assignments = assign_content_to_sections(scored)

    assert _ids(assignments[SectionId.WORK]) == ["c_behance", "c_image"]


def test_process_excludes_resumes() -> None:
    """Resume PDFs never land in the process section."""
    scored = [
        make_scored(
            content_id=f"c_pdf_{index}",
            content_type=ContentType.PDF,
            extracted_data={"is_resume": index == 3},
        )
        for index in range(5)
    ]

    assignments = assign_content_to_sections(scored)

    assert _ids(assignments[SectionId.CREDIBILITY]) == ["c_pdf_0", "c_pdf_1", "c_pdf_2"]
    assert _ids(assignments[SectionId.PROCESS]) == ["c_pdf_4"], (
        "Expected the resume to be skipped by the process filter."
    )


def test_backfill_fills_required_sections_from_leftovers() -> None:
    """Required sections left empty are backfilled ignoring filters."""
    low = with_scores(credibility=0.3)
    scored = [
        make_scored(
            content_id=f"c_{index}",
            extracted_data={"text_type": "testimonial"},
            final_score=0.3,
            scores=low,
        )
        for index in range(1, 4)
    ]

    assignments = assign_content_to_sections(scored)

    assert _ids(assignments[SectionId.HOOK]) == ["c_1"]
    assert _ids(assignments[SectionId.CREDIBILITY]) == ["c_2"]
    assert _ids(assignments[SectionId.WORK]) == ["c_3"]
    assert assignments[SectionId.PROCESS] == []


def test_backfill_never_exceeds_minimum() -> None:
    """Backfill stops at the section minimum and leaves the rest unused."""
    low = with_scores(credibility=0.3)
    scored = [
        make_scored(
            content_id=f"c_{index}",
            extracted_data={"text_type": "testimonial"},
            final_score=0.2,
            scores=low,
        )
        for index in range(6)
    ]

    assignments = assign_content_to_sections(scored)

    assigned = sum(len(items) for items in assignments.values())
    assert assigned == 3, "Expected one backfilled item per required content section."


@pytest.mark.parametrize("count", [1, 4, 12])
def test_sections_never_share_content(count: int) -> None:
    """No content item is assigned to more than one section."""
    scored = [
        make_scored(
            content_id=f"c_{index}",
            content_type=ContentType.VIDEO,
            source=ContentSource.YOUTUBE,
            final_score=0.9,
        )
        for index in range(count)
    ]

    assignments = assign_content_to_sections(scored)

    ids = [item.content_id for items in assignments.values() for item in items]
    assert len(ids) == len(set(ids)), "Expected disjoint section assignments."
    assert assignments[SectionId.ACTION] == []
    for section_id, items in assignments.items():
        assert len(items) <= SECTION_CONFIGS[section_id].max_blocks
