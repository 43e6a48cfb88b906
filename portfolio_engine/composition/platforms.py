"""URL platform detection.

Maps a submitted URL to the ``ContentSource`` that should handle it, and
exposes display metadata used by link cards and client pickers.
"""

from __future__ import annotations

import dataclasses as dc
import re
import types
import typing as typ

from .domain import ContentSource, ContentType

if typ.TYPE_CHECKING:
    import collections.abc as cabc

# Checked in declaration order; the first matching platform wins.
PLATFORM_PATTERNS: typ.Final[cabc.Mapping[ContentSource, tuple[re.Pattern[str], ...]]] = (
    types.MappingProxyType({
        ContentSource.YOUTUBE: (
            re.compile(r"youtube\.com/watch\?v=", re.IGNORECASE),
            re.compile(r"youtu\.be/", re.IGNORECASE),
            re.compile(r"youtube\.com/shorts/", re.IGNORECASE),
            re.compile(r"youtube\.com/embed/", re.IGNORECASE),
        ),
        ContentSource.GITHUB: (
            re.compile(r"github\.com/[\w-]+/[\w.-]+", re.IGNORECASE),
            re.compile(r"github\.com/[\w-]+/?$", re.IGNORECASE),
        ),
        ContentSource.INSTAGRAM: (
            re.compile(r"instagram\.com/(p|reel|tv)/", re.IGNORECASE),
            re.compile(r"instagr\.am/", re.IGNORECASE),
        ),
        ContentSource.LINKEDIN: (
            re.compile(r"linkedin\.com/(posts|pulse|feed)", re.IGNORECASE),
            re.compile(r"lnkd\.in/", re.IGNORECASE),
        ),
        ContentSource.TIKTOK: (
            re.compile(r"tiktok\.com/@[\w.]+/video/", re.IGNORECASE),
            re.compile(r"vm\.tiktok\.com/", re.IGNORECASE),
        ),
        ContentSource.TWITTER: (
            re.compile(r"twitter\.com/\w+/status/", re.IGNORECASE),
            re.compile(r"x\.com/\w+/status/", re.IGNORECASE),
        ),
        ContentSource.BEHANCE: (re.compile(r"behance\.net/gallery/", re.IGNORECASE),),
        ContentSource.DRIBBBLE: (re.compile(r"dribbble\.com/shots/", re.IGNORECASE),),
    })
)

_YOUTUBE_ID_PATTERNS: typ.Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r"youtube\.com/watch\?v=([a-zA-Z0-9_-]+)"),
    re.compile(r"youtu\.be/([a-zA-Z0-9_-]+)"),
    re.compile(r"youtube\.com/shorts/([a-zA-Z0-9_-]+)"),
    re.compile(r"youtube\.com/embed/([a-zA-Z0-9_-]+)"),
)
_GITHUB_REPO_PATTERN = re.compile(r"github\.com/([^/]+)/([^/?#]+)")

_EXTRACTABLE = frozenset({ContentSource.YOUTUBE, ContentSource.GITHUB})

PLATFORM_DISPLAY_NAMES: typ.Final[cabc.Mapping[ContentSource, str]] = types.MappingProxyType({
    ContentSource.YOUTUBE: "YouTube",
    ContentSource.GITHUB: "GitHub",
    ContentSource.INSTAGRAM: "Instagram",
    ContentSource.LINKEDIN: "LinkedIn",
    ContentSource.TIKTOK: "TikTok",
    ContentSource.TWITTER: "X (Twitter)",
    ContentSource.BEHANCE: "Behance",
    ContentSource.DRIBBBLE: "Dribbble",
    ContentSource.UPLOAD: "Upload",
    ContentSource.INPUT: "Text",
    ContentSource.OTHER: "Link",
})

PLATFORM_ICONS: typ.Final[cabc.Mapping[ContentSource, str]] = types.MappingProxyType({
    ContentSource.YOUTUBE: "play.rectangle.fill",
    ContentSource.GITHUB: "chevron.left.forwardslash.chevron.right",
    ContentSource.INSTAGRAM: "camera.fill",
    ContentSource.LINKEDIN: "briefcase.fill",
    ContentSource.TIKTOK: "music.note",
    ContentSource.TWITTER: "bubble.left.fill",
    ContentSource.BEHANCE: "paintbrush.fill",
    ContentSource.DRIBBBLE: "basketball.fill",
    ContentSource.UPLOAD: "arrow.up.circle.fill",
    ContentSource.INPUT: "text.alignleft",
    ContentSource.OTHER: "link",
})
_DEFAULT_ICON = "link"


@dc.dataclass(frozen=True, slots=True)
class GitHubRepository:
    """Owner and repository name parsed from a GitHub URL."""

    owner: str
    repo: str


def detect_platform(url: str) -> ContentSource:
    """Return the platform a URL belongs to, or ``website`` if none match."""
    for platform, patterns in PLATFORM_PATTERNS.items():
        if any(pattern.search(url) for pattern in patterns):
            return platform
    return ContentSource.WEBSITE


def is_extractable(platform: ContentSource) -> bool:
    """Return True when metadata can be fetched automatically for a platform."""
    return platform in _EXTRACTABLE


def content_type_for_platform(platform: ContentSource) -> ContentType:
    """Return the content type produced when ingesting a platform URL."""
    match platform:
        case ContentSource.YOUTUBE:
            return ContentType.VIDEO
        case ContentSource.GITHUB:
            return ContentType.CODE
        case _:
            return ContentType.EXTERNAL_LINK


def platform_display_name(platform: ContentSource) -> str:
    """Return a human-readable platform name."""
    return PLATFORM_DISPLAY_NAMES.get(platform, str(platform))


def platform_icon(platform: ContentSource) -> str:
    """Return the SF Symbol name used to badge a platform."""
    return PLATFORM_ICONS.get(platform, _DEFAULT_ICON)


def extract_youtube_id(url: str) -> str | None:
    """Return the video identifier from any supported YouTube URL form."""
    for pattern in _YOUTUBE_ID_PATTERNS:
        if match := pattern.search(url):
            return match.group(1)
    return None


def extract_github_repo(url: str) -> GitHubRepository | None:
    """Return the owner and repository named by a GitHub URL."""
    match = _GITHUB_REPO_PATTERN.search(url)
    if match is None:
        return None
    return GitHubRepository(owner=match.group(1), repo=match.group(2).removesuffix(".git"))


__all__ = [
    "PLATFORM_DISPLAY_NAMES",
    "PLATFORM_ICONS",
    "PLATFORM_PATTERNS",
    "GitHubRepository",
    "content_type_for_platform",
    "detect_platform",
    "extract_github_repo",
    "extract_youtube_id",
    "is_extractable",
    "platform_display_name",
    "platform_icon",
]
