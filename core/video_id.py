"""Video identifier extraction from user-pasted YouTube references.

Accepts full watch URLs, short ``youtu.be`` links, embed URLs on the mobile and
music subdomains, or a bare identifier, and returns the canonical 11-character
video ID.
"""

import logging
import re

from core.models import VideoReference

logger = logging.getLogger(__name__)

# Current observed length of YouTube video IDs
VIDEO_ID_LENGTH = 11

WATCH_URL_TEMPLATE = "https://www.youtube.com/watch?v={video_id}"

_YOUTUBE_HOST = r"(?<![\w.-])(?:www\.|m\.|mobile\.|music\.)?youtube\.com"

VIDEO_URL_PATTERN = re.compile(
    rf"(?:{_YOUTUBE_HOST}/watch\?v=|(?<![\w.-])youtu\.be/|{_YOUTUBE_HOST}/embed/)([^&\n?#]+)"
)
BARE_VIDEO_ID_PATTERN = re.compile(rf"[A-Za-z0-9_-]{{{VIDEO_ID_LENGTH}}}")


def extract_video_id(value: str) -> str | None:
    """Extract the YouTube video ID from a URL or a bare ID.

    URL shapes are tried first so a well-formed link is never mined for an
    arbitrary 11-character substring. The bare-ID fallback must match the whole
    trimmed input.

    Args:
        value: Text pasted by the user

    Returns:
        The video ID, or None when the input is not a recognised reference
    """
    if not value:
        return None

    match = VIDEO_URL_PATTERN.search(value)
    if match:
        return match.group(1)

    candidate = value.strip()
    if BARE_VIDEO_ID_PATTERN.fullmatch(candidate):
        return candidate

    logger.debug(f"No video ID found in input: {value!r}")
    return None


def build_watch_url(video_id: str) -> str:
    """Build the canonical watch URL for a video ID."""
    return WATCH_URL_TEMPLATE.format(video_id=video_id)


def normalize_video_url(value: str) -> str:
    """Rewrite any recognised reference to the canonical watch URL.

    Inputs without a recognisable video ID are returned unchanged.
    """
    video_id = extract_video_id(value)
    if video_id is None:
        return value
    return build_watch_url(video_id)


def parse_video_reference(value: str) -> VideoReference | None:
    video_id = extract_video_id(value)
    if video_id is None:
        return None
    return VideoReference(video_id=video_id, url=build_watch_url(video_id))


__all__ = [
    "VIDEO_ID_LENGTH",
    "extract_video_id",
    "build_watch_url",
    "normalize_video_url",
    "parse_video_reference",
]
