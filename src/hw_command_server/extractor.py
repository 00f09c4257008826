"""Post extractor for HTML copied from a subreddit listing.

Reddit renders each listing entry as a ``<shreddit-post>`` custom
element whose attributes carry everything needed for a link line::

    <shreddit-post post-title="Hello"
                   permalink="/r/test/comments/abc123/hello/"
                   created-timestamp="2024-06-18T16:45:00.000000+0000">

Public API:
    - PostExtractor

Usage example:
    extractor = PostExtractor.from_config(load_config())
    for line in extractor.extract_lines(html):
        print(line)
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Protocol

from bs4 import BeautifulSoup

from .config import AppConfig
from .errors import HtmlParseError
from .schemas import ExtractedPost
from .timestamps import format_post_line
from .utils import to_display_time

logger = logging.getLogger(__name__)

TITLE_ATTR = "post-title"
PERMALINK_ATTR = "permalink"
CREATED_ATTR = "created-timestamp"

_PERMALINK_RE = re.compile(r"(/r/[^/]+/comments/[^/]+/)")


class AttributeReader(Protocol):
    """Anything that hands out attribute values by name (a bs4 ``Tag``)."""

    def get(self, key: str, default=None): ...


def _read_attr(element: AttributeReader, name: str) -> Optional[str]:
    """Return a non-empty string attribute, or None."""
    value = element.get(name)
    if not value:
        return None
    return str(value)


class PostExtractor:
    """Turns an HTML fragment into formatted post lines.

    Candidates missing an attribute, with a permalink outside the
    ``/r/<sub>/comments/<id>/`` shape, or with an unreadable creation
    timestamp are skipped without raising.

    Args:
        tag: Tag name of the post elements.
        base_url: Origin prepended to the matched permalink path.
        offset_hours: Fixed offset from UTC for the displayed time.
        debug: Log skipped candidates and produced lines.
    """

    def __init__(
        self,
        *,
        tag: str = "shreddit-post",
        base_url: str = "https://www.reddit.com",
        offset_hours: int = -4,
        debug: bool = False,
    ) -> None:
        self._tag = tag
        self._base_url = base_url.rstrip("/")
        self._offset_hours = offset_hours
        self._debug = debug

    @classmethod
    def from_config(cls, config: AppConfig) -> PostExtractor:
        """Alternative constructor from application settings."""
        return cls(
            tag=config.post_tag,
            base_url=config.post_base_url,
            offset_hours=config.display_utc_offset_hours,
            debug=config.debug,
        )

    def extract(self, html: str) -> List[ExtractedPost]:
        """Return the valid posts of ``html`` in document order.

        Raises:
            HtmlParseError: If the fragment cannot be parsed at all.
        """

        if self._debug:
            logger.debug("Processing HTML content of length %d", len(html))

        try:
            soup = BeautifulSoup(html, "html.parser")
        except Exception as exc:
            raise HtmlParseError(
                "Failed to parse HTML fragment", {"reason": str(exc)}
            ) from exc

        posts: List[ExtractedPost] = []
        for index, element in enumerate(soup.find_all(self._tag)):
            post = self._build_post(element)
            if post is None:
                if self._debug:
                    logger.debug("Skipping %s #%d", self._tag, index)
                continue
            posts.append(post)
        return posts

    def extract_lines(self, html: str) -> List[str]:
        """Return one ``- YYYYMMDDHHmm - [title](url)`` line per valid post."""

        lines = [
            format_post_line(post.local_timestamp, post.title, post.canonical_url)
            for post in self.extract(html)
        ]
        if self._debug:
            logger.debug("Generated %d post lines", len(lines))
        return lines

    def _build_post(self, element: AttributeReader) -> Optional[ExtractedPost]:
        title = _read_attr(element, TITLE_ATTR)
        permalink = _read_attr(element, PERMALINK_ATTR)
        created = _read_attr(element, CREATED_ATTR)
        if not title or not permalink or not created:
            return None

        match = _PERMALINK_RE.search(permalink)
        if not match:
            return None

        try:
            local = to_display_time(created, offset_hours=self._offset_hours)
        except ValueError:
            return None

        return ExtractedPost(
            title=title,
            canonical_url=f"{self._base_url}{match.group(1)}",
            local_timestamp=local,
        )
