"""Post extraction tool function."""

from __future__ import annotations

from ..config import AppConfig
from ..errors import InputEmptyError
from ..extractor import PostExtractor
from ..schemas import ExtractPostsInput, ExtractPostsOutput

NO_POSTS_MESSAGE = (
    "No Reddit posts found in clipboard content. "
    "Make sure you copied HTML from a Reddit subreddit page."
)


def extract_posts(config: AppConfig, params: ExtractPostsInput) -> ExtractPostsOutput:
    """Format the posts found in an HTML fragment, one line each."""

    if not params.html:
        raise InputEmptyError("Clipboard is empty")

    lines = PostExtractor.from_config(config).extract_lines(params.html)
    if not lines:
        return ExtractPostsOutput(lines=[], count=0, message=NO_POSTS_MESSAGE)
    return ExtractPostsOutput(
        lines=lines, count=len(lines), message=f"Parsed {len(lines)} Reddit posts"
    )
