"""Tests for extracting post lines from subreddit HTML."""

from datetime import datetime, timedelta, timezone

import pytest

from conftest import make_post
from hw_command_server import extractor as extractor_module
from hw_command_server.errors import HtmlParseError
from hw_command_server.extractor import PostExtractor


def test_extracts_single_post_line():
    html = f"<div>{make_post()}</div>"
    lines = PostExtractor().extract_lines(html)
    assert lines == [
        "- 202406181245 - [Hello](https://www.reddit.com/r/test/comments/abc123/)"
    ]


def test_extracted_post_fields():
    (post,) = PostExtractor().extract(make_post())
    assert post.title == "Hello"
    assert post.canonical_url == "https://www.reddit.com/r/test/comments/abc123/"
    assert post.local_timestamp == datetime(2024, 6, 18, 12, 45, tzinfo=timezone(timedelta(hours=-4)))


def test_offset_crosses_midnight():
    html = make_post(created="2024-01-01T02:30:00Z")
    assert PostExtractor().extract_lines(html) == [
        "- 202312312230 - [Hello](https://www.reddit.com/r/test/comments/abc123/)"
    ]


def test_offset_is_fixed_regardless_of_season():
    html = make_post(created="2024-12-18T16:45:00Z")
    assert PostExtractor().extract_lines(html)[0].startswith("- 202412181245 - ")


def test_explicit_offset_in_timestamp_is_honoured():
    html = make_post(created="2024-06-18T18:45:00+02:00")
    assert PostExtractor().extract_lines(html)[0].startswith("- 202406181245 - ")


def test_posts_keep_document_order():
    html = "".join(
        [
            make_post(title="First", permalink="/r/a/comments/1/x/"),
            "<p>between</p>",
            make_post(title="Second", permalink="/r/b/comments/2/y/"),
        ]
    )
    lines = PostExtractor().extract_lines(html)
    assert [line.split("[")[1].split("]")[0] for line in lines] == ["First", "Second"]


def test_missing_title_is_skipped_without_error():
    html = '<shreddit-post permalink="/r/test/comments/abc123/hello/" created-timestamp="2024-06-18T16:45:00Z"></shreddit-post>'
    assert PostExtractor().extract_lines(html) == []


@pytest.mark.parametrize(
    "kwargs",
    [
        {"title": ""},
        {"permalink": ""},
        {"created": ""},
        {"permalink": "/user/someone/comments/abc/"},
        {"permalink": "/r/test/abc123/"},
        {"created": "yesterday"},
    ],
)
def test_invalid_candidates_are_dropped(kwargs):
    html = make_post(**kwargs) + make_post(title="Kept")
    lines = PostExtractor().extract_lines(html)
    assert len(lines) == 1
    assert "[Kept]" in lines[0]


def test_permalink_match_anywhere_in_value():
    html = make_post(permalink="https://old.reddit.com/r/test/comments/abc123/slug/")
    (post,) = PostExtractor().extract(html)
    assert post.canonical_url == "https://www.reddit.com/r/test/comments/abc123/"


def test_html_entities_in_title_are_decoded():
    html = make_post(title="Tom &amp; Jerry")
    assert "[Tom & Jerry]" in PostExtractor().extract_lines(html)[0]


def test_no_posts_gives_empty_list():
    assert PostExtractor().extract_lines("<p>just text</p>") == []


def test_custom_tag_and_base_url():
    html = (
        '<article-post post-title="T" permalink="/r/x/comments/9/z/" '
        'created-timestamp="2024-06-18T16:45:00Z"></article-post>'
    )
    extractor = PostExtractor(tag="article-post", base_url="https://example.org/", offset_hours=0)
    assert extractor.extract_lines(html) == ["- 202406181645 - [T](https://example.org/r/x/comments/9/)"]


def test_from_config(config):
    extractor = PostExtractor.from_config(config)
    assert extractor.extract_lines(make_post())[0].startswith("- 202406181245 - ")


def test_unparseable_fragment_raises(monkeypatch):
    def broken(*args, **kwargs):
        raise ValueError("parser exploded")

    monkeypatch.setattr(extractor_module, "BeautifulSoup", broken)
    with pytest.raises(HtmlParseError) as excinfo:
        PostExtractor().extract("<shreddit-post>")
    assert excinfo.value.code == "PARSE_ERROR"
    assert excinfo.value.details == {"reason": "parser exploded"}


def test_reddit_timestamp_format_with_compact_offset():
    html = make_post(created="2024-06-18T16:45:00.000000+0000")
    assert PostExtractor().extract_lines(html) == [
        "- 202406181245 - [Hello](https://www.reddit.com/r/test/comments/abc123/)"
    ]
