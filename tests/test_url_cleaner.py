from __future__ import annotations

import pytest

from seotools.tools.url_cleaner import InvalidURL, clean_line, clean_url, clean_urls


def test_removes_tracking_keeps_rest() -> None:
    assert clean_urls("https://a.com/x?utm_source=y&keep=1") == "https://a.com/x?keep=1"


def test_invalid_line_is_marked() -> None:
    assert clean_urls("not a url") == "not a url (Invalid URL)"


def test_all_tracking_params_removed() -> None:
    url = (
        "https://shop.example.com/p?utm_source=g&utm_medium=cpc&utm_campaign=c&utm_term=t"
        "&utm_content=x&fbclid=1&gclid=2&ref=home&_ga=3"
    )
    assert clean_url(url) == "https://shop.example.com/p"


def test_retained_order_and_encoding_preserved() -> None:
    url = "https://a.com/s?b=2&utm_medium=x&a=hello%20world&c=&utm_source=z#top"
    assert clean_url(url) == "https://a.com/s?b=2&a=hello%20world&c=#top"


def test_repeated_tracking_param_removed_everywhere() -> None:
    assert clean_url("https://a.com/?ref=1&id=5&ref=2") == "https://a.com/?id=5"


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/blog/post?id=42&page=2#comments",
        "https://a.com/x?",
        "https://a.com/x#",
        "https://a.com/x?#",
        "https://a.com/x?a=1&&b=2",
    ],
)
def test_clean_url_is_unchanged(url: str) -> None:
    assert clean_url(url) == url


def test_empty_path_gets_slash() -> None:
    assert clean_url("https://example.com?gclid=abc") == "https://example.com/"


def test_lines_are_trimmed_and_blank_lines_kept() -> None:
    text = "  https://a.com/?fbclid=9  \n\n   \nftp\n"
    assert clean_urls(text) == "https://a.com/\n\n\nftp (Invalid URL)\n"


@pytest.mark.parametrize("bad", ["example.com/page", "http://", "https://a.com:99999/", "just words here"])
def test_rejects_non_urls(bad: str) -> None:
    with pytest.raises(InvalidURL):
        clean_url(bad)
    assert clean_line(bad) == f"{bad} (Invalid URL)"


def test_non_http_schemes_accepted() -> None:
    assert clean_url("mailto:someone@example.com") == "mailto:someone@example.com"
