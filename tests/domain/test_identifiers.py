from __future__ import annotations

import pytest

from mcpcatalog.domain.identifiers import (
    category_slug,
    compact,
    normalize,
    strip_client_prefix,
    title_from_slug,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Claude Desktop", "claude-desktop"),
        ("client-Claude-Desktop", "claude-desktop"),
        ("CLIENT-cursor", "cursor"),
        ("  GPT   Researcher  ", "gpt-researcher"),
        ("n8n", "n8n"),
        ("N8N", "n8n"),
        ("brave_search", "brave_search"),
        ("a//b??c", "a-b-c"),
        ("--edge--", "edge"),
        ("", ""),
        (None, ""),
        ("!!!###", ""),
    ],
)
def test_normalize(raw: str | None, expected: str) -> None:
    assert normalize(raw) == expected


def test_normalize_with_prefix() -> None:
    assert normalize("claude-desktop", with_prefix=True) == "client-claude-desktop"
    assert normalize("client-claude-desktop", with_prefix=True) == "client-claude-desktop"


@pytest.mark.parametrize(
    "raw",
    ["Claude Desktop", "client-Client -x", "client-client-zed", "AI & ML", "x" * 5000, "été"],
)
def test_normalize_is_idempotent(raw: str) -> None:
    once = normalize(raw)
    assert normalize(once) == once
    prefixed = normalize(raw, with_prefix=True)
    assert normalize(prefixed, with_prefix=True) == prefixed


def test_strip_client_prefix_is_case_insensitive_and_trims() -> None:
    assert strip_client_prefix("  Client-Zed ") == "Zed"
    assert strip_client_prefix("zed") == "zed"
    assert strip_client_prefix(None) == ""


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("AI & ML", "ai-and-ml"),
        ("ai and ml", "ai-and-ml"),
        ("Web Scraping & Data Collection", "web-scraping-and-data-collection"),
        ("", "uncategorized"),
        (None, "uncategorized"),
        ("&", "and"),
    ],
)
def test_category_slug(raw: str | None, expected: str) -> None:
    assert category_slug(raw) == expected


def test_compact_drops_everything_but_letters_and_digits() -> None:
    assert compact("GPT-Researcher 2.0") == "gptresearcher20"
    assert compact(None) == ""


def test_title_from_slug() -> None:
    assert title_from_slug("cherry-studio") == "Cherry Studio"
    assert title_from_slug("client-my-tool") == "My Tool"
    assert title_from_slug("") == ""
