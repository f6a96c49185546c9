from __future__ import annotations

import pytest

from cubita.app.services.text import strip_markdown, truncate_text


class TestStripMarkdown:
    @pytest.mark.parametrize("text", ["", None])
    def test_empty(self, text: str) -> None:
        assert strip_markdown(text) == ""

    @pytest.mark.parametrize("markdown,expected", [
        ("This is **bold** text", "This is bold text"),
        ("This is __bold__ text", "This is bold text"),
        ("This is *italic* text", "This is italic text"),
        ("This is _italic_ text", "This is italic text"),
        ("This is ***bold italic*** text", "This is bold italic text"),
        ("## Header 2", "Header 2"),
        ("Visit [Google](https://google.com)", "Visit Google"),
        ("![Alt text](image.jpg)", "Alt text"),
        ("Use `code` here", "Use code here"),
        ("> This is a quote", "This is a quote"),
        ("- Item 1\n- Item 2", "Item 1\nItem 2"),
        ("* Item 1\n* Item 2", "Item 1\nItem 2"),
        ("1. First\n2. Second", "First\nSecond"),
        ("This is ~~deleted~~ text", "This is deleted text"),
    ])
    def test_removes_formatting(self, markdown: str, expected: str) -> None:
        assert strip_markdown(markdown) == expected

    def test_bio_with_names(self) -> None:
        markdown = "**Charly & Johayron** est un duo cubain composé de **Carlos de Jesús**"
        assert strip_markdown(markdown) == (
            "Charly & Johayron est un duo cubain composé de Carlos de Jesús"
        )


class TestTruncateText:
    def test_short_text_unchanged(self) -> None:
        assert truncate_text("Hello", 10) == "Hello"

    def test_exact_length_unchanged(self) -> None:
        assert truncate_text("Hello", 5) == "Hello"

    def test_adds_ellipsis(self) -> None:
        assert truncate_text("Hello World", 8) == "Hello..."

    def test_empty(self) -> None:
        assert truncate_text("", 10) == ""
