"""Tests for stripping conversational filler from model output."""

from __future__ import annotations

import pytest

from ai_writer.services.response_sanitizer import DEFAULT_BLOCKLIST, ResponseSanitizer, sanitize


def test_sanitize_worked_example() -> None:
    raw = "Sure, here's your draft!\n# Quarterly Update\n- point one\nHope this helps!"
    assert sanitize(raw) == "# Quarterly Update\n- point one"


@pytest.mark.parametrize("phrase", DEFAULT_BLOCKLIST)
def test_sanitize_drops_blocklisted_lines_case_insensitively(phrase: str) -> None:
    raw = f"# Title\n{phrase.upper()} in this line\nBody text"
    assert sanitize(raw) == "# Title\nBody text"


def test_sanitize_drops_whole_line_even_with_real_content() -> None:
    raw = "# Plan\n- Ship the draft by Friday\n- Review metrics"
    assert sanitize(raw) == "# Plan\n- Review metrics"


def test_sanitize_drops_preamble_before_first_structural_line() -> None:
    raw = "Sure, here you go\nAbsolutely.\n# Title\nplain line\n## Section"
    assert sanitize(raw) == "# Title\nplain line\n## Section"


@pytest.mark.parametrize("marker_line", ["# H1", "- item", "* item", "1. step", "> quote"])
def test_sanitize_recognizes_each_structural_marker(marker_line: str) -> None:
    raw = f"Intro sentence\n{marker_line}\nafter"
    assert sanitize(raw) == f"{marker_line}\nafter"


def test_sanitize_keeps_everything_without_structural_line() -> None:
    raw = "  First paragraph.\nSecond paragraph.  \n"
    assert sanitize(raw) == "First paragraph.\nSecond paragraph."


def test_sanitize_returns_empty_when_everything_is_filler() -> None:
    raw = "Here's what I came up with.\nLet me know if you need changes!\nFeel free to edit."
    assert sanitize(raw) == ""


def test_sanitize_empty_input() -> None:
    assert sanitize("") == ""


@pytest.mark.parametrize(
    "raw",
    [
        "Sure, here's your draft!\n# Quarterly Update\n- point one\nHope this helps!",
        "  - leading space item\ntext\n",
        "\n\n   # Indented heading\n\nBody\n\n",
        "Preface\n> quote\n\n1. one\n2. two",
        "only prose here\nand more prose",
        "",
    ],
)
def test_sanitize_is_idempotent(raw: str) -> None:
    once = sanitize(raw)
    assert sanitize(once) == once


def test_custom_blocklist_and_markers() -> None:
    sanitizer = ResponseSanitizer(blocklist=["Certainly"], markers=["Subject:"])
    raw = "certainly! writing now\nWarm up\nSubject: Hello\nBody with draft"
    assert sanitizer.sanitize(raw) == "Subject: Hello\nBody with draft"
