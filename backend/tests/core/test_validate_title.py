"""Title Validation Policy - sanitization and bounds.

Tests:
    - Tags are stripped before trimming
    - Whitespace-only and tag-only titles are empty
    - 100 chars passes, 101 fails (after sanitization)
"""

import pytest

from todoapp.core.domain_types import TitleRejection
from todoapp.core.validate_title import (
    MAX_TITLE_LENGTH, check_title, sanitize_title,
)


def test_sanitize_strips_tags():
    assert sanitize_title("<b>Buy milk</b>") == "Buy milk"


def test_sanitize_trims_after_stripping():
    assert sanitize_title("  <i> Walk dog </i>  ") == "Walk dog"


def test_sanitize_strips_unterminated_tag_to_end():
    assert sanitize_title("Read <script src=x") == "Read"


def test_sanitize_keeps_lone_angle_bracket_text_before_it():
    assert sanitize_title("3 > 2") == "3 > 2"


@pytest.mark.parametrize("raw", ["", "   ", "\t\n", "<br>", "<p> </p>"])
def test_empty_after_sanitization_is_rejected(raw):
    check = check_title(raw)
    assert not check.ok
    assert check.rejection is TitleRejection.EMPTY_TITLE
    assert check.message == "Title is required."


def test_exactly_max_length_is_accepted():
    check = check_title("a" * MAX_TITLE_LENGTH)
    assert check.ok
    assert check.title == "a" * 100
    assert check.message is None


def test_one_over_max_length_is_rejected():
    check = check_title("a" * 101)
    assert check.rejection is TitleRejection.TITLE_TOO_LONG
    assert "100" in check.message


def test_length_measured_after_sanitization():
    check = check_title("<em>" + "a" * 100 + "</em>   ")
    assert check.ok
    assert len(check.title) == 100


def test_valid_title_is_returned_trimmed():
    check = check_title("  Buy milk ")
    assert check.ok
    assert check.title == "Buy milk"
