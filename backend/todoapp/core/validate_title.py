"""Title Validation Policy - sanitizes and bounds user-supplied todo titles.

Invariants:
    - sanitize_title strips tag-like substrings BEFORE trimming whitespace
    - check_title is PURE: returns a TitleCheck, never raises
    - MAX_TITLE_LENGTH (100) is the single source of truth for the upper bound
    - Length is measured on the sanitized title, not the raw input

Design Decisions:
    - One policy for server and client: server result is authoritative, client
      result is advisory (UX only, never trusted for security)
    - Unterminated tags ("<b foo") are stripped to end of input, matching the
      browser-side regex the frontend has always used
"""

import re
from dataclasses import dataclass

from todoapp.core.domain_types import TitleRejection


MAX_TITLE_LENGTH: int = 100

_TAG_PATTERN = re.compile(r"</?[^>]+(?:>|\Z)")

_MESSAGES: dict[TitleRejection, str] = {
    TitleRejection.EMPTY_TITLE: "Title is required.",
    TitleRejection.TITLE_TOO_LONG: (
        f"Title length cannot exceed {MAX_TITLE_LENGTH} characters."
    ),
}


@dataclass(frozen=True)
class TitleCheck:
    """Outcome of check_title. `title` is the sanitized text in both cases."""
    title: str
    rejection: TitleRejection | None = None

    @property
    def ok(self) -> bool:
        return self.rejection is None

    @property
    def message(self) -> str | None:
        if self.rejection is None:
            return None
        return _MESSAGES[self.rejection]


def sanitize_title(raw: str) -> str:
    """Remove HTML-tag-like substrings, then surrounding whitespace."""
    return _TAG_PATTERN.sub("", raw).strip()


def check_title(raw: str) -> TitleCheck:
    """Sanitize and validate a title."""
    title = sanitize_title(raw)
    if not title:
        return TitleCheck(title, TitleRejection.EMPTY_TITLE)
    if len(title) > MAX_TITLE_LENGTH:
        return TitleCheck(title, TitleRejection.TITLE_TOO_LONG)
    return TitleCheck(title)
