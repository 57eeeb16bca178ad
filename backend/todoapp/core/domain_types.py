"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - TodoId wraps int - ids are assigned by the store, never by callers
    - All rejection reasons encoded as Enums - no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (error "type" field)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

TodoId = NewType("TodoId", int)


# ─── Enums ───────────────────────────────────────────────────────

class TitleRejection(str, Enum):
    """Why a title failed the validation policy."""
    EMPTY_TITLE = "empty_title"
    TITLE_TOO_LONG = "title_too_long"


class ViewPhase(str, Enum):
    """Client view lifecycle - one request in flight at most."""
    IDLE = "idle"
    PENDING = "pending"
