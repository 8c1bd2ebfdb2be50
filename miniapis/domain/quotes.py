"""Domain helpers for quote validation and popularity."""
from __future__ import annotations

from typing import Any, Mapping

QUOTE_MIN_LENGTH = 1
QUOTE_MAX_LENGTH = 400
NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 40
POPULAR_RATIO = 0.75


def text_length(value: str) -> int:
    """Length in UTF-16 code units, as JavaScript clients count it."""
    return len(value.encode("utf-16-le", "surrogatepass")) // 2


def is_valid_quote_text(value: Any) -> bool:
    return isinstance(value, str) and QUOTE_MIN_LENGTH <= text_length(value) <= QUOTE_MAX_LENGTH


def is_valid_author_name(value: Any) -> bool:
    return isinstance(value, str) and NAME_MIN_LENGTH <= text_length(value) <= NAME_MAX_LENGTH


def is_popular(quote: Mapping[str, Any], max_likes: int) -> bool:
    """A quote is popular when it has at least 75% of the best like count."""
    return quote.get("likes", 0) >= max_likes * POPULAR_RATIO
