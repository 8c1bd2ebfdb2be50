"""Quotemaster use cases (random/popular/by-id lookups, likes, submissions, reset)."""

from __future__ import annotations

import logging
import random
from typing import Any

from miniapis.core.config import get_settings
from miniapis.core.security import verify_reset_password
from miniapis.domain.quotes import is_popular, is_valid_author_name, is_valid_quote_text
from miniapis.repositories.json_storage import JsonDocumentStore

logger = logging.getLogger(__name__)


class QuoteError(Exception):
    """Base exception for quote workflow."""


class InvalidIdError(QuoteError):
    """Raised when a quote id is not an index of the quote list."""


class InvalidQuoteError(QuoteError):
    """Raised when quote text is missing or not 1-400 characters long."""


class InvalidNameError(QuoteError):
    """Raised when the author name is missing or not 1-40 characters long."""


class InvalidPasswordError(QuoteError):
    """Raised when the reset password does not match the configured hash."""


class EmptyCollectionError(QuoteError):
    """Raised when there is no quote to pick from."""


class QuoteService:
    """Owns the quote document and implements the quotemaster operations."""

    def __init__(
        self,
        store: JsonDocumentStore | None = None,
        *,
        reset_hash: str | None = None,
        rng: random.Random | None = None,
    ) -> None:
        settings = get_settings()
        self.store = store or JsonDocumentStore(settings.quotes_file, settings.quotes_default_file)
        self.reset_hash = reset_hash if reset_hash is not None else settings.quotes_reset_hash
        self.rng = rng or random.Random()

    @property
    def quotes(self) -> list[dict]:
        return self.store.data.setdefault("quotes", [])

    @property
    def max_likes(self) -> int:
        return int(self.store.data.get("maxLikes", 0))

    def _index(self, quote_id: Any) -> int:
        if isinstance(quote_id, bool):
            raise InvalidIdError(quote_id)
        if isinstance(quote_id, str):
            try:
                quote_id = int(quote_id.strip())
            except ValueError:
                raise InvalidIdError(quote_id) from None
        if not isinstance(quote_id, int):
            raise InvalidIdError(quote_id)
        if quote_id < 0 or quote_id >= len(self.quotes):
            raise InvalidIdError(quote_id)
        return quote_id

    def _pick(self, candidates: list[dict]) -> dict:
        if not candidates:
            raise EmptyCollectionError("No quotes available")
        return self.rng.choice(candidates)

    def random_quote(self) -> dict:
        return self._pick(self.quotes)

    def popular_quote(self) -> dict:
        max_likes = self.max_likes
        return self._pick([quote for quote in self.quotes if is_popular(quote, max_likes)])

    def quote_by_id(self, quote_id: Any) -> dict:
        return self.quotes[self._index(quote_id)]

    def like_quote(self, quote_id: Any) -> int:
        """Add a like and return the quote's new like count."""
        quote = self.quotes[self._index(quote_id)]
        quote["likes"] = int(quote.get("likes", 0)) + 1
        # maxLikes is a high-water mark, it only ever moves up by one
        if quote["likes"] > self.max_likes:
            self.store.data["maxLikes"] = self.max_likes + 1
        self.store.save()
        return quote["likes"]

    def new_quote(self, text: Any, name: Any) -> int:
        if not is_valid_quote_text(text):
            raise InvalidQuoteError("Quote must be between 1 and 400 characters long")
        if not is_valid_author_name(name):
            raise InvalidNameError("Name must be between 1 and 40 characters long")
        new_id = len(self.quotes)
        self.quotes.append({"id": new_id, "quote": text, "name": name, "likes": 0})
        self.store.save()
        logger.info("Added quote %d by %r", new_id, name)
        return new_id

    def reset_quotes(self, password: Any) -> None:
        if not verify_reset_password(password, self.reset_hash):
            logger.warning("Rejected quote reset with an invalid password")
            raise InvalidPasswordError("Invalid password")
        self.store.reset()
        logger.info("Quote document reset to %s", self.store.default_path)
