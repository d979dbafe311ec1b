"""Tag parsing and serialization for the ``{{TAGS}}`` placeholder."""

from __future__ import annotations

import json
from typing import Sequence


class TagsParseError(ValueError):
    """Raised when tag input is not a JSON array of strings."""


def parse_tags(raw: str) -> tuple[str, ...]:
    """Parse user input such as ``["work", "daily"]`` into a tuple of tags.

    Empty or whitespace-only input means no tags. Tag content itself is not
    validated; order and duplicates are kept as given.
    """

    text = raw.strip()
    if not text:
        return ()

    try:
        loaded = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TagsParseError(f"Error parsing tags as JSON array: {exc}") from exc

    if not isinstance(loaded, list) or not all(isinstance(t, str) for t in loaded):
        raise TagsParseError(
            "Error parsing tags as JSON array: expected an array of strings"
        )
    return tuple(loaded)


def format_tags(tags: Sequence[str]) -> str:
    """Serialize tags as a compact JSON array, ``[]`` when empty."""

    if not tags:
        return "[]"
    return json.dumps(list(tags), ensure_ascii=False, separators=(",", ":"))
