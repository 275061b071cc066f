"""Splitting text on any character of a separator set."""

from __future__ import annotations


def count_fields(text: str, separators: str) -> int:
    """Return how many fields split_set may produce for text.

    Every separator character inside the trimmed text opens a new field,
    so runs of separators count more than once.
    """
    trimmed = text.strip(separators)
    if not trimmed:
        return 0
    return 1 + sum(ch in separators for ch in trimmed)


def split_set(text: str, separators: str) -> list[str]:
    """Split text on any character found in separators.

    Separator runs are skipped; at most count_fields(text, separators)
    fields are returned.
    """
    limit = count_fields(text, separators)
    fields: list[str] = []
    rest = text
    while len(fields) < limit and rest:
        rest = rest.lstrip(separators)
        end = next(
            (pos for pos, ch in enumerate(rest) if ch in separators), len(rest)
        )
        fields.append(rest[:end])
        rest = rest[end:]
    return fields