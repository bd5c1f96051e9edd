"""Append correction notes to a response without touching the original text."""

from __future__ import annotations

from collections.abc import Sequence

CORRECTION_DELIMITER = "\n\n**Important Note:** "


def add_corrections(text: str, corrections: Sequence[str]) -> str:
    if not corrections:
        return text
    return text + CORRECTION_DELIMITER + " ".join(corrections)
