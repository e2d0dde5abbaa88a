from dataclasses import dataclass
from typing import Iterable, Optional

from qf_utils.logger_utils import logger
from src.domain.errors import NoMaterialProvided

TRUNCATE_LIMIT = 16000
TRUNCATION_MARKER = "\n...[truncated for token limit]"
SEPARATOR = "\n\n"


@dataclass(frozen=True)
class Material:
    """The corpus sent to the model, plus how it was derived."""
    text: str
    original_length: int
    truncated: bool


def aggregate_material(
    text_input: Optional[str],
    extracted_texts: Iterable[str],
    limit: int = TRUNCATE_LIMIT,
) -> Material:
    """
    Combines pasted text and extracted file texts into one corpus.

    Pasted text comes first, then files in upload order. A corpus longer than
    `limit` is cut to exactly `limit` characters and marked as truncated.
    """
    pieces = [piece for piece in [text_input or "", *extracted_texts] if piece and piece.strip()]
    if not pieces:
        raise NoMaterialProvided()

    combined = SEPARATOR.join(pieces)
    if len(combined) <= limit:
        return Material(text=combined, original_length=len(combined), truncated=False)

    logger.info(f"Material truncated from {len(combined)} to {limit} characters.")
    return Material(
        text=combined[:limit] + TRUNCATION_MARKER,
        original_length=len(combined),
        truncated=True,
    )
