"""Formatting helpers for MCP tool outputs."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from codebase_query.schemas.search import CodebaseExcerpt

RESULTS_HEADER = "Semantic search results for user query:\n"
EXCERPT_FENCE = "~~~\n"


def format_score(score: float) -> str:
    """Shortest decimal form of ``score`` as a 32-bit float ("1", "0.87", "NaN")."""
    if np.isnan(score):
        return "NaN"
    return np.format_float_positional(np.float32(score), trim="-")


def format_excerpts(excerpts: Sequence[CodebaseExcerpt]) -> str:
    """Render excerpts as the text block returned to the language model.

    The framing is consumed by prompts and must stay stable. The closing
    fence follows the excerpt text directly, without an added newline.
    """
    parts = [RESULTS_HEADER]
    for excerpt in excerpts:
        parts.append(f"Excerpt from {excerpt.path}, score {format_score(excerpt.score)}:\n")
        parts.append(EXCERPT_FENCE)
        parts.append(excerpt.text)
        parts.append(EXCERPT_FENCE)
    return "".join(parts)
