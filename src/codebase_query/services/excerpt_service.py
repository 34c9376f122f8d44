"""Turn semantic search hits into text excerpts of the files they point at."""

import asyncio
import os
from pathlib import Path
from typing import Optional, Protocol, Sequence

from loguru import logger

from codebase_query.file_utils import Fs
from codebase_query.schemas.search import CodebaseExcerpt, SearchHit


class ProjectIndex(Protocol):
    """Semantic index collaborator. Hits come back ordered by descending relevance."""

    async def search(self, query: str, limit: int) -> Sequence[SearchHit]: ...


class ExcerptError(Exception):
    """Base class for failures that drop a single hit from the results."""


class PathResolutionError(ExcerptError):
    """Raised when a hit cannot be mapped to a file inside its worktree."""


def _is_char_boundary(data: bytes, index: int) -> bool:
    if index <= 0 or index >= len(data):
        return True
    # UTF-8 continuation bytes look like 0b10xxxxxx
    return (data[index] & 0xC0) != 0x80


def align_byte_range(data: bytes, start: int, end: int) -> tuple[int, int]:
    """Clamp ``[start, end)`` to ``data`` and align it to UTF-8 character boundaries.

    ``end`` is clamped to the data length and ``start`` to ``end``. Then
    ``start`` moves forward and ``end`` moves backward until both sit on a
    character boundary. Neither bound crosses the other, so a range inside a
    single multi-byte character collapses to an empty range.
    """
    end = min(end, len(data))
    start = min(start, end)

    while start < end and not _is_char_boundary(data, start):
        start += 1
    while end > start and not _is_char_boundary(data, end):
        end -= 1

    return start, end


def resolve_hit_path(hit: SearchHit) -> Path:
    """Absolute path of the file a hit refers to.

    The path is normalized lexically; symlinks inside the worktree are kept
    as they are, only `..` components that leave the worktree are rejected.
    """
    if hit.worktree_root is None:
        raise PathResolutionError(f"Worktree for {hit.path} is no longer available")

    root = Path(os.path.normpath(hit.worktree_root))
    abs_path = Path(os.path.normpath(root / hit.path))
    if not abs_path.is_relative_to(root):
        raise PathResolutionError(f"{hit.path} resolves outside of worktree {root}")
    return abs_path


class ExcerptService:
    """Materializes excerpts for a query against the project index.

    Every hit is loaded concurrently and independently: a hit whose file is
    gone, unreadable or not valid UTF-8 is logged and dropped while the rest
    of the batch is returned. The file content is whatever is on disk now,
    so a range computed against an older version of the file is sliced as is.
    """

    def __init__(self, project_index: ProjectIndex, fs: Fs):
        self.project_index = project_index
        self.fs = fs

    async def materialize(self, query: str, limit: int) -> list[CodebaseExcerpt]:
        """Search the index and return excerpts in hit rank order.

        Args:
            query: Query text passed to the index
            limit: Maximum number of hits requested from the index

        Returns:
            Excerpts for every hit that could be loaded, in the order the
            index ranked them
        """
        hits = await self.project_index.search(query, limit)
        logger.debug(f"Semantic search for {query!r} returned {len(hits)} hits")

        results = await asyncio.gather(*(self._try_excerpt(hit) for hit in hits))
        excerpts = [excerpt for excerpt in results if excerpt is not None]

        if len(excerpts) < len(hits):
            logger.info(f"Dropped {len(hits) - len(excerpts)} of {len(hits)} search hits")
        return excerpts

    async def _try_excerpt(self, hit: SearchHit) -> Optional[CodebaseExcerpt]:
        try:
            return await self.excerpt_for_hit(hit)
        except Exception as e:
            logger.warning(f"Skipping search hit {hit.path}: {e}")
            return None

    async def excerpt_for_hit(self, hit: SearchHit) -> CodebaseExcerpt:
        """Load the file of ``hit`` and slice its byte range."""
        abs_path = resolve_hit_path(hit)
        text = await self.fs.load(abs_path)

        data = text.encode("utf-8")
        start, end = align_byte_range(data, hit.start, hit.end)

        return CodebaseExcerpt(
            path=hit.path.as_posix(),
            text=data[start:end].decode("utf-8"),
            score=hit.score,
        )
