r"""Chunked body streaming with upload progress reporting.

httpx does not report upload progress, so the encoded body is handed to
the client as an iterator of chunks. A progress tick is emitted each
time the transport pulls the next chunk, i.e. once the previous chunk
has been written.
"""

from __future__ import annotations

__all__ = ["aiter_with_progress", "iter_with_progress"]

from typing import TYPE_CHECKING

from netfacade.callbacks import invoke_on_progress

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Iterator

    from netfacade.callbacks import ProgressCallback


def iter_with_progress(
    content: bytes,
    *,
    chunk_size: int,
    on_progress: ProgressCallback | None = None,
) -> Iterator[bytes]:
    """Yield ``content`` in chunks and report the sent fraction.

    Args:
        content: The full request body.
        chunk_size: The maximum size of each chunk.
        on_progress: Optional callback receiving the fraction in [0, 1].

    Yields:
        The successive chunks of ``content``.

    Example:
        ```pycon
        >>> from netfacade.utils.progress import iter_with_progress
        >>> ticks = []
        >>> list(iter_with_progress(b"abcd", chunk_size=2, on_progress=ticks.append))
        [b'ab', b'cd']
        >>> ticks
        [0.5, 1.0]

        ```
    """
    total = len(content)
    for start in range(0, total, chunk_size):
        chunk = content[start : start + chunk_size]
        yield chunk
        invoke_on_progress(on_progress, completed=start + len(chunk), total=total)


async def aiter_with_progress(
    content: bytes,
    *,
    chunk_size: int,
    on_progress: ProgressCallback | None = None,
) -> AsyncIterator[bytes]:
    """Async version of ``iter_with_progress``."""
    for chunk in iter_with_progress(content, chunk_size=chunk_size, on_progress=on_progress):
        yield chunk
