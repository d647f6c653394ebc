r"""Multipart form body construction for file uploads.

The body is encoded up-front with httpx's multipart encoder so that its
length is known and it can be streamed chunk by chunk with progress
reporting.
"""

from __future__ import annotations

__all__ = ["MultipartBody", "build_multipart_body", "resolve_file_path"]

import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING
from urllib.parse import unquote, urlparse
from urllib.request import url2pathname

import httpx

from netfacade.exceptions import EncodingError
from netfacade.utils.encoding import group_pairs

if TYPE_CHECKING:
    import os

    from netfacade.utils.encoding import FormPair

logger: logging.Logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class MultipartBody:
    """Encoded multipart body.

    Attributes:
        content: The full encoded body.
        content_type: The ``Content-Type`` header value, boundary included.
    """

    content: bytes
    content_type: str

    @property
    def headers(self) -> dict[str, str]:
        return {"Content-Type": self.content_type, "Content-Length": str(len(self.content))}


def resolve_file_path(file: str | os.PathLike[str]) -> Path:
    """Convert a path or ``file://`` URI into a ``Path``.

    Example:
        ```pycon
        >>> from netfacade.utils.multipart import resolve_file_path
        >>> resolve_file_path("file:///tmp/my%20photo.png").as_posix()
        '/tmp/my photo.png'
        >>> resolve_file_path("/tmp/photo.png").name
        'photo.png'

        ```
    """
    if isinstance(file, str) and file.startswith("file:"):
        return Path(url2pathname(unquote(urlparse(file).path)))
    return Path(file)


def build_multipart_body(
    url: httpx.URL | str,
    file: str | os.PathLike[str],
    *,
    field_name: str,
    fields: list[FormPair] | None = None,
) -> MultipartBody:
    """Encode ``file`` and optional ``fields`` as a multipart body.

    Args:
        url: The target URL.
        file: The path or ``file://`` URI of the file to upload.
        field_name: The form field name of the file part.
        fields: Optional extra form fields as ``(key, value)`` pairs.

    Returns:
        The encoded body and its content type.

    Raises:
        EncodingError: If the file cannot be read or the body cannot be
            encoded.
    """
    path = resolve_file_path(file)
    try:
        data = path.read_bytes()
    except OSError as exc:
        logger.warning(f"Cannot read upload file {path}: {exc}")
        raise EncodingError(
            f"Cannot read upload file {path}: {exc}", url=str(url), method="POST", cause=exc
        ) from exc

    mime_type = mimetypes.guess_type(path.name)[0] or DEFAULT_CONTENT_TYPE
    try:
        request = httpx.Request(
            "POST",
            url,
            data=group_pairs(fields) if fields else None,
            files={field_name: (path.name, data, mime_type)},
        )
        content = request.read()
    except (TypeError, ValueError) as exc:
        logger.warning(f"Cannot encode multipart body for {path}: {exc}")
        raise EncodingError(
            f"Cannot encode multipart body for {path}: {exc}",
            url=str(url),
            method="POST",
            cause=exc,
        ) from exc

    logger.debug(f"Encoded multipart body for {path} ({len(content)} bytes)")
    return MultipartBody(content=content, content_type=request.headers["Content-Type"])
