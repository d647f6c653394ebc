r"""netfacade - Minimal callback facade over httpx.

This package exposes three operations, POST, GET and multipart file
upload, which validate the target URL, delegate the exchange to httpx and
report exactly one terminal outcome: the decoded JSON object or a
``NetworkError``. Uploads additionally report their progress as a
fraction in [0, 1].

Key Features:
    - Invalid URLs rejected before any network activity
    - Url-encoded form bodies, query-string GET parameters
    - Multipart uploads streamed in chunks with progress callbacks
    - Uniform error taxonomy carrying a domain label and a numeric code
    - Sync functions, async functions, a threaded non-blocking facade and
      an asyncio facade sharing the same core

Example:
    ```pycon
    >>> from netfacade import send_post, upload_image
    >>> outcome = send_post(
    ...     "https://api.example.com/login",
    ...     {"user": "ada"},
    ...     on_success=print,
    ...     on_error=lambda error: print(error.domain, error.code),
    ... )  # doctest: +SKIP
    >>> outcome = upload_image(
    ...     "https://api.example.com/images", "photo.png", on_progress=print
    ... )  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncRequestFacade",
    "EncodingError",
    "FacadeConfig",
    "InvalidURLError",
    "MalformedResponseError",
    "NetworkError",
    "Outcome",
    "RequestFacade",
    "TransportError",
    "__version__",
    "request",
    "request_async",
    "send_get",
    "send_get_async",
    "send_post",
    "send_post_async",
    "upload",
    "upload_async",
    "upload_image",
    "upload_image_async",
]

from importlib.metadata import PackageNotFoundError, version

from netfacade.client import RequestFacade
from netfacade.client_async import AsyncRequestFacade
from netfacade.core.config import FacadeConfig
from netfacade.exceptions import (
    EncodingError,
    InvalidURLError,
    MalformedResponseError,
    NetworkError,
    TransportError,
)
from netfacade.get import send_get
from netfacade.get_async import send_get_async
from netfacade.outcome import Outcome
from netfacade.post import send_post
from netfacade.post_async import send_post_async
from netfacade.request import request
from netfacade.request_async import request_async
from netfacade.upload import upload
from netfacade.upload_async import upload_async
from netfacade.upload_image import upload_image
from netfacade.upload_image_async import upload_image_async

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
