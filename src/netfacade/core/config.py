r"""Configuration dataclass and defaults for the request facade.

This module provides configuration constants and a dataclass-based
configuration object shared by the module-level functions and the
``RequestFacade``/``AsyncRequestFacade`` context managers.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_UPLOAD_FIELD_NAME",
    "FORM_CONTENT_TYPE",
    "FacadeConfig",
]

from dataclasses import dataclass, replace
from typing import Any

from netfacade.core.validation import validate_chunk_size

# Size in bytes of each chunk streamed during an upload.
# One progress tick is emitted per chunk.
DEFAULT_CHUNK_SIZE = 64 * 1024

# Name of the multipart field carrying the uploaded file
DEFAULT_UPLOAD_FIELD_NAME = "file"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=utf-8"


@dataclass
class FacadeConfig:
    """Configuration for the request facade.

    Note:
        The timeout parameter is NOT included in this config as it is used
        directly by httpx.Client/AsyncClient.

    Args:
        get_parameters_in_body: If ``True``, GET parameters are url-encoded
            into the request body instead of the query string.
        attach_upload_parameters: If ``True``, upload parameters are sent as
            extra multipart form fields. If ``False`` they are ignored.
        upload_field_name: Name of the multipart field holding the file.
        chunk_size: Size in bytes of each streamed upload chunk. Must be > 0.

    Example:
        ```pycon
        >>> from netfacade.core.config import FacadeConfig
        >>> config = FacadeConfig()
        >>> config.upload_field_name
        'file'
        >>> config.merge(chunk_size=1024).chunk_size
        1024

        ```
    """

    get_parameters_in_body: bool = False
    attach_upload_parameters: bool = True
    upload_field_name: str = DEFAULT_UPLOAD_FIELD_NAME
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_chunk_size(self.chunk_size)
        if not self.upload_field_name:
            msg = "upload_field_name must be a non-empty string"
            raise ValueError(msg)

    def merge(self, **overrides: Any) -> FacadeConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new FacadeConfig instance with overrides applied.

        Example:
            ```pycon
            >>> from netfacade.core.config import FacadeConfig
            >>> config = FacadeConfig()
            >>> config.merge(get_parameters_in_body=True).get_parameters_in_body
            True
            >>> config.get_parameters_in_body
            False

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)
