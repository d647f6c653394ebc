r"""Core configuration, validation and shared dispatch logic."""

from __future__ import annotations

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_UPLOAD_FIELD_NAME",
    "FacadeConfig",
    "validate_chunk_size",
    "validate_timeout",
    "validate_url",
]

from netfacade.core.config import DEFAULT_CHUNK_SIZE, DEFAULT_UPLOAD_FIELD_NAME, FacadeConfig
from netfacade.core.validation import validate_chunk_size, validate_timeout, validate_url
