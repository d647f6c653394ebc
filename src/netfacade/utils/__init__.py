r"""Helpers for parameter encoding, multipart bodies, progress streaming,
response decoding and structured logging."""

from __future__ import annotations

__all__ = [
    "MultipartBody",
    "aiter_with_progress",
    "build_multipart_body",
    "decode_json_object",
    "encode_form_body",
    "encode_parameters",
    "group_pairs",
    "iter_with_progress",
    "log_response",
    "log_structured",
    "resolve_file_path",
    "text_pairs",
    "wrap_encoding_error",
    "wrap_transport_error",
]

from netfacade.utils.encoding import (
    encode_form_body,
    encode_parameters,
    group_pairs,
    text_pairs,
)
from netfacade.utils.exceptions import wrap_encoding_error, wrap_transport_error
from netfacade.utils.multipart import MultipartBody, build_multipart_body, resolve_file_path
from netfacade.utils.progress import aiter_with_progress, iter_with_progress
from netfacade.utils.response import decode_json_object, log_response
from netfacade.utils.structured_logging import log_structured
