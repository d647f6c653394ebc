r"""Form encoding of request parameters.

Parameters are flattened into ``(key, value)`` string pairs using the
bracket convention understood by most web frameworks:

- nested mappings become ``parent[child]``
- sequences become ``parent[]`` repeated once per item
- booleans become ``1``/``0`` and ``None`` becomes an empty string
- ``bytes`` values are kept as is and percent-encoded byte for byte

Keys are sorted at each nesting level so the encoding is stable.
"""

from __future__ import annotations

__all__ = ["FormPair", "encode_form_body", "encode_parameters", "group_pairs", "text_pairs"]

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

FormPair = tuple[str, str | bytes]


def encode_parameters(parameters: Mapping[str, Any] | None) -> list[FormPair]:
    """Flatten parameters into form-encoded key/value pairs.

    Args:
        parameters: The request parameters, or ``None``.

    Returns:
        The list of ``(key, value)`` pairs.

    Example:
        ```pycon
        >>> from netfacade.utils.encoding import encode_parameters
        >>> encode_parameters({"b": [1, 2], "a": {"x": True}})
        [('a[x]', '1'), ('b[]', '1'), ('b[]', '2')]
        >>> encode_parameters({"raw": b"data"})
        [('raw', b'data')]

        ```
    """
    pairs: list[FormPair] = []
    if not parameters:
        return pairs
    for key in sorted(parameters, key=str):
        pairs.extend(_encode_component(str(key), parameters[key]))
    return pairs


def _encode_component(key: str, value: Any) -> list[FormPair]:
    if isinstance(value, Mapping):
        pairs = []
        for sub_key in sorted(value, key=str):
            pairs.extend(_encode_component(f"{key}[{sub_key}]", value[sub_key]))
        return pairs
    if isinstance(value, (list, tuple)):
        pairs = []
        for item in value:
            pairs.extend(_encode_component(f"{key}[]", item))
        return pairs
    return [(key, _encode_scalar(value))]


def _encode_scalar(value: Any) -> str | bytes:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, bytes):
        return value
    return str(value)


def encode_form_body(pairs: list[FormPair]) -> bytes:
    """Encode pairs as an ``application/x-www-form-urlencoded`` body.

    Example:
        ```pycon
        >>> from netfacade.utils.encoding import encode_form_body
        >>> encode_form_body([("name", "a b"), ("tags[]", "x")])
        b'name=a+b&tags%5B%5D=x'
        >>> encode_form_body([("raw", b"a b")])
        b'raw=a+b'

        ```
    """
    return urlencode(pairs).encode("utf-8")


def group_pairs(pairs: list[FormPair]) -> dict[str, str | bytes | list[str | bytes]]:
    """Group pairs by key, as expected by httpx multipart ``data``.

    Repeated keys are collected into a list, preserving order.

    Example:
        ```pycon
        >>> from netfacade.utils.encoding import group_pairs
        >>> group_pairs([("a", "1"), ("b[]", "x"), ("b[]", "y")])
        {'a': '1', 'b[]': ['x', 'y']}

        ```
    """
    grouped: dict[str, str | bytes | list[str | bytes]] = {}
    for key, value in pairs:
        if key not in grouped:
            grouped[key] = value
            continue
        existing = grouped[key]
        if isinstance(existing, list):
            existing.append(value)
        else:
            grouped[key] = [existing, value]
    return grouped


def text_pairs(pairs: list[FormPair]) -> list[tuple[str, str]]:
    """Decode ``bytes`` values as UTF-8, as required by httpx query
    parameters.

    Raises:
        UnicodeDecodeError: If a ``bytes`` value is not valid UTF-8.

    Example:
        ```pycon
        >>> from netfacade.utils.encoding import text_pairs
        >>> text_pairs([("q", b"cat"), ("page", "2")])
        [('q', 'cat'), ('page', '2')]

        ```
    """
    return [
        (key, value.decode("utf-8") if isinstance(value, bytes) else value)
        for key, value in pairs
    ]
