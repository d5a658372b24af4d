"""Submitted parameters — the raw input every formlet extracts from.

``Params`` maps raw field-name bytes to the ordered raw values submitted
for that field. Only the first value is ever consulted by a formlet; the
rest are kept so multi-valued fields survive conversion.

Request parsers in most frameworks hand out ``str``-keyed mappings, so
``params_from()`` converts those (anything with ``get_list``, such as a
``FormData`` or ``QueryParams``, or a plain dict) into ``Params``.
URL-encoded bodies can be parsed directly with ``parse_urlencoded()``,
which uses stdlib ``urllib.parse``.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import parse_qs

from formlets.errors import ConfigurationError

logger = logging.getLogger("formlets.params")

type Params = Mapping[bytes, Sequence[bytes]]


def first_value(params: Params, name: str, encoding: str = "utf-8") -> str | None:
    """Return the decoded first value submitted for *name*, or ``None``.

    A field present with no values counts as missing.
    """
    values = params.get(name.encode(encoding))
    if not values:
        return None
    return values[0].decode(encoding)


def _encode(value: Any, encoding: str) -> bytes:
    if isinstance(value, bytes):
        return value
    return str(value).encode(encoding)


def params_from(data: Any, *, encoding: str = "utf-8") -> dict[bytes, list[bytes]]:
    """Convert a form mapping into ``Params``.

    Accepts:
    - a multi-value mapping with ``get_list`` (``FormData``, ``QueryParams``)
    - a ``Mapping`` whose values are strings or sequences of strings
    - a ``Mapping`` already keyed by bytes

    Raises:
        ConfigurationError: If *data* is not a mapping.
    """
    get_list = getattr(data, "get_list", None)
    if callable(get_list):
        converted = {_encode(key, encoding): [_encode(v, encoding) for v in get_list(key)] for key in data}
    elif isinstance(data, Mapping):
        converted = {}
        for key, value in data.items():
            if isinstance(value, (str, bytes)):
                values = [value]
            elif isinstance(value, Sequence):
                values = list(value)
            else:
                values = [str(value)]
            converted[_encode(key, encoding)] = [_encode(v, encoding) for v in values]
    else:
        msg = f"Cannot build form params from {type(data).__name__!r}; expected a mapping"
        raise ConfigurationError(msg)

    logger.debug("Converted %d form field(s) to params", len(converted))
    return converted


def parse_urlencoded(body: bytes) -> dict[bytes, list[bytes]]:
    """Parse an ``application/x-www-form-urlencoded`` body into ``Params``.

    Blank values are kept, so a submitted empty field is distinguishable
    from a missing one.
    """
    parsed = parse_qs(body, keep_blank_values=True)
    logger.debug("Parsed %d url-encoded field(s)", len(parsed))
    return parsed
