"""Value transforms for formlets — required, optional, parsed, wrapped.

Each transform returns a new formlet sharing the original's name, and
(except ``wrap``) its rendering. Failures from the wrapped formlet
always propagate unchanged; a transform only adds its own error when
the wrapped formlet succeeded.

Parsers passed to ``parse()`` follow the same protocol as ``integer``::

    def parser(text: str) -> Result[T]:
        '''Return Ok(value), or failure("message").'''
"""

import re
from collections.abc import Callable
from dataclasses import replace
from typing import Any

from formlets.core import Formlet
from formlets.markup import Markup
from formlets.params import Params
from formlets.result import Err, Ok, Result, failure

# Type alias for a parser function
type Parser[A, B] = Callable[[A], Result[B]]


def _suffix(message: str, name: str | None) -> str:
    if name is None:
        return message
    return f"{message}: {name}"


def req(formlet: Formlet[str]) -> Formlet[str]:
    """Make an input required: empty text is an error."""
    inner = formlet.extract
    name = formlet.name

    def extract(params: Params) -> Result[str]:
        result = inner(params)
        if isinstance(result, Ok) and result.value == "":
            return failure(_suffix("required input", name))
        return result

    return replace(formlet, extract=extract)


def opt(formlet: Formlet[str]) -> Formlet[str | None]:
    """Make an input optional: empty text extracts as ``None``."""
    inner = formlet.extract

    def extract(params: Params) -> Result[str | None]:
        result = inner(params)
        if isinstance(result, Ok) and result.value == "":
            return Ok(None)
        return result

    return replace(formlet, extract=extract)


def parse[A, B](parser: Parser[A, B], formlet: Formlet[A]) -> Formlet[B]:
    """Parse a formlet's value; parser errors are suffixed with the field name."""
    inner = formlet.extract
    name = formlet.name

    def extract(params: Params) -> Result[B]:
        result = inner(params)
        if isinstance(result, Err):
            return result
        parsed = parser(result.value)
        if isinstance(parsed, Err):
            return Err(tuple(_suffix(message, name) for message in parsed.errors))
        return parsed

    return replace(formlet, extract=extract)


def wrap(fn: Callable[[Markup], Markup], formlet: Formlet[Any]) -> Formlet[Any]:
    """Post-process a formlet's rendered markup."""
    inner = formlet.render

    def render(params: Params) -> Markup:
        return fn(inner(params))

    return replace(formlet, render=render)


_INTEGER_RE = re.compile(r"-?[0-9]+")


def integer(value: str) -> Result[int]:
    """Parse a whole decimal integer, ignoring surrounding whitespace."""
    stripped = value.strip()
    if not _INTEGER_RE.fullmatch(stripped):
        return failure("expected integer")
    try:
        return Ok(int(stripped))
    except ValueError:
        # Past the interpreter's digit limit for str-to-int conversion
        return failure("expected integer")
