"""Formlets — composable form fields that render themselves and extract values.

A ``Formlet`` pairs a renderer with an extractor, both pure functions of
the submitted ``Params``. Leaf formlets read one named field; larger
formlets are built by applying a formlet of a function to a formlet of
an argument::

    @dataclass(frozen=True, slots=True)
    class Person:
        name: str
        age: int

    person = lift(
        Person,
        req(text_input("name", "Name")),
        parse(integer, text_input("age", "Age")),
    )

    person.extract({b"name": [b"Bob"], b"age": [b"42"]})
    # Ok(value=Person(name='Bob', age=42))

    person.extract({})
    # Err(errors=('missing input: name', 'missing input: age'))

Extraction never stops at the first failing field: every field is
evaluated and all error messages are returned together, in the order
the fields were combined.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

from formlets.config import DEFAULT_CONFIG, FormletConfig
from formlets.errors import ConfigurationError
from formlets.markup import EMPTY, Markup, concat
from formlets.params import Params, first_value
from formlets.result import Err, Ok, Result, failure


@dataclass(frozen=True, slots=True)
class Formlet[A]:
    """A form fragment: how to render it and how to extract its value.

    ``name`` is the field this formlet is attributable to, used only to
    decorate error messages. It is ``None`` for ``pure`` formlets and for
    composites of two named formlets.
    """

    extract: Callable[[Params], Result[A]]
    name: str | None
    render: Callable[[Params], Markup]

    def map[B](self, fn: Callable[[A], B]) -> Formlet[B]:
        """Transform the extracted value; rendering and name are untouched."""
        return fmap(fn, self)

    def ap(self, other: Formlet[Any]) -> Formlet[Any]:
        """Apply this formlet's function to *other*'s value. See ``apply``."""
        return apply(self, other)


def formlet(
    name: str,
    render_field: Callable[[str | None], Markup],
    *,
    config: FormletConfig = DEFAULT_CONFIG,
) -> Formlet[str]:
    """Make a leaf formlet for the field *name*.

    *render_field* receives the previously submitted text, or ``None``
    when the field was not submitted, so widgets can redisplay input.
    """

    def extract(params: Params) -> Result[str]:
        value = first_value(params, name, config.encoding)
        if value is None:
            return failure(f"missing input: {name}")
        return Ok(value)

    def render(params: Params) -> Markup:
        return render_field(first_value(params, name, config.encoding))

    return Formlet(extract=extract, name=name, render=render)


def pure[A](value: A) -> Formlet[A]:
    """A formlet that always extracts *value* and renders nothing."""
    return Formlet(extract=lambda params: Ok(value), name=None, render=lambda params: EMPTY)


def apply(f: Formlet[Any], v: Formlet[Any]) -> Formlet[Any]:
    """Combine a formlet of a function with a formlet of its argument.

    Rendering concatenates *f*'s markup then *v*'s. The value side is
    evaluated first; errors from both sides accumulate with *f*'s errors
    ahead of *v*'s, so the final list follows field order.
    """

    def extract(params: Params) -> Result[Any]:
        arg = v.extract(params)
        fn = f.extract(params)
        if isinstance(arg, Ok):
            if isinstance(fn, Ok):
                return Ok(fn.value(arg.value))
            return fn
        # A successful f contributes nothing once v has failed.
        if isinstance(fn, Err):
            return fn + arg
        return arg

    def render(params: Params) -> Markup:
        return concat(f.render(params), v.render(params))

    if f.name is not None and v.name is not None:
        name = None
    else:
        name = f.name if f.name is not None else v.name

    return Formlet(extract=extract, name=name, render=render)


def fmap[A, B](fn: Callable[[A], B], formlet: Formlet[A]) -> Formlet[B]:
    """Map *fn* over a formlet's successful value."""
    inner = formlet.extract

    def extract(params: Params) -> Result[B]:
        result = inner(params)
        if isinstance(result, Err):
            return result
        return Ok(fn(result.value))

    return replace(formlet, extract=extract)


def curry(fn: Callable[..., Any], arity: int) -> Callable[[Any], Any]:
    """Turn an *arity*-argument callable into nested one-argument callables.

    ``curry(f, 3)(a)(b)(c) == f(a, b, c)``.

    Raises:
        ConfigurationError: If *arity* is less than 1.
    """
    if arity < 1:
        msg = f"curry() needs an arity of at least 1, got {arity}"
        raise ConfigurationError(msg)

    def collect(args: tuple[Any, ...]) -> Callable[[Any], Any]:
        def take(arg: Any) -> Any:
            collected = (*args, arg)
            if len(collected) == arity:
                return fn(*collected)
            return collect(collected)

        return take

    return collect(())


def lift(fn: Callable[..., Any], *formlets: Formlet[Any]) -> Formlet[Any]:
    """Build a formlet of ``fn(*values)`` from one formlet per argument.

    Typically *fn* is a record constructor (a dataclass or a
    ``NamedTuple``) with one field per formlet, in order.

    Raises:
        ConfigurationError: If no formlets are given.
    """
    if not formlets:
        msg = "lift() needs at least one formlet; use pure() for a constant"
        raise ConfigurationError(msg)
    combined = pure(curry(fn, len(formlets)))
    for each in formlets:
        combined = apply(combined, each)
    return combined
