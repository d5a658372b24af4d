"""Concrete widgets — labelled inputs built on ``formlet()``.

Every widget renders as a captioned label inside a paragraph::

    <p><label><span>Name: </span><input name="name" value="" class="text"></label></p>

and redisplays the previously submitted value when there is one.
"""

from collections.abc import Callable, Iterable, Sequence

from formlets.config import DEFAULT_CONFIG, FormletConfig
from formlets.core import Formlet, formlet
from formlets.markup import Markup, input_, label, option, p, select, span, textarea
from formlets.result import Ok, Result, failure


def _captioned(caption: str, control: Markup, config: FormletConfig) -> Markup:
    return p(label(span(f"{caption}{config.caption_suffix}"), control))


def text_input(
    name: str,
    caption: str,
    default: str | None = None,
    *,
    config: FormletConfig = DEFAULT_CONFIG,
) -> Formlet[str]:
    """A single-line text input with a label."""

    def render(value: str | None) -> Markup:
        shown = value if value is not None else default
        control = input_(name=name, value=shown or "", class_=config.text_class)
        return _captioned(caption, control, config)

    return formlet(name, render, config=config)


def area_input(
    name: str,
    caption: str,
    default: str | None = None,
    *,
    config: FormletConfig = DEFAULT_CONFIG,
) -> Formlet[str]:
    """A textarea with a label."""

    def render(value: str | None) -> Markup:
        shown = value if value is not None else default
        return _captioned(caption, textarea(shown or "", name=name), config)

    return formlet(name, render, config=config)


def drop_input(
    choices: Sequence[tuple[str, str]],
    name: str,
    caption: str,
    default_key: str,
    *,
    config: FormletConfig = DEFAULT_CONFIG,
) -> Formlet[str]:
    """A drop-down select with a label.

    The option whose key matches the submitted value is selected. When
    nothing matches (or nothing was submitted), the option whose key is
    *default_key* is selected instead.

    Args:
        choices: ``(key, label)`` pairs, usually built with ``options()``.
        name: Field name.
        caption: Label text.
        default_key: Key to select when the submission selects nothing.
    """

    def render(value: str | None) -> Markup:
        matched = any(key == value for key, _ in choices)
        items = [
            option(
                title,
                value=key,
                selected="selected" if key == value or (not matched and key == default_key) else None,
            )
            for key, title in choices
        ]
        return _captioned(caption, select(*items, name=name), config)

    return formlet(name, render, config=config)


def submit_input(name: str, caption: str) -> Markup:
    """A captioned submit button. Markup only; submit buttons extract nothing."""
    return p(input_(type="submit", name=name, value=caption))


def options[O](
    slug_of: Callable[[O], str],
    caption_of: Callable[[O], str],
    items: Iterable[O],
) -> list[tuple[str, str]]:
    """Make ``(key, label)`` pairs for ``drop_input``, led by a blank choice."""
    return [("", ""), *((slug_of(item), caption_of(item)) for item in items)]


def find_option[O, T](
    predicate: Callable[[O], bool],
    items: Iterable[O],
    field_of: Callable[[O], T],
) -> Result[T]:
    """Look up an internal value from a submitted slug.

    Returns ``field_of`` of the first item matching *predicate*, or a
    failure with an empty message when there is none. Callers supply the
    context for that message.
    """
    for item in items:
        if predicate(item):
            return Ok(field_of(item))
    return failure("")
