"""Markup boundary — kida ``Markup`` plus the few element builders widgets need.

Formlets treat markup as an opaque value with an empty element and an
associative concatenation. Everything here returns ``Markup`` so that a
kida template embedding a rendered form does not escape it twice::

    html = concat(p(label(span("Name: "), input_(name="name", value=v))), EMPTY)
"""

import html
from typing import Any

from kida.template import Markup

__all__ = [
    "EMPTY",
    "Markup",
    "concat",
    "element",
    "input_",
    "label",
    "option",
    "p",
    "select",
    "span",
    "text",
    "textarea",
]

EMPTY = Markup("")


def text(value: Any) -> str:
    """Escape *value* for element content unless it is already markup."""
    if isinstance(value, Markup):
        return str(value)
    if hasattr(value, "__html__"):
        return value.__html__()
    return html.escape(str(value), quote=True)


def concat(*parts: Any) -> Markup:
    """Concatenate markup fragments left to right. ``EMPTY`` is the identity."""
    return Markup("".join(text(part) for part in parts))


def _attrs(attrs: dict[str, Any]) -> str:
    out: list[str] = []
    for key, value in attrs.items():
        if value is None or value is False:
            continue
        name = key[:-1] if key.endswith("_") else key
        name = name.replace("_", "-")
        if value is True:
            out.append(f" {name}")
        else:
            out.append(f' {name}="{html.escape(str(value), quote=True)}"')
    return "".join(out)


def element(tag: str, *children: Any, void: bool = False, **attrs: Any) -> Markup:
    """Build an HTML element.

    Keyword names ending in ``_`` lose it (``class_`` becomes ``class``)
    and inner underscores become hyphens (``data_id`` becomes ``data-id``).
    ``None`` and ``False`` attributes are omitted, ``True`` renders the
    bare attribute name. Void elements take no children and no end tag.
    """
    start = f"<{tag}{_attrs(attrs)}>"
    if void:
        return Markup(start)
    return Markup(f"{start}{concat(*children)}</{tag}>")


def p(*children: Any, **attrs: Any) -> Markup:
    return element("p", *children, **attrs)


def label(*children: Any, **attrs: Any) -> Markup:
    return element("label", *children, **attrs)


def span(*children: Any, **attrs: Any) -> Markup:
    return element("span", *children, **attrs)


def input_(**attrs: Any) -> Markup:
    return element("input", void=True, **attrs)


def select(*children: Any, **attrs: Any) -> Markup:
    return element("select", *children, **attrs)


def option(*children: Any, **attrs: Any) -> Markup:
    return element("option", *children, **attrs)


def textarea(*children: Any, **attrs: Any) -> Markup:
    return element("textarea", *children, **attrs)
