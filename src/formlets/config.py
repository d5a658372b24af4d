"""Formlet configuration.

FormletConfig is a frozen dataclass, shared by every widget that needs
it and passed explicitly as a keyword-only ``config`` argument.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FormletConfig:
    """Rendering and decoding options. Immutable after creation.

    Override what you need::

        config = FormletConfig(text_class="input", caption_suffix="")
    """

    # Codec for field names and submitted values
    encoding: str = "utf-8"

    # Widgets
    text_class: str = "text"
    caption_suffix: str = ": "


DEFAULT_CONFIG = FormletConfig()
