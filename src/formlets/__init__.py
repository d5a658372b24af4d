"""Formlets — composable HTML form fields with accumulated validation.

Each formlet knows how to render its own inputs and how to extract its
value from submitted form data. Combine them into one formlet whose
value is a record and whose errors list every failing field at once.

Basic usage::

    from formlets import integer, lift, parse, req, run, text_input

    person = lift(
        Person,
        req(text_input("name", "Name")),
        parse(integer, text_input("age", "Age")),
    )

    submission = run(person, {b"name": [b"Bob"], b"age": [b"x"]})
    submission.errors  # ("expected integer: age",)
    submission.html    # the form, pre-filled with what was submitted
"""

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_CONFIG",
    "ConfigurationError",
    "Err",
    "ExtractionError",
    "Formlet",
    "FormletConfig",
    "FormletError",
    "Markup",
    "Ok",
    "Submission",
    "apply",
    "area_input",
    "curry",
    "drop_input",
    "failure",
    "find_option",
    "fmap",
    "formlet",
    "integer",
    "lift",
    "opt",
    "options",
    "params_from",
    "parse",
    "parse_urlencoded",
    "pure",
    "req",
    "run",
    "submission_from",
    "submit_input",
    "text_input",
    "wrap",
]

_LAZY_IMPORTS: dict[str, str] = {
    "DEFAULT_CONFIG": "formlets.config",
    "FormletConfig": "formlets.config",
    "ConfigurationError": "formlets.errors",
    "ExtractionError": "formlets.errors",
    "FormletError": "formlets.errors",
    "Err": "formlets.result",
    "Ok": "formlets.result",
    "failure": "formlets.result",
    "Markup": "formlets.markup",
    "params_from": "formlets.params",
    "parse_urlencoded": "formlets.params",
    "Formlet": "formlets.core",
    "apply": "formlets.core",
    "curry": "formlets.core",
    "fmap": "formlets.core",
    "formlet": "formlets.core",
    "lift": "formlets.core",
    "pure": "formlets.core",
    "integer": "formlets.fields",
    "opt": "formlets.fields",
    "parse": "formlets.fields",
    "req": "formlets.fields",
    "wrap": "formlets.fields",
    "area_input": "formlets.widgets",
    "drop_input": "formlets.widgets",
    "find_option": "formlets.widgets",
    "options": "formlets.widgets",
    "submit_input": "formlets.widgets",
    "text_input": "formlets.widgets",
    "Submission": "formlets.submission",
    "run": "formlets.submission",
    "submission_from": "formlets.submission",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import formlets`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
