"""Submission — one request's pass over a formlet: render once, extract once.

``run()`` works on raw ``Params``. ``submission_from()`` reads the form
from a request object first, so a handler can do::

    async def signup(request):
        submission = await submission_from(request, signup_form)
        if not submission:
            return page(form=submission.html, errors=submission.errors)
        create_user(submission.value)
"""

import logging
from dataclasses import dataclass
from typing import Any

from formlets.config import DEFAULT_CONFIG, FormletConfig
from formlets.core import Formlet
from formlets.markup import Markup
from formlets.params import Params, params_from
from formlets.result import Result

logger = logging.getLogger("formlets")


@dataclass(frozen=True, slots=True)
class Submission[A]:
    """The outcome of running a formlet against submitted params.

    ``html`` always holds the re-rendered form, pre-filled with the
    submitted values, so it can be shown alongside ``errors``.
    Falsy when the submission is invalid.
    """

    result: Result[A]
    html: Markup

    @property
    def is_valid(self) -> bool:
        """True if extraction produced a value."""
        return self.result.is_ok

    @property
    def value(self) -> A:
        """The extracted value.

        Raises:
            ExtractionError: If the submission is invalid.
        """
        return self.result.unwrap()

    @property
    def errors(self) -> tuple[str, ...]:
        """Accumulated error messages, empty when valid."""
        return self.result.errors

    def __bool__(self) -> bool:
        return self.is_valid


def run[A](formlet: Formlet[A], params: Params) -> Submission[A]:
    """Extract and render *formlet* against the same *params*."""
    result = formlet.extract(params)
    if not result:
        logger.debug(
            "Form %s failed with %d error(s)",
            formlet.name or "<anonymous>",
            len(result.errors),
        )
    return Submission(result=result, html=formlet.render(params))


async def submission_from[A](
    request: Any,
    formlet: Formlet[A],
    *,
    config: FormletConfig = DEFAULT_CONFIG,
) -> Submission[A]:
    """Read the request's form data and run *formlet* against it.

    Args:
        request: Anything with an async ``.form()`` method returning a
            form mapping (see ``params_from``).
        formlet: The form to extract.
        config: Supplies the codec used to re-encode the form data.
    """
    form = await request.form()
    return run(formlet, params_from(form, encoding=config.encoding))
