"""Tests for formlets.core — leaf formlets, pure, and the composition rule."""

from dataclasses import dataclass

import pytest

from formlets.core import Formlet, apply, curry, fmap, formlet, lift, pure
from formlets.errors import ConfigurationError
from formlets.markup import EMPTY, Markup
from formlets.result import Err, Ok, failure


def leaf(name: str) -> Formlet[str]:
    """A leaf formlet that renders as ``[name=value]``."""
    return formlet(name, lambda value: Markup(f"[{name}={value}]"))


def failing(name: str, *messages: str) -> Formlet[object]:
    return Formlet(extract=lambda params: failure(*messages), name=name, render=lambda params: EMPTY)


@dataclass(frozen=True, slots=True)
class Person:
    name: str
    age: str


# ---------------------------------------------------------------------------
# formlet()
# ---------------------------------------------------------------------------


class TestLeafFormlet:
    def test_extracts_first_value(self) -> None:
        result = leaf("color").extract({b"color": [b"red", b"blue"]})
        assert result == Ok("red")

    def test_decodes_utf8(self) -> None:
        result = leaf("city").extract({b"city": ["Zürich".encode()]})
        assert result == Ok("Zürich")

    def test_missing_field(self) -> None:
        assert leaf("color").extract({}) == Err(("missing input: color",))

    def test_field_with_no_values_is_missing(self) -> None:
        assert leaf("color").extract({b"color": []}) == Err(("missing input: color",))

    def test_empty_value_is_not_missing(self) -> None:
        assert leaf("color").extract({b"color": [b""]}) == Ok("")

    def test_name(self) -> None:
        assert leaf("color").name == "color"

    def test_render_with_submitted_value(self) -> None:
        assert str(leaf("color").render({b"color": [b"red"]})) == "[color=red]"

    def test_render_without_value(self) -> None:
        assert str(leaf("color").render({})) == "[color=None]"


# ---------------------------------------------------------------------------
# pure()
# ---------------------------------------------------------------------------


class TestPure:
    def test_always_succeeds(self) -> None:
        assert pure(42).extract({}) == Ok(42)

    def test_renders_empty(self) -> None:
        assert str(pure(42).render({b"x": [b"1"]})) == ""

    def test_anonymous(self) -> None:
        assert pure(42).name is None

    def test_identity_law(self) -> None:
        x = leaf("color")
        combined = apply(pure(lambda v: v), x)
        for params in ({b"color": [b"red"]}, {}):
            assert combined.extract(params) == x.extract(params)
            assert str(combined.render(params)) == str(x.render(params))
        assert combined.name == x.name


# ---------------------------------------------------------------------------
# apply()
# ---------------------------------------------------------------------------


class TestApply:
    def test_both_succeed(self) -> None:
        f = pure(str.upper)
        assert apply(f, leaf("color")).extract({b"color": [b"red"]}) == Ok("RED")

    def test_render_concatenates_left_to_right(self) -> None:
        form = lift(Person, leaf("name"), leaf("age"))
        params = {b"name": [b"Bob"], b"age": [b"7"]}
        assert str(form.render(params)) == "[name=Bob][age=7]"

    def test_accumulates_both_errors_left_to_right(self) -> None:
        form = lift(Person, leaf("name"), leaf("age"))
        assert form.extract({}) == Err(("missing input: name", "missing input: age"))

    def test_only_value_side_fails(self) -> None:
        form = lift(Person, leaf("name"), leaf("age"))
        assert form.extract({b"name": [b"Bob"]}) == Err(("missing input: age",))

    def test_only_function_side_fails(self) -> None:
        form = lift(Person, leaf("name"), leaf("age"))
        assert form.extract({b"age": [b"7"]}) == Err(("missing input: name",))

    def test_function_side_errors_come_first(self) -> None:
        f = failing("f", "f1", "f2")
        v = failing("v", "v1")
        assert apply(f, v).extract({}) == Err(("f1", "f2", "v1"))

    def test_no_short_circuit_over_many_fields(self) -> None:
        names = ["a", "b", "c", "d", "e", "f"]
        form = lift(lambda *values: values, *(leaf(n) for n in names))
        params = {b"b": [b"1"], b"d": [b"2"], b"f": [b"3"]}
        assert form.extract(params) == Err(
            ("missing input: a", "missing input: c", "missing input: e"),
        )

    def test_all_present(self) -> None:
        form = lift(Person, leaf("name"), leaf("age"))
        result = form.extract({b"name": [b"Bob"], b"age": [b"7"]})
        assert result == Ok(Person(name="Bob", age="7"))


class TestComposedName:
    def test_two_named_become_anonymous(self) -> None:
        form = apply(apply(pure(curry(Person, 2)), leaf("name")), leaf("age"))
        assert form.name is None

    def test_left_name_kept_when_right_anonymous(self) -> None:
        f = fmap(lambda v: lambda _: v, leaf("name"))
        assert apply(f, pure(None)).name == "name"

    def test_right_name_kept_when_left_anonymous(self) -> None:
        assert apply(pure(str.upper), leaf("age")).name == "age"

    def test_both_anonymous(self) -> None:
        assert apply(pure(str.upper), pure("x")).name is None

    def test_ap_method(self) -> None:
        assert pure(str.upper).ap(leaf("age")).name == "age"


# ---------------------------------------------------------------------------
# fmap(), curry(), lift()
# ---------------------------------------------------------------------------


class TestFmap:
    def test_maps_success(self) -> None:
        assert leaf("n").map(len).extract({b"n": [b"abc"]}) == Ok(3)

    def test_failure_propagates(self) -> None:
        assert fmap(len, leaf("n")).extract({}) == Err(("missing input: n",))

    def test_render_and_name_untouched(self) -> None:
        mapped = fmap(len, leaf("n"))
        assert mapped.name == "n"
        assert str(mapped.render({b"n": [b"abc"]})) == "[n=abc]"


class TestCurry:
    def test_three_arguments(self) -> None:
        assert curry(lambda a, b, c: a + b + c, 3)("x")("y")("z") == "xyz"

    def test_single_argument(self) -> None:
        assert curry(str.upper, 1)("a") == "A"

    def test_partial_applications_are_independent(self) -> None:
        add = curry(lambda a, b: a + b, 2)
        one = add(1)
        assert one(1) == 2
        assert one(10) == 11

    def test_zero_arity_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            curry(lambda: None, 0)


class TestLift:
    def test_single_formlet(self) -> None:
        assert lift(str.upper, leaf("n")).extract({b"n": [b"a"]}) == Ok("A")

    def test_no_formlets_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="at least one formlet"):
            lift(Person)

    def test_single_formlet_keeps_name(self) -> None:
        assert lift(str.upper, leaf("n")).name == "n"
