"""Tests for the template lexer."""

import pytest

from typed_format import LiteralFragment
from typed_format import PlaceholderFragment
from typed_format import Selector
from typed_format import TemplateSyntaxError
from typed_format import parse_template
from typed_format.parsing.enums import Align
from typed_format.parsing.enums import Coercion


def _placeholders(template: str) -> list[PlaceholderFragment]:
    return [
        f
        for f in parse_template(template, environ={})
        if isinstance(f, PlaceholderFragment)
    ]


class TestFragments:
    """Test splitting templates into fragments."""

    def test_literal_and_placeholder(self) -> None:
        """Test fragments are produced in output order."""
        fragments = parse_template("a{0}b")

        assert len(fragments) == 3
        assert fragments[0] == LiteralFragment(text="a")
        assert isinstance(fragments[1], PlaceholderFragment)
        assert fragments[1].index == 0
        assert fragments[1].position == 1
        assert fragments[2] == LiteralFragment(text="b")

    def test_escaped_braces_merge_into_literal(self) -> None:
        """Test doubled braces become one literal fragment."""
        assert parse_template("{{}}") == [LiteralFragment(text="{}")]

    def test_empty_template(self) -> None:
        """Test an empty template has no fragments."""
        assert parse_template("") == []

    def test_adjacent_placeholders(self) -> None:
        """Test no empty literal is emitted between placeholders."""
        fragments = parse_template("{}{}")
        assert all(isinstance(f, PlaceholderFragment) for f in fragments)
        assert len(fragments) == 2


class TestIndices:
    """Test automatic and explicit index assignment."""

    def test_automatic_counter(self) -> None:
        """Test the counter advances on every positional placeholder."""
        indices = [p.index for p in _placeholders("{} {3} {}")]
        assert indices == [0, 3, 2]

    def test_environment_does_not_advance_counter(self) -> None:
        """Test environment placeholders leave the counter alone."""
        placeholders = _placeholders("{$HOME} {}")
        assert placeholders[0].environment_name == "HOME"
        assert placeholders[0].index is None
        assert placeholders[1].index == 0

    def test_signed_index_rejected(self) -> None:
        """Test a sign in an index is a syntax error."""
        with pytest.raises(TemplateSyntaxError) as exc_info:
            parse_template("{-1}")

        assert exc_info.value.position == 1
        assert "sign character" in exc_info.value.message

    def test_negative_zero_rejected(self) -> None:
        """Test -0 has its own message."""
        with pytest.raises(TemplateSyntaxError) as exc_info:
            parse_template("{-0}")

        assert "-0" in exc_info.value.message

    def test_index_overflow(self) -> None:
        """Test indices beyond the 32-bit range are rejected."""
        with pytest.raises(TemplateSyntaxError) as exc_info:
            parse_template("{99999999999}")

        assert "overflows" in exc_info.value.message


class TestPlaceholderParts:
    """Test selectors, conversions and specifiers."""

    def test_selector_chain(self) -> None:
        """Test field and index selectors are kept in order."""
        placeholder = _placeholders("{0.items[2].abs}")[0]
        assert placeholder.selectors == [
            Selector(name="items"),
            Selector(name="2", bracketed=True),
            Selector(name="abs"),
        ]

    def test_selector_str(self) -> None:
        """Test selectors print as written."""
        assert str(Selector(name="a")) == ".a"
        assert str(Selector(name="1", bracketed=True)) == "[1]"

    def test_conversion(self) -> None:
        """Test the conversion tag is recorded."""
        assert _placeholders("{0!i}")[0].coercion == Coercion.INTEGER

    def test_unknown_conversion(self) -> None:
        """Test an unknown conversion tag is rejected."""
        with pytest.raises(TemplateSyntaxError) as exc_info:
            parse_template("{0!x}")

        assert exc_info.value.position == 3

    def test_specifier_decoded(self) -> None:
        """Test the specifier is decoded while parsing."""
        placeholder = _placeholders("{0:*^9}")[0]
        assert placeholder.specifier_text == "*^9"
        assert placeholder.specifier.fill == "*"
        assert placeholder.specifier.align == Align.CENTER
        assert placeholder.specifier.width == 9

    def test_specifier_unescapes_braces(self) -> None:
        """Test doubled braces inside a specifier become single braces."""
        placeholder = _placeholders("{0:{{>4}")[0]
        assert placeholder.specifier_text == "{>4"

    def test_specifier_error_position_is_absolute(self) -> None:
        """Test specifier errors point into the full template."""
        with pytest.raises(TemplateSyntaxError) as exc_info:
            parse_template("ab{0:.-1}")

        assert exc_info.value.position == 6


class TestSyntaxErrors:
    """Test malformed templates."""

    @pytest.mark.parametrize(
        ("template", "position"),
        [
            ("}", 0),
            ("abc}", 3),
            ("{0", 2),
            ("{0 x}", 3),
            ("{0[1}", 4),
            ("{0.}", 3),
        ],
    )
    def test_error_positions(self, template: str, position: int) -> None:
        """Test each error reports where it was detected."""
        with pytest.raises(TemplateSyntaxError) as exc_info:
            parse_template(template)

        assert exc_info.value.position == position
        assert exc_info.value.template == template

    def test_unescaped_open_in_specifier(self) -> None:
        """Test a lone opening brace inside a specifier is rejected."""
        with pytest.raises(TemplateSyntaxError):
            parse_template("{0:{>4}")


class TestEnvironment:
    """Test environment placeholder resolution while parsing."""

    def test_environment_rendered(self) -> None:
        """Test environment placeholders are bound during parsing."""
        placeholder = [
            f
            for f in parse_template("{$NAME:>5}", environ={"NAME": "ab"})
            if isinstance(f, PlaceholderFragment)
        ][0]
        assert placeholder.bound
        assert placeholder.text == "   ab"

    def test_environment_left_unresolved(self) -> None:
        """Test resolution can be skipped for introspection."""
        fragment = parse_template(
            "{$NAME}", environ={"NAME": "ab"}, resolve_environment=False
        )[0]
        assert isinstance(fragment, PlaceholderFragment)
        assert not fragment.bound
        assert fragment.text == ""
