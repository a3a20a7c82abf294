"""
Unit tests for value inference.

Covers rule precedence, integer width limits and strict typed conversion.
"""

import pytest

from tini.errors import IntegerOverflow, TypeMismatch
from tini.models.values import TypedValue, ValueKind, kind_for_type
from tini.tools.inference import INFERENCE_RULES, coerce, infer


class TestInfer:
    """Test cases for infer()."""

    def test_rule_order(self):
        """Test that rules are evaluated boolean, integer, float."""
        assert [kind for kind, _, _ in INFERENCE_RULES] == [
            ValueKind.BOOLEAN, ValueKind.INTEGER, ValueKind.FLOAT
        ]

    def test_booleans(self):
        """Test exact boolean literals."""
        assert infer("true") == TypedValue(kind=ValueKind.BOOLEAN, value=True)
        assert infer("false") == TypedValue(kind=ValueKind.BOOLEAN, value=False)

    @pytest.mark.parametrize("raw", ["True", "FALSE", "yes", "1 true"])
    def test_boolean_is_case_sensitive(self, raw):
        """Test that other spellings are text."""
        assert infer(raw).kind is ValueKind.TEXT

    @pytest.mark.parametrize("raw,expected", [
        ("100", 100),
        ("-42", -42),
        ("+7", 7),
        ("007", 7),
        ("0", 0),
    ])
    def test_integers(self, raw, expected):
        """Test signed integer literals."""
        typed = infer(raw)
        assert typed.kind is ValueKind.INTEGER
        assert typed.value == expected
        assert isinstance(typed.value, int) and not isinstance(typed.value, bool)

    def test_integer_is_not_promoted_to_float(self):
        """Test that a bare integer stays an integer."""
        assert infer("3").kind is ValueKind.INTEGER

    @pytest.mark.parametrize("raw,expected", [
        ("3.14", 3.14),
        ("-2.5", -2.5),
        ("1e3", 1000.0),
        ("2.5E-2", 0.025),
        ("+6.02e23", 6.02e23),
    ])
    def test_floats(self, raw, expected):
        """Test decimal and exponent float literals."""
        typed = infer(raw)
        assert typed.kind is ValueKind.FLOAT
        assert typed.value == pytest.approx(expected)

    @pytest.mark.parametrize("raw", ["inf", "nan", "1_000", "0x1F", "1.2.3", "3,14", "--1"])
    def test_number_lookalikes_are_text(self, raw):
        """Test strings Python would parse but the grammar does not allow."""
        assert infer(raw).kind is ValueKind.TEXT

    def test_text_is_trimmed(self):
        """Test that text keeps internal whitespace only."""
        typed = infer("  example   text  ")
        assert typed == TypedValue(kind=ValueKind.TEXT, value="example   text")

    def test_int64_bounds(self):
        """Test the limits of the default 64-bit width."""
        assert infer(str(2**63 - 1)).value == 2**63 - 1
        assert infer(str(-2**63)).value == -2**63

    @pytest.mark.parametrize("raw", [str(2**63), str(-2**63 - 1), "1" * 40, "9" * 5000])
    def test_int64_overflow(self, raw):
        """Test that literals outside 64 bits fail."""
        with pytest.raises(IntegerOverflow) as exc_info:
            infer(raw)
        assert exc_info.value.bits == 64

    def test_custom_width(self):
        """Test a narrower integer width."""
        assert infer("127", int_bits=8).value == 127
        with pytest.raises(IntegerOverflow):
            infer("128", int_bits=8)


class TestCoerce:
    """Test cases for coerce()."""

    def test_matching_types(self):
        """Test requests that match the inferred kind."""
        assert coerce("true", bool) is True
        assert coerce("10", int) == 10
        assert coerce("10.5", float) == 10.5
        assert coerce("example text", str) == "example text"

    def test_wrong_case_boolean(self):
        """Test that 'True' is not a boolean."""
        with pytest.raises(TypeMismatch) as exc_info:
            coerce("True", bool)
        assert exc_info.value.expected is ValueKind.BOOLEAN
        assert exc_info.value.actual is ValueKind.TEXT

    def test_bad_cast(self):
        """Test that a float is not an integer."""
        with pytest.raises(TypeMismatch):
            coerce("3.14", int)

    def test_integer_is_not_a_float(self):
        """Test that there is no int to float coercion."""
        with pytest.raises(TypeMismatch):
            coerce("3", float)

    def test_integer_is_not_a_boolean(self):
        """Test that 1 is not true."""
        with pytest.raises(TypeMismatch):
            coerce("1", bool)

    @pytest.mark.parametrize("raw,expected", [
        (" 100 ", "100"),
        ("true", "true"),
        ("3.14", "3.14"),
        (str(2**64), str(2**64)),
    ])
    def test_any_value_reads_as_text(self, raw, expected):
        """Test that a text request returns the trimmed raw string."""
        assert coerce(raw, str) == expected

    def test_unsupported_type(self):
        """Test that only the four scalar types can be requested."""
        with pytest.raises(TypeError):
            coerce("1", list)


class TestKindForType:
    """Test cases for kind_for_type()."""

    def test_mapping(self):
        """Test the Python type to kind mapping."""
        assert kind_for_type(bool) is ValueKind.BOOLEAN
        assert kind_for_type(int) is ValueKind.INTEGER
        assert kind_for_type(float) is ValueKind.FLOAT
        assert kind_for_type(str) is ValueKind.TEXT

    def test_typed_value_is_a(self):
        """Test TypedValue.is_a()."""
        assert TypedValue(kind=ValueKind.INTEGER, value=1).is_a(int)
        assert not TypedValue(kind=ValueKind.INTEGER, value=1).is_a(float)
