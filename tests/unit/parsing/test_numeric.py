"""Test numeric literal parsing."""
from decimal import Decimal
import pytest
from number_words.errors import InvalidNumberError
from number_words.parsing.numeric import MAX_DIGITS, parse


class TestParseInt:
    def test_positive(self):
        result = parse(42)
        assert (result.is_negative, result.integer_digits, result.decimal_digits) == (False, "42", "")

    def test_negative(self):
        result = parse(-7)
        assert result.is_negative
        assert result.integer_digits == "7"

    def test_zero(self):
        assert parse(0).is_zero

    def test_arbitrary_size(self):
        assert parse(10**40).integer_digits == "1" + "0" * 40

    def test_bool_rejected(self):
        with pytest.raises(InvalidNumberError):
            parse(True)


class TestParseFloat:
    def test_fraction(self):
        result = parse(27.312)
        assert (result.integer_digits, result.decimal_digits) == ("27", "312")

    def test_whole_float_has_no_decimals(self):
        assert parse(5.0).decimal_digits == ""

    def test_exponent_form(self):
        assert parse(1e21).integer_digits == "1" + "0" * 21

    def test_small_exponent(self):
        result = parse(5e-07)
        assert (result.integer_digits, result.decimal_digits) == ("0", "0000005")

    def test_negative_zero(self):
        result = parse(-0.0)
        assert result.is_zero

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rejected(self, value):
        with pytest.raises(InvalidNumberError):
            parse(value)


class TestParseDecimal:
    def test_trailing_zeros_kept(self):
        assert parse(Decimal("1.50")).decimal_digits == "50"

    def test_positive_exponent(self):
        assert parse(Decimal("1E+3")).integer_digits == "1000"

    def test_nan_rejected(self):
        with pytest.raises(InvalidNumberError):
            parse(Decimal("NaN"))


class TestParseString:
    def test_whitespace_stripped(self):
        assert parse(" 42 ").integer_digits == "42"

    def test_explicit_plus(self):
        result = parse("+3.5")
        assert not result.is_negative
        assert (result.integer_digits, result.decimal_digits) == ("3", "5")

    def test_missing_integer_part(self):
        result = parse("-.5")
        assert result.is_negative
        assert (result.integer_digits, result.decimal_digits) == ("0", "5")

    def test_trailing_point(self):
        result = parse("5.")
        assert (result.integer_digits, result.decimal_digits) == ("5", "")

    def test_leading_zeros_stripped(self):
        assert parse("007").integer_digits == "7"

    def test_scientific(self):
        result = parse("1.2e3")
        assert (result.integer_digits, result.decimal_digits) == ("1200", "")

    def test_scientific_negative_exponent(self):
        result = parse("12.5E-1")
        assert (result.integer_digits, result.decimal_digits) == ("1", "25")

    def test_long_digit_string(self):
        digits = "9" * 100
        assert parse(digits).integer_digits == digits

    @pytest.mark.parametrize("value", ["", "   ", ".", "-", "12kg", "1,000", "1 000", "1.2.3", "e5", "٥"])
    def test_invalid_rejected(self, value):
        with pytest.raises(InvalidNumberError):
            parse(value)


class TestParseOtherTypes:
    @pytest.mark.parametrize("value", [None, [1], {"value": 1}, b"12"])
    def test_rejected(self, value):
        with pytest.raises(InvalidNumberError):
            parse(value)

    def test_invalid_number_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse("abc")


class TestDigitLimit:
    @pytest.mark.parametrize("value", ["1e3000000", "1e-3000000", "-7.5E+99999", "1e" + "9" * 5000])
    def test_huge_exponent_rejected_before_expansion(self, value):
        with pytest.raises(InvalidNumberError):
            parse(value)

    def test_exponent_up_to_limit_accepted(self):
        result = parse(f"1e{MAX_DIGITS - 1}")
        assert len(result.integer_digits) == MAX_DIGITS

    def test_long_fraction_from_exponent_rejected(self):
        with pytest.raises(InvalidNumberError):
            parse(f"5e-{MAX_DIGITS}")

    def test_leading_zero_exponent_accepted(self):
        assert parse("2e0000000000003").integer_digits == "2000"

    def test_long_integer_string_rejected(self):
        with pytest.raises(InvalidNumberError):
            parse("1" * (MAX_DIGITS + 1))

    def test_long_decimal_string_rejected(self):
        with pytest.raises(InvalidNumberError):
            parse("0." + "1" * (MAX_DIGITS + 1))

    def test_int_beyond_conversion_limit_rejected(self):
        with pytest.raises(InvalidNumberError):
            parse(10**5000)

    def test_int_over_limit_rejected(self):
        with pytest.raises(InvalidNumberError):
            parse(10**MAX_DIGITS)

    @pytest.mark.parametrize("value", [Decimal("1E+3000000"), Decimal("1E-3000000")])
    def test_decimal_huge_exponent_rejected(self, value):
        with pytest.raises(InvalidNumberError):
            parse(value)
