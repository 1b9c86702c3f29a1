import pytest

from aurora_calc.evaluator import (
    ExpressionSyntaxError, NonFiniteResult, UnsafeExpression,
    format_number, percent_literal, rewrite_percent, safe_eval, sanitize,
)


class TestSanitize:
    def test_maps_glyphs(self):
        assert sanitize("6×7÷2") == "6*7/2"

    def test_rejects_letters(self):
        with pytest.raises(UnsafeExpression):
            sanitize("2+alert(1)")

    def test_rejects_python_syntax(self):
        with pytest.raises(UnsafeExpression):
            sanitize("__import__('os')")


class TestPercentRewrite:
    def test_single_literal(self):
        assert rewrite_percent("50%") == "(50/100)"

    def test_binds_to_preceding_literal_only(self):
        assert rewrite_percent("200+50%") == "200+(50/100)"

    def test_decimal_literal(self):
        assert rewrite_percent("12.5%") == "(12.5/100)"


class TestSafeEval:
    def test_precedence(self):
        assert safe_eval("2+3*4") == 14

    def test_parentheses(self):
        assert safe_eval("(2+3)*4") == 20

    def test_unary_minus(self):
        assert safe_eval("-3+5") == 2
        assert safe_eval("3×-2") == -6

    def test_left_associative(self):
        assert safe_eval("8/4/2") == 1
        assert safe_eval("10-3-2") == 5

    def test_leading_and_trailing_dot(self):
        assert safe_eval(".5+5.") == 5.5

    def test_division_by_zero(self):
        with pytest.raises(NonFiniteResult):
            safe_eval("5/0")

    def test_overflow_is_not_finite(self):
        with pytest.raises(NonFiniteResult):
            safe_eval("9" * 400)

    @pytest.mark.parametrize("expr", ["", "2+", "(2+3", "2+3)", "()", "2(3)", "1.2.3", "%5", "*2"])
    def test_syntax_errors(self, expr):
        with pytest.raises(ExpressionSyntaxError):
            safe_eval(expr)


class TestFormatting:
    def test_integers_drop_fraction(self):
        assert format_number(4.0) == "4"

    def test_rounds_float_noise(self):
        assert format_number(0.1 + 0.2) == "0.3"

    def test_twelve_decimals(self):
        assert format_number(1 / 3) == "0.333333333333"

    def test_negative_zero(self):
        assert format_number(-1e-15) == "0"

    def test_no_exponent(self):
        assert format_number(1e-7) == "0.0000001"

    def test_percent_literal(self):
        assert percent_literal("50") == "0.5"
        assert percent_literal("5") == "0.05"
        assert percent_literal("1000") == "10"
        assert percent_literal("0.0001") == "0.000001"

    def test_percent_literal_keeps_every_digit(self):
        token = "1234567890123456789012345678901234"
        assert percent_literal(token) == "12345678901234567890123456789012.34"


def test_non_ascii_digits_rejected():
    with pytest.raises(UnsafeExpression):
        safe_eval("٥+1")
