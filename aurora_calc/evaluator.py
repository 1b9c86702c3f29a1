# evaluator.py
import math
import operator
import re
from decimal import Context, Decimal

# --- ارزیاب امن عبارات حسابی (بدون eval) ---
# یک تجزیه‌گر بازگشتی کوچک که فقط اعداد، چهار عمل اصلی و پرانتز را می‌شناسد.
ALLOWED_OPERATORS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}
UNARY_OPERATORS = {
    "+": operator.pos,
    "-": operator.neg,
}

GLYPHS = {"×": "*", "÷": "/"}
PRECISION = 12

_FORBIDDEN = re.compile(r"[^0-9+\-*/().%]")
_PERCENT = re.compile(r"([0-9]+(?:\.[0-9]+)?)%")
_TOKEN = re.compile(r"\s*(?:([0-9]+(?:\.[0-9]*)?|\.[0-9]+)|(.))")


class EvaluationError(ValueError):
    """پایه‌ی همه‌ی خطاهایی که مانع رسیدن عبارت به یک عدد می‌شوند"""


class UnsafeExpression(EvaluationError):
    pass


class ExpressionSyntaxError(EvaluationError):
    pass


class NonFiniteResult(EvaluationError):
    pass


def sanitize(expr: str) -> str:
    """
    نمادهای × و ÷ را به معادل پایتونی تبدیل می‌کند و هر کاراکتر خارج از
    فهرست مجاز را حذف می‌کند. اگر چیزی حذف شود UnsafeExpression پرت می‌شود.
    """
    for glyph, symbol in GLYPHS.items():
        expr = expr.replace(glyph, symbol)
    cleaned = _FORBIDDEN.sub("", expr)
    if cleaned != expr:
        raise UnsafeExpression(f"disallowed characters in {expr!r}")
    return cleaned


def rewrite_percent(expr: str) -> str:
    """50% -> (50/100)؛ فقط عدد درست قبل از % تغییر می‌کند"""
    return _PERCENT.sub(r"(\1/100)", expr)


def tokenize(expr: str):
    tokens = []
    for number, symbol in _TOKEN.findall(expr):
        if number:
            tokens.append(float(number))
        elif symbol in ALLOWED_OPERATORS or symbol in "()":
            tokens.append(symbol)
        else:
            raise ExpressionSyntaxError(f"unexpected symbol {symbol!r}")
    return tokens


class _Parser:
    def __init__(self, tokens):
        self.tokens = tokens
        self.pos = 0

    def peek(self):
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def take(self):
        tok = self.peek()
        if tok is None:
            raise ExpressionSyntaxError("unexpected end of expression")
        self.pos += 1
        return tok

    def parse(self):
        value = self.expression()
        if self.peek() is not None:
            raise ExpressionSyntaxError(f"unexpected token {self.peek()!r}")
        return value

    def expression(self):
        value = self.term()
        while self.peek() in ("+", "-"):
            op = self.take()
            value = ALLOWED_OPERATORS[op](value, self.term())
        return value

    def term(self):
        value = self.factor()
        while self.peek() in ("*", "/"):
            op = self.take()
            right = self.factor()
            if op == "/" and right == 0:
                raise NonFiniteResult("division by zero")
            value = ALLOWED_OPERATORS[op](value, right)
        return value

    def factor(self):
        tok = self.take()
        if isinstance(tok, float):
            return tok
        if tok in UNARY_OPERATORS:
            return UNARY_OPERATORS[tok](self.factor())
        if tok == "(":
            value = self.expression()
            if self.take() != ")":
                raise ExpressionSyntaxError("missing closing parenthesis")
            return value
        raise ExpressionSyntaxError(f"unexpected token {tok!r}")


def safe_eval(expr: str) -> float:
    """
    محاسبه‌ی امن یک عبارت شامل اعداد، + - × ÷ % و پرانتز.
    در صورت هر خطا یکی از زیرکلاس‌های EvaluationError پرت می‌شود.
    """
    converted = rewrite_percent(sanitize(expr))
    value = _Parser(tokenize(converted)).parse()
    if not math.isfinite(value):
        raise NonFiniteResult(f"{expr!r} is not finite")
    return value


def format_number(x) -> str:
    """گرد کردن تا PRECISION رقم اعشار و نمایش به صورت عدد اعشاری ساده"""
    text = f"{x:.{PRECISION}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def percent_literal(token: str) -> str:
    """حاصل دقیق token/100 بدون نماد توان: '5' -> '0.05'"""
    # دقت context به اندازه‌ی طول token است تا هیچ رقمی گرد نشود
    value = Decimal(token).scaleb(-2, context=Context(prec=len(token) + 2))
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text or "0"
