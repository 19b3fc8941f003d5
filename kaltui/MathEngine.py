# MathEngine.py
"""
Core calculation engine of the calculator.

Pipeline
--------
1) Normalize: drop spaces and apostrophe thousands separators.
2) Balance check: parentheses must be well-formed before anything is parsed.
3) Evaluate: recursive precedence scan over the normalized string.
   Every call re-tries the tiers in fixed order on its own substring:
   additive -> multiplicative -> power -> outer parentheses -> unary minus -> literal.
   Each tier looks for an operator at parenthesis depth zero and splits there.

Scan direction decides associativity:
   '+' '-' '*' '/' are scanned right-to-left and split at the LAST operator (left associative),
   '^' is scanned left-to-right and split at the FIRST operator (right associative, 2^3^2 = 512).

All failures raise a subclass of error.MathError; see error.ErrorKind.
"""

import re
import sys
import math
import logging

from . import error as E

logger = logging.getLogger(__name__)

# Characters removed before evaluation
IGNORED_CHARS = (" ", "'")

ADDITIVE = "+-"
MULTIPLICATIVE = "*/"
POWER = "^"
# A '+'/'-' directly after one of these is a sign, not a binary operator
SIGN_PREFIX = "+-*/("

# Plain decimal / scientific literals plus the inf/nan spellings float() knows.
# Rejects Python-only forms such as '1_000'.
NUMBER_PATTERN = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


# -----------------------------
# Balance checker
# -----------------------------

def validate_parens(expr):
    """Return True if every ')' closes an earlier '(' and none stay open."""
    depth = 0
    for c in expr:
        if c == '(':
            depth += 1
        elif c == ')':
            depth -= 1
        if depth < 0:
            return False
    return depth == 0


# -----------------------------
# Small helpers
# -----------------------------

def normalize(text):
    """Remove spaces and thousands separators."""
    for c in IGNORED_CHARS:
        text = text.replace(c, "")
    return text


def is_wrapped(expr):
    """True if the whole string is one matching '(' ... ')' pair."""
    if not (expr.startswith('(') and expr.endswith(')')):
        return False
    depth = 0
    for i, c in enumerate(expr):
        if c == '(':
            depth += 1
        elif c == ')':
            depth -= 1
            if depth == 0 and i != len(expr) - 1:
                return False
    return True


def find_additive(expr):
    """Index of the last top-level binary '+'/'-', or -1.

    Candidates at index 0 or right after another operator / '(' are signs
    and are skipped.
    """
    depth = 0
    for i in range(len(expr) - 1, -1, -1):
        c = expr[i]
        if c == ')':
            depth += 1
        elif c == '(':
            depth = max(depth - 1, 0)
        elif c in ADDITIVE and depth == 0 and i > 0:
            if expr[i - 1] not in SIGN_PREFIX:
                return i
    return -1


def find_multiplicative(expr):
    """Index of the last top-level '*' or '/', or -1."""
    depth = 0
    for i in range(len(expr) - 1, -1, -1):
        c = expr[i]
        if c == ')':
            depth += 1
        elif c == '(':
            depth = max(depth - 1, 0)
        elif c in MULTIPLICATIVE and depth == 0:
            return i
    return -1


def find_power(expr):
    """Index of the first top-level '^', or -1."""
    depth = 0
    for i, c in enumerate(expr):
        if c == '(':
            depth += 1
        elif c == ')':
            depth = max(depth - 1, 0)
        elif c in POWER and depth == 0:
            return i
    return -1


def parse_number(expr):
    """Parse a literal; anything else is an invalid number."""
    if not NUMBER_PATTERN.fullmatch(expr):
        raise E.InvalidNumberError()
    return float(expr)


def power(base, exponent):
    """base ^ exponent; undefined or non-finite powers are invalid results."""
    try:
        result = math.pow(base, exponent)
    except (ValueError, OverflowError):
        raise E.InvalidResultError()
    if not math.isfinite(result):
        raise E.InvalidResultError()
    return result


# -----------------------------
# Recursive evaluator
# -----------------------------

def parse_expr(expr):
    """Evaluate a normalized, balance-checked (sub)string."""
    last = len(expr) - 1

    # --- Additive tier ---
    # Chains like 1+2+3 are split iteratively so their length does not add recursion depth
    i = find_additive(expr)
    if i != -1:
        if i == last:
            raise E.InvalidExpressionError()
        operands = []
        while i != -1:
            logger.debug("split %r at %r (index %d)", expr, expr[i], i)
            operands.append((expr[i], expr[i + 1:]))
            expr = expr[:i]
            i = find_additive(expr)
        result = parse_expr(expr)
        for operator, operand in reversed(operands):
            right = parse_expr(operand)
            result = result + right if operator == '+' else result - right
        return result

    # --- Multiplicative tier ---
    i = find_multiplicative(expr)
    if i != -1:
        operands = []
        while i != -1:
            if i == 0 or i == len(expr) - 1:
                raise E.InvalidExpressionError()
            logger.debug("split %r at %r (index %d)", expr, expr[i], i)
            operands.append((expr[i], expr[i + 1:]))
            expr = expr[:i]
            i = find_multiplicative(expr)
        result = parse_expr(expr)
        for operator, operand in reversed(operands):
            right = parse_expr(operand)
            if operator == '*':
                result = result * right
            elif abs(right) < sys.float_info.epsilon:
                raise E.DivisionByZeroError()
            else:
                result = result / right
        return result

    # --- Power tier ---
    i = find_power(expr)
    if i != -1:
        if i == 0 or i == last:
            raise E.InvalidExpressionError()
        logger.debug("split %r at '^' (index %d)", expr, i)
        return power(parse_expr(expr[:i]), parse_expr(expr[i + 1:]))

    # --- Outer parentheses ---
    if is_wrapped(expr):
        return parse_expr(expr[1:-1])

    # --- Unary minus ---
    if expr.startswith('-'):
        return -parse_expr(expr[1:])

    # --- Literal ---
    return parse_number(expr)


# -----------------------------
# Public entry points
# -----------------------------

def parse_and_eval(text):
    """Evaluate ``text`` and return a finite float.

    Raises:
        error.MathError subclass carrying the failure code and the input.
    """
    expr = normalize(text)
    try:
        if not expr:
            raise E.EmptyExpressionError()
        if not validate_parens(expr):
            raise E.UnmatchedParenthesesError()

        try:
            result = parse_expr(expr)
        except RecursionError:
            logger.warning("expression nested too deeply (%d chars)", len(expr))
            raise E.InvalidExpressionError()

        if not math.isfinite(result):
            raise E.InvalidResultError()
        return result

    # Attach the source input for the caller's error display
    except E.MathError as e:
        e.equation = text
        raise


evaluate = parse_and_eval


def try_evaluate(text):
    """Non-raising variant: ``(value, None)`` or ``(None, ErrorKind)``."""
    try:
        return parse_and_eval(text), None
    except E.MathError as e:
        return None, e.kind


def test_main():
    """Simple REPL-like runner for manual testing of the engine."""
    print("Enter the problem: ")
    problem = input()
    try:
        print(parse_and_eval(problem))
    except E.MathError as e:
        print(f"Error {e.code}: {e.message}")


if __name__ == "__main__":
    test_main()
