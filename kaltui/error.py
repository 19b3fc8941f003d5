from enum import Enum


class ErrorKind(Enum):
    """Caller-visible failure reasons of the expression engine."""
    EMPTY_EXPRESSION = "3031"
    UNMATCHED_PARENTHESES = "3032"
    INVALID_EXPRESSION = "3012"
    DIVISION_BY_ZERO = "3003"
    INVALID_RESULT = "3033"
    INVALID_NUMBER = "3034"


class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation

    @property
    def kind(self):
        """Return the ErrorKind for this error, or None for non-engine errors."""
        try:
            return ErrorKind(self.code)
        except ValueError:
            return None


class SyntaxError(MathError):
    pass

class CalculationError(MathError):
    pass

class ConfigurationError(MathError):
    pass


# -----------------------------
# Engine failures (one class per ErrorKind)
# -----------------------------

class EmptyExpressionError(SyntaxError):
    def __init__(self, equation=None):
        super().__init__(ERROR_MESSAGES["3031"], code="3031", equation=equation)

class UnmatchedParenthesesError(SyntaxError):
    def __init__(self, equation=None):
        super().__init__(ERROR_MESSAGES["3032"], code="3032", equation=equation)

class InvalidExpressionError(SyntaxError):
    def __init__(self, equation=None):
        super().__init__(ERROR_MESSAGES["3012"], code="3012", equation=equation)

class InvalidNumberError(SyntaxError):
    def __init__(self, equation=None):
        super().__init__(ERROR_MESSAGES["3034"], code="3034", equation=equation)

class DivisionByZeroError(CalculationError):
    def __init__(self, equation=None):
        super().__init__(ERROR_MESSAGES["3003"], code="3003", equation=equation)

class InvalidResultError(CalculationError):
    def __init__(self, equation=None):
        super().__init__(ERROR_MESSAGES["3033"], code="3033", equation=equation)


Error_Dictionary = {

    "3" : "Calculator Error",
    "4" : "UI Error",
    "5" : "Configuration Error",
    "6" : "Communication Error",
    "9" : "Unexpected Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "3003" : "Division by zero",
    "3012" : "Invalid expression",
    "3031" : "Empty expression",
    "3032" : "Unmatched parentheses",
    "3033" : "Invalid result",
    "3034" : "Invalid number",

    "4001" : "Nothing to evaluate",
    "4002" : "Nothing to paste",
    "4003" : "Nothing to yank",
    "4004" : "Invalid input: ", # + character

    "5001" : "Configuration file could not be read: ", # + path
    "5002" : "Not all Settings could be saved: ", # + path
    "5003" : "Invalid setting value: ", # + key

    "6001" : "Clipboard not available.",

    "9999" : "Unexpected Error: " #+error
}


def error_category(code):
    """Return the main error category for a 4-digit error code."""
    return Error_Dictionary.get(str(code)[:1], Error_Dictionary["9"])
