"""Parse failures raised by :mod:`minihtml.parser`."""


def line_and_column(text: str, position: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of ``position`` in ``text``."""
    before = text[:position]
    line = before.count("\n") + 1
    column = position - (before.rfind("\n") + 1) + 1
    return line, column


class ParseError(Exception):
    """Base class for every failure of a parse."""

    def __init__(self, message: str, text: str = "", position: int = 0) -> None:
        self.message = message
        self.position = position
        self.line, self.column = line_and_column(text, position)
        super().__init__(f"({self.line},{self.column}): {message}")


class MatchError(ParseError):
    """A required grammar pattern did not match at the cursor."""

    def __init__(self, expected: str, text: str = "", position: int = 0) -> None:
        self.expected = expected
        found = text[position:position + 1]
        if found:
            message = f"expected {expected}, found {found!r}"
        else:
            message = f"expected {expected}, found end of input"
        super().__init__(message, text, position)


class NestingTooDeepError(ParseError):
    def __init__(self, max_depth: int, text: str = "", position: int = 0) -> None:
        self.max_depth = max_depth
        super().__init__(
            f"elements nested deeper than {max_depth} levels", text, position
        )
