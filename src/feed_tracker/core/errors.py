"""Parse errors with row and column information."""

from typing import Optional, Tuple, Union

Span = Optional[Tuple[int, int]]


def to_span(value: Union[int, Tuple[int, int], None]) -> Span:
    """Normalize a single column, a ``(start, end)`` pair or ``None`` to a span."""
    if value is None:
        return None
    if isinstance(value, int):
        return (value, value)
    start, end = value
    return (start, end)


class ParseError(ValueError):
    """Malformed configuration or event log text.

    Abstract: raise one of the subclasses, which describe what was expected
    at ``row`` (1-based) and, when known, at which columns of that row.
    """

    def __init__(self, row: int, span: Span):
        if type(self) is ParseError:
            raise TypeError("ParseError is abstract; use ExpectedChar or ExpectedMessage")
        self.row = row
        self.span = span
        super().__init__(self.describe())

    @property
    def what(self) -> str:
        raise NotImplementedError(f"{type(self).__name__} must define what was expected")

    def describe(self) -> str:
        text = f"{self.what} expected at line {self.row}"
        if self.span is not None:
            start, end = self.span
            text += f", columns {start}-{end}"
        return text

    def _key(self):
        return (type(self), self.what, self.row, self.span)

    def __eq__(self, other):
        if not isinstance(other, ParseError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return f"{type(self).__name__}({self.what!r}, row={self.row}, span={self.span})"


class ExpectedChar(ParseError):
    """A specific character was expected."""

    def __init__(self, character: str, row: int, span=None):
        self.character = character
        super().__init__(row, to_span(span))

    def __reduce__(self):
        return (type(self), (self.character, self.row, self.span))

    @property
    def what(self) -> str:
        return repr(self.character)


class ExpectedMessage(ParseError):
    """A described construct was expected."""

    def __init__(self, message: str, row: int, span=None):
        self.message = message
        super().__init__(row, to_span(span))

    def __reduce__(self):
        return (type(self), (self.message, self.row, self.span))

    @property
    def what(self) -> str:
        return self.message


def render_diagnostic(error: ParseError, source: str) -> str:
    """Render an error together with the offending line of ``source``.

    The span, when present, is underlined with carets:

        "Boozle" <http://boozle.sgoetter.com/feed/> @ on wendsday
                                                         ^^^^^^^^
    """
    lines = source.split("\n")
    message = str(error)
    if not 1 <= error.row <= len(lines):
        return message

    line = lines[error.row - 1]
    rendered = [message, f"  {line}"]
    if error.span is not None:
        start, end = error.span
        width = max(end - start, 1)
        # Tabs are copied so the carets line up with the source line
        padding = "".join(c if c == "\t" else " " for c in line[:start])
        rendered.append("  " + padding + "^" * width)
    return "\n".join(rendered)
