"""Immutable cursor over one line of configuration or event log text.

Every recognizer takes a cursor and returns a new one for the unconsumed
remainder, usually paired with the recognized value. Failures raise a
ParseError pointing at the cursor's row and column.
"""

import string
from dataclasses import dataclass
from typing import Sequence, Tuple

from .errors import ExpectedChar, ExpectedMessage

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

# Unicode White_Space characters; unlike str.isspace this excludes \x1c-\x1f
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200b))
    + "\u2028\u2029\u202f\u205f\u3000"
)


def fold_case(text: str) -> str:
    """Lowercase ASCII letters only, leaving every other character alone."""
    return text.translate(_ASCII_LOWER)


def is_whitespace(char: str) -> bool:
    return len(char) == 1 and char in WHITESPACE


@dataclass(frozen=True)
class Cursor:
    """Remaining text of a line.

    Attributes:
        row: 1-based line number
        column: Offset of ``text`` within the original line
        text: The characters not consumed yet
    """
    row: int
    column: int
    text: str

    @classmethod
    def for_line(cls, row: int, line: str) -> "Cursor":
        return cls(row=row, column=0, text=line)

    @property
    def is_empty(self) -> bool:
        return not self.text

    # Error helpers

    def expected(self, message: str) -> ExpectedMessage:
        """Error saying ``message`` was expected at the current position."""
        return ExpectedMessage(message, self.row, self.column)

    def expected_remainder(self, message: str) -> ExpectedMessage:
        """Error saying ``message`` was expected, spanning the rest of the line."""
        return ExpectedMessage(message, self.row, (self.column, self.column + len(self.text)))

    # Whitespace

    def trim_start(self) -> "Cursor":
        stripped = self.text.lstrip(WHITESPACE)
        return Cursor(self.row, self.column + len(self.text) - len(stripped), stripped)

    def trim(self) -> "Cursor":
        trimmed = self.trim_start()
        return Cursor(trimmed.row, trimmed.column, trimmed.text.rstrip(WHITESPACE))

    def space(self) -> "Cursor":
        """Consume one run of whitespace, which must be present."""
        if not self.text or not is_whitespace(self.text[0]):
            raise self.expected("whitespace")
        return self.trim_start()

    def space_or_end(self) -> "Cursor":
        """Like :meth:`space`, but also accept the end of the line."""
        if not self.text:
            return self
        return self.space()

    def end(self) -> "Cursor":
        """Require that nothing but whitespace is left."""
        rest = self.trim_start()
        if rest.text:
            raise rest.expected_remainder("end of line")
        return rest

    # Probing

    def peek(self):
        """The next character, or ``None`` at the end of the line."""
        return self.text[0] if self.text else None

    def starts_with(self, literal: str) -> bool:
        return self.text.startswith(literal)

    def starts_with_no_case(self, literal: str) -> bool:
        return fold_case(self.text[:len(literal)]) == fold_case(literal)

    # Consuming

    def advance(self, count: int) -> "Cursor":
        """Consume exactly ``count`` characters."""
        if count < 0 or count > len(self.text):
            raise self.expected(f"{count} more character(s)")
        return Cursor(self.row, self.column + count, self.text[count:])

    def token(self, literal: str) -> "Cursor":
        if not self.starts_with(literal):
            if len(literal) == 1:
                raise ExpectedChar(literal, self.row, self.column)
            raise self.expected(f'"{literal}"')
        return self.advance(len(literal))

    def token_no_case(self, literal: str) -> "Cursor":
        if not self.starts_with_no_case(literal):
            raise self.expected(f'"{literal}"')
        return self.advance(len(literal))

    def first_token_of_no_case(self, candidates: Sequence[str]) -> Tuple["Cursor", str]:
        """Consume the first of ``candidates`` found here, ignoring case.

        Candidates are tried in order, so a longer literal must come before
        any of its prefixes. Returns the new cursor and the candidate as given.
        """
        for candidate in candidates:
            if self.starts_with_no_case(candidate):
                return self.advance(len(candidate)), candidate
        choices = ", ".join(f'"{candidate}"' for candidate in candidates)
        raise self.expected(f"one of {choices}")

    def read_between(self, open_char: str, close_char: str) -> Tuple["Cursor", str]:
        """Read the text enclosed by ``open_char`` and the next ``close_char``.

        Both delimiters are consumed; the enclosed text is returned.
        """
        inner = self.token(open_char)
        end = inner.text.find(close_char)
        if end < 0:
            raise ExpectedChar(close_char, self.row, (self.column, self.column + len(self.text)))
        return inner.advance(end + len(close_char)), inner.text[:end]
