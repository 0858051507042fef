from typing import Optional

from .errors import ParseError

DIGITS = "0123456789"


class Cursor:
    """
    Character stream over one expression string.

    Tokens are single characters; whitespace between tokens is skipped.
    Exactly one token can be pushed back with `putback()`.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self._last: Optional[int] = None  # start offset of the last token read

    def _skip_ws(self):
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def at_end(self) -> bool:
        self._skip_ws()
        return self.pos >= len(self.text)

    def next_token(self) -> Optional[str]:
        self._skip_ws()
        if self.pos >= len(self.text):
            self._last = None
            return None
        self._last = self.pos
        ch = self.text[self.pos]
        self.pos += 1
        return ch

    def putback(self):
        if self._last is None:
            return
        self.pos = self._last
        self._last = None

    def read_number(self) -> float:
        # digits [ '.' digits ], either side may be empty but not both
        self._skip_ws()
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in DIGITS:
            self.pos += 1
        if self.pos < len(self.text) and self.text[self.pos] == ".":
            self.pos += 1
            while self.pos < len(self.text) and self.text[self.pos] in DIGITS:
                self.pos += 1
        literal = self.text[start:self.pos]
        self._last = None
        if literal in ("", "."):
            raise ParseError(f"Invalid number literal '{literal}'", position=start)
        return float(literal)
