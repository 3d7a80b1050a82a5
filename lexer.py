# lexer.py
# Byte-level JSON tokenizer
#
# =============================================================================
#  LEXER: ONE TOKEN PER CALL, SINGLE-BYTE PUSHBACK
# =============================================================================
#
# The lexer walks a fully buffered byte sequence and hands out one token each
# time next_token() is called. It never looks back further than one byte: the
# numeric scan reads until it meets a byte outside the numeric set and then
# pushes that byte back onto the cursor.
#
# Quoted strings come out as TEXT and bare numeric spans as NUMBER. The kind
# only tells the parser what may stand as an object key; whether a leaf is a
# number or a string is decided by the parser from the token text alone.
# =============================================================================

from typing import Iterator, NamedTuple, Optional

# ---------------------------------------------------------------------------
# TOKEN KINDS
# ---------------------------------------------------------------------------
BRACE   = "BRACE"      # { or }
BRACKET = "BRACKET"    # [ or ]
COLON   = "COLON"
COMMA   = "COMMA"
LITERAL = "LITERAL"    # null, true, false
TEXT    = "TEXT"       # quoted string body
NUMBER  = "NUMBER"     # bare numeric span, not validated

_STRUCTURAL = {
    ord("{"): BRACE,
    ord("}"): BRACE,
    ord("["): BRACKET,
    ord("]"): BRACKET,
    ord(":"): COLON,
    ord(","): COMMA,
}

# first byte -> remaining bytes the literal must continue with
_LITERALS = {
    ord("n"): b"ull",
    ord("t"): b"rue",
    ord("f"): b"alse",
}

_WHITESPACE = frozenset(b" \t\r\n")
_NUMERIC    = frozenset(b"0123456789+-.eE")
_QUOTE      = ord('"')
_BACKSLASH  = ord("\\")

# ---------------------------------------------------------------------------
# ERROR KINDS
# ---------------------------------------------------------------------------
MALFORMED_LITERAL    = "malformed literal"
UNTERMINATED_STRING  = "unterminated string"
UNEXPECTED_CHARACTER = "unexpected character"
INVALID_ENCODING     = "invalid encoding"
UNEXPECTED_END       = "unexpected end of input"
UNEXPECTED_TOKEN     = "unexpected token"
EXPECTED_KEY         = "expected key"
EXPECTED_SEPARATOR   = "expected separator"
EXPECTED_DELIMITER   = "expected delimiter"
TRAILING_DATA        = "extra data after root value"
DEPTH_EXCEEDED       = "depth limit exceeded"


class ParseError(SyntaxError):
    """
    Structured parse failure: an error kind plus the byte offset it refers to.

    Subclasses SyntaxError so callers that already catch SyntaxError for bad
    input keep working.
    """

    def __init__(self, kind: str, message: str, position: int):
        super().__init__(f"{message} at offset {position}")
        self.kind = kind
        self.position = position


# ---------------------------------------------------------------------------
# TOKEN RECORD
# ---------------------------------------------------------------------------
class Token(NamedTuple):
    """Immutable token record: (kind, value, offset of the first byte)."""

    kind: str
    value: str
    offset: int


# ---------------------------------------------------------------------------
# LEXER
# ---------------------------------------------------------------------------
class Lexer:
    """
    Cursor over a byte sequence producing Token records on demand.

    The position only ever moves forward, except for the single byte the
    numeric scan pushes back.
    """

    def __init__(self, data: bytes):
        self._data = bytes(data)
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def at_end(self) -> bool:
        return self._pos >= len(self._data)

    def _read_byte(self) -> Optional[int]:
        if self._pos >= len(self._data):
            return None
        b = self._data[self._pos]
        self._pos += 1
        return b

    def _unread_byte(self):
        if self._pos == 0:
            raise RuntimeError("nothing to push back")
        self._pos -= 1

    def _skip_whitespace(self):
        while True:
            b = self._read_byte()
            if b is None:
                return
            if b not in _WHITESPACE:
                self._unread_byte()
                return

    def next_token(self) -> Optional[Token]:
        """
        Return the next token, or None once the input is exhausted.

        Raises ParseError for a malformed literal, a string that never closes,
        or a byte that cannot start any token.
        """
        self._skip_whitespace()
        start = self._pos
        b = self._read_byte()
        if b is None:
            return None

        kind = _STRUCTURAL.get(b)
        if kind is not None:
            return Token(kind, chr(b), start)
        if b in _LITERALS:
            return self._read_literal(b, start)
        if b == _QUOTE:
            return self._read_string(start)

        self._unread_byte()
        return self._read_number(start)

    def tokens(self) -> Iterator[Token]:
        """Iterate over the remaining tokens."""
        while True:
            tok = self.next_token()
            if tok is None:
                return
            yield tok

    def _read_literal(self, first: int, start: int) -> Token:
        rest = _LITERALS[first]
        end = self._pos + len(rest)
        if self._data[self._pos:end] != rest:
            found = self._data[start:end].decode("utf-8", "replace")
            raise ParseError(MALFORMED_LITERAL, f"malformed literal {found!r}", start)
        self._pos = end
        return Token(LITERAL, chr(first) + rest.decode("ascii"), start)

    def _read_string(self, start: int) -> Token:
        # backslash escapes are kept verbatim; they only stop an escaped quote
        # from closing the string
        body_start = self._pos
        while True:
            b = self._read_byte()
            if b is None:
                raise ParseError(UNTERMINATED_STRING, "unterminated string", start)
            if b == _BACKSLASH:
                if self._read_byte() is None:
                    raise ParseError(UNTERMINATED_STRING, "unterminated string", start)
                continue
            if b == _QUOTE:
                break
        raw = self._data[body_start:self._pos - 1]
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(INVALID_ENCODING, f"invalid UTF-8 in string ({exc.reason})",
                             body_start + exc.start) from None
        return Token(TEXT, text, start)

    def _read_number(self, start: int) -> Token:
        while True:
            b = self._read_byte()
            if b is None:
                break
            if b not in _NUMERIC:
                self._unread_byte()
                break
        if self._pos == start:
            found = self._data[start:start + 1].decode("utf-8", "replace")
            raise ParseError(UNEXPECTED_CHARACTER, f"invalid character {found!r}", start)
        return Token(NUMBER, self._data[start:self._pos].decode("ascii"), start)
