# json_parser.py
# Recursive-descent JSON reader producing an immutable value tree
#
# =============================================================================
#  PARSER IMPLEMENTATION: RECURSIVE DESCENT WITH ONE TOKEN OF LOOKAHEAD
# =============================================================================
#
# parse_value, parse_object and parse_array map one-to-one onto the JSON
# grammar rules and call each other for nested structure. The parser pulls
# tokens from the lexer one at a time and keeps the most recent one in
# `current`; nothing is buffered beyond that.
#
# Quoted strings (TEXT) and bare numeric spans (NUMBER) follow one rule when
# they stand as a value: the token becomes a JsonNumber when its text is made
# only of numeric bytes and converts to a finite float, and a JsonString
# otherwise. So the quoted "30" reads as the number 30.0, the bare span 1.2.3
# reads as a string, and so does 1e400. Object keys must be TEXT.
#
# Every malformed input raises ParseError (a SyntaxError) carrying an error
# kind and a byte offset. Nothing is recovered and no partial tree escapes.
# =============================================================================

import argparse
import logging
import math
import re
import sys
from typing import Dict, List, Optional, Union

from json_value import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)
from lexer import (
    BRACE,
    BRACKET,
    COLON,
    COMMA,
    DEPTH_EXCEEDED,
    EXPECTED_DELIMITER,
    EXPECTED_KEY,
    EXPECTED_SEPARATOR,
    LITERAL,
    NUMBER,
    TEXT,
    TRAILING_DATA,
    UNEXPECTED_END,
    UNEXPECTED_TOKEN,
    Lexer,
    ParseError,
    Token,
)

log = logging.getLogger("json_parser")

# ---------------------------------------------------------------------------
# CONSTANTS
# ---------------------------------------------------------------------------
# float() alone would also take "nan", "inf", "1_000" and surrounding blanks
_NUMERIC_TEXT = re.compile(r"[0-9+\-.eE]+")

_LEAVES = {
    "null": JsonNull(),
    "true": JsonBool(True),
    "false": JsonBool(False),
}


def _number_or_string(text: str) -> JsonValue:
    if _NUMERIC_TEXT.fullmatch(text):
        try:
            number = float(text)
        except ValueError:
            number = None
        # out of float64 range is not a number either
        if number is not None and not math.isinf(number):
            return JsonNumber(number)
    return JsonString(text)


# ---------------------------------------------------------------------------
# PARSER
# ---------------------------------------------------------------------------
class Parser:
    """
    Recursive-descent parser over a single in-memory document.

    Each instance owns its own lexer, so separate parses share no state.
    `max_depth` caps container nesting; None leaves it bounded only by the
    interpreter stack.
    """

    def __init__(self, data: Union[bytes, bytearray, str], *, max_depth: Optional[int] = None):
        if isinstance(data, str):
            data = data.encode("utf-8")
        self.lexer = Lexer(data)
        self.current: Optional[Token] = None
        self.max_depth = max_depth
        self._depth = 0
        self._size = len(data)

    @property
    def position(self) -> int:
        return self.lexer.position

    def _advance(self) -> Optional[Token]:
        self.current = self.lexer.next_token()
        return self.current

    def _advance_required(self) -> Token:
        tok = self._advance()
        if tok is None:
            raise ParseError(UNEXPECTED_END, "unexpected end of input", self.position)
        return tok

    def _enter(self):
        offset = self.current.offset if self.current is not None else self.position
        self._depth += 1
        if self.max_depth is not None and self._depth > self.max_depth:
            raise ParseError(DEPTH_EXCEEDED, f"depth limit {self.max_depth} exceeded", offset)
        log.debug("enter container at offset %d, depth %d", offset, self._depth)

    def parse_value(self) -> JsonValue:
        """
        Read the next token and build the value it starts.

        Nesting deeper than the interpreter stack allows raises DEPTH_EXCEEDED.
        """
        try:
            return self._parse_value()
        except RecursionError:
            raise ParseError(DEPTH_EXCEEDED, "nesting too deep for the interpreter stack",
                             self.position) from None

    def _parse_value(self) -> JsonValue:
        return self._value_from(self._advance_required())

    def _value_from(self, tok: Token) -> JsonValue:
        kind, value, offset = tok
        if kind == LITERAL:
            return _LEAVES[value]
        if kind == BRACE and value == "{":
            return self.parse_object()
        if kind == BRACKET and value == "[":
            return self.parse_array()
        if kind in (TEXT, NUMBER):
            return _number_or_string(value)
        raise ParseError(UNEXPECTED_TOKEN, f"unexpected token {kind} '{value}' - value expected", offset)

    def parse_object(self) -> JsonObject:
        """
        Parse the members of an object. The opening brace is already consumed
        and is the current token.

        Duplicate keys keep the last value.
        """
        self._enter()
        members: Dict[str, JsonValue] = {}

        tok = self._advance_required()
        if tok.kind == BRACE and tok.value == "}":
            self._depth -= 1
            return JsonObject(members)

        while True:
            if tok.kind != TEXT:
                raise ParseError(EXPECTED_KEY,
                                 f"unexpected token {tok.kind} '{tok.value}' - expected key",
                                 tok.offset)
            key = tok.value

            sep = self._advance_required()
            if sep.kind != COLON:
                raise ParseError(EXPECTED_SEPARATOR,
                                 f"unexpected token {sep.kind} '{sep.value}' - expected ':'",
                                 sep.offset)

            members[key] = self._parse_value()

            tok = self._advance_required()
            if tok.kind == BRACE and tok.value == "}":
                break
            if tok.kind != COMMA:
                raise ParseError(EXPECTED_DELIMITER,
                                 f"unexpected token {tok.kind} '{tok.value}' - expected ',' or '}}'",
                                 tok.offset)
            tok = self._advance_required()

        self._depth -= 1
        return JsonObject(members)

    def parse_array(self) -> JsonArray:
        """
        Parse the elements of an array. The opening bracket is already
        consumed and is the current token.
        """
        self._enter()
        items: List[JsonValue] = []

        tok = self._advance_required()
        if tok.kind == BRACKET and tok.value == "]":
            self._depth -= 1
            return JsonArray(items)

        while True:
            items.append(self._value_from(tok))

            tok = self._advance_required()
            if tok.kind == BRACKET and tok.value == "]":
                break
            if tok.kind != COMMA:
                raise ParseError(EXPECTED_DELIMITER,
                                 f"unexpected token {tok.kind} '{tok.value}' - expected ',' or ']'",
                                 tok.offset)
            tok = self._advance_required()

        self._depth -= 1
        return JsonArray(items)

    def parse_document(self) -> JsonValue:
        """Parse one top-level value and require the input to end after it."""
        log.debug("parsing %d bytes", self._size)
        result = self.parse_value()

        extra = self._advance()
        if extra is not None:
            raise ParseError(TRAILING_DATA, "extra data after root value", extra.offset)
        log.debug("parsed %s", type(result).__name__)
        return result


# ---------------------------------------------------------------------------
# PUBLIC API
# ---------------------------------------------------------------------------
def parse(data: Union[bytes, bytearray, str], *, max_depth: Optional[int] = None) -> JsonValue:
    """
    Parse one JSON document into a value tree.

    The top-level value may be of any kind. Text is encoded as UTF-8 before
    lexing. Raises ParseError on malformed input or trailing tokens.
    """
    return Parser(data, max_depth=max_depth).parse_document()


# ---------------------------------------------------------------------------
# CLI ENTRYPOINT
# ---------------------------------------------------------------------------
def _cli(argv: List[str]):
    """
    Parse a file and print its value tree.

    Exit code 0 on success, 1 on SyntaxError.
    """
    ap = argparse.ArgumentParser(description="Recursive-descent JSON reader")
    ap.add_argument("file", help="JSON file to parse")
    ap.add_argument("--debug", action="store_true", help="dump token stream and exit")
    ap.add_argument("--max-depth", type=int, default=None)
    ap.add_argument("--verbose", action="store_true", help="log parser progress to stderr")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    with open(args.file, "rb") as fh:
        data = fh.read()

    try:
        if args.debug:
            for tok in Lexer(data).tokens():
                print(tok)
            return 0
        result = parse(data, max_depth=args.max_depth)
    except SyntaxError as exc:
        print(f"SyntaxError: {exc}", file=sys.stderr)
        return 1

    print(repr(result))
    return 0


def main():
    sys.exit(_cli(sys.argv[1:]))


# ---------------------------------------------------------------------------
# MAIN GUARD
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    main()
