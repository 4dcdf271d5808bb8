# json_pretty.py
# Hand-rolled parser and pretty-printer for JSON-like documents
#
# =============================================================================
#  PARSER IMPLEMENTATION: RECURSIVE DESCENT OVER CHARACTERS
# =============================================================================
#
# There is no separate token stream. Each grammar rule below reads straight
# from a shared forward-only character cursor (json_cursor.Cursor) with one
# character of lookahead:
#
#     document := '{' [ pair { ',' pair } ] '}'
#     pair     := key ':' value
#     key      := string
#     value    := string | number | 'true' | 'false' | 'null'
#               | document | array
#     array    := '[' [ value { ',' value } ] ']'
#     string   := '"' { char | '\' char } '"'
#     number   := [ '-' ] digit { digit }          (signed 32-bit)
#
# Whitespace is allowed between any two tokens.
#
# Nested documents are not parsed in place. When a value starts with '{' the
# text up to the matching '}' is cut out first, counting braces only outside
# string literals, and that substring is parsed as a document of its own.
#
# Every grammar violation raises GrammarError, whose message is always the
# same. The reason and position are kept on the exception and only show up
# in debug logging.
#
# =============================================================================

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from json_cursor import Cursor
from json_values import Document, Value, render

__all__ = [
    "GrammarError",
    "InputError",
    "load",
    "parse",
    "parse_document",
    "render",
]

log = logging.getLogger("json_pretty")

# ---------------------------------------------------------------------------
# CONSTANTS AND TUNABLES
# ---------------------------------------------------------------------------
JSON_EXTENSION = ".json"     # Files without this suffix are refused unread
INT32_MIN      = -2 ** 31
INT32_MAX      = 2 ** 31 - 1

_DIGITS = frozenset("0123456789")
_LITERALS = {
    "n": ("null", None),
    "t": ("true", True),
    "f": ("false", False),
}

# ---------------------------------------------------------------------------
# ERRORS
# ---------------------------------------------------------------------------
class GrammarError(SyntaxError):
    """
    Structural violation anywhere in a document.

    str() is always "Invalid JSON file!". ``reason`` and ``position`` (offset
    into the trimmed input, or None) are diagnostics only.
    """
    MESSAGE = "Invalid JSON file!"

    def __init__(self, reason: str = "invalid document", position: Optional[int] = None):
        super().__init__(self.MESSAGE)
        self.reason = reason
        self.position = position


class InputError(Exception):
    """A file could not be handed to the parser: wrong extension or unreadable."""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path

# ---------------------------------------------------------------------------
# DOCUMENTS
# ---------------------------------------------------------------------------
def parse_document(text: str, base: int = 0) -> Document:
    """
    Parse text that must be exactly one document, braces included.

    ``base`` is the offset of ``text`` within the full input.
    """
    if not text.startswith("{") or not text.endswith("}"):
        raise GrammarError("document must start with '{' and end with '}'", base)

    cursor = Cursor(text, base)
    next(cursor)  # opening brace
    doc: Document = {}

    if cursor.peek_past_whitespace() == "}":
        next(cursor)
        _expect_end(cursor)
        return doc

    while True:
        key, value = parse_pair(cursor)
        doc[key] = value  # last write wins
        ch = cursor.skip_whitespace()
        if ch == "}":
            break
        if ch is None:
            raise GrammarError("unexpected end of input in document", cursor.offset)
        if ch != ",":
            raise GrammarError(f"expected ',' or '}}' - got {ch!r}", cursor.offset - 1)
        if cursor.peek_past_whitespace() == "}":
            raise GrammarError("trailing comma in document", cursor.offset)

    _expect_end(cursor)
    return doc

def _expect_end(cursor: Cursor) -> None:
    cursor.peek_past_whitespace()
    if not cursor.at_end():
        raise GrammarError("extra data after closing brace", cursor.offset)

def parse_pair(cursor: Cursor) -> Tuple[str, Value]:
    key = parse_key(cursor)
    if cursor.skip_whitespace() != ":":
        raise GrammarError("expected ':' after key", cursor.offset)
    return key, parse_value(cursor)

def parse_key(cursor: Cursor) -> str:
    if cursor.skip_whitespace() != '"':
        raise GrammarError("expected '\"' to open key", cursor.offset)
    return parse_string(cursor)

# ---------------------------------------------------------------------------
# VALUES
# ---------------------------------------------------------------------------
def parse_value(cursor: Cursor) -> Value:
    """
    Dispatch on the first non-whitespace character.
    """
    ch = cursor.skip_whitespace()
    if ch is None:
        raise GrammarError("expected value - got end of input", cursor.offset)
    if ch == '"':
        return parse_string(cursor)
    if ch in _LITERALS:
        literal, value = _LITERALS[ch]
        return parse_literal(cursor, ch, literal, value)
    if ch == "{":
        text, base = isolate_document(cursor)
        return parse_document(text, base)
    if ch == "[":
        return parse_array(cursor)
    if ch in _DIGITS or ch == "-":
        return parse_number(cursor, ch)
    raise GrammarError(f"unexpected character {ch!r} - value expected", cursor.offset - 1)

def parse_string(cursor: Cursor) -> str:
    """
    Read up to the closing quote. The opening quote is already consumed.

    A backslash takes the next character literally, whichever it is, so
    only \\" and \\\\ have any real effect.
    """
    chars: List[str] = []
    escaped = False
    for ch in cursor:
        if escaped:
            chars.append(ch)
            escaped = False
        elif ch == '"':
            return "".join(chars)
        elif ch == "\\":
            escaped = True
        else:
            chars.append(ch)
    raise GrammarError("unterminated string", cursor.offset)

def parse_literal(cursor: Cursor, first: str, literal: str, value: Value) -> Value:
    """
    Match null/true/false as a whole token.

    Characters are taken until one of them is whitespace or the token is as
    long as the literal. The token must then equal the literal exactly.
    """
    start = cursor.offset - 1
    token = first
    for ch in cursor:
        token += ch
        if ch.isspace() or len(token) == len(literal):
            break
    if token != literal:
        raise GrammarError(f"malformed literal {token!r} - expected {literal!r}", start)
    return value

def parse_number(cursor: Cursor, first: str) -> int:
    start = cursor.offset - 1
    digits = first
    while cursor.peek() in _DIGITS:
        digits += next(cursor)
    try:
        number = int(digits)
    except ValueError:
        raise GrammarError(f"malformed number {digits!r}", start) from None
    if not INT32_MIN <= number <= INT32_MAX:
        raise GrammarError(f"number {digits} out of 32-bit range", start)
    return number

def parse_array(cursor: Cursor) -> List[Value]:
    items: List[Value] = []
    if cursor.peek_past_whitespace() == "]":
        next(cursor)
        return items

    while True:
        items.append(parse_value(cursor))
        ch = cursor.skip_whitespace()
        if ch == "]":
            return items
        if ch is None:
            raise GrammarError("unterminated array", cursor.offset)
        if ch != ",":
            raise GrammarError(f"expected ',' or ']' - got {ch!r}", cursor.offset - 1)
        if cursor.peek_past_whitespace() == "]":
            raise GrammarError("trailing comma in array", cursor.offset)

def isolate_document(cursor: Cursor) -> Tuple[str, int]:
    """
    Cut out a nested document's text. The opening brace is already consumed.

    Returns the text from '{' to its matching '}' and the offset it starts
    at. Quotes toggle string state, a backslash inside a string skips the
    next character, and braces only count outside strings.
    """
    start = cursor.offset - 1
    chars = ["{"]
    depth = 0
    in_string = False
    escaped = False
    for ch in cursor:
        chars.append(ch)
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            if depth == 0:
                return "".join(chars), start
            depth -= 1
    raise GrammarError("unterminated nested document", start)

# ---------------------------------------------------------------------------
# PUBLIC API
# ---------------------------------------------------------------------------
def parse(text: str) -> Document:
    """
    Parse a whole input into its root document.

    Surrounding whitespace is ignored. The root must be a document.
    """
    return parse_document(text.strip())

def load(path: str, extension: str = JSON_EXTENSION) -> Document:
    """
    Read and parse one file.

    The extension is checked before the file is touched. Read failures,
    including undecodable bytes, raise InputError; grammar failures
    propagate as GrammarError.
    """
    if not path.endswith(extension):
        raise InputError(path, f"{path} is not a JSON file")
    try:
        with open(path, "r", encoding="utf-8", newline="") as fh:
            data = fh.read()
    except (OSError, UnicodeDecodeError):
        raise InputError(path, f"{path} does not exist!") from None
    return parse(data)

# ---------------------------------------------------------------------------
# CLI ENTRYPOINT
# ---------------------------------------------------------------------------
def _cli(argv: List[str]) -> int:
    """
    Parse every file in order and print each result.

    Exit codes: 0 when every file parsed, 1 when any file failed or no file
    was given.
    """
    ap = argparse.ArgumentParser(
        prog="json-pretty",
        description="Validate JSON documents and print them in normalized form",
    )
    ap.add_argument("files", nargs="*", metavar="file", help="JSON file to parse")
    ap.add_argument("--extension", default=JSON_EXTENSION,
                    help=f"required file suffix (default {JSON_EXTENSION})")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="log parse diagnostics to stderr")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(levelname)s: %(message)s")

    if not args.files:
        print("json-pretty: usage: json-pretty [file ...]", file=sys.stderr)
        return 1

    status = 0
    for path in args.files:
        log.debug("parsing %s", path)
        try:
            doc = load(path, extension=args.extension)
        except InputError as exc:
            status = 1
            print(exc, file=sys.stderr, flush=True)
            continue
        except GrammarError as exc:
            status = 1
            log.debug("%s: %s at offset %s", path, exc.reason, exc.position)
            print(exc, file=sys.stderr, flush=True)
            continue
        print(render(doc), flush=True)
    return status

def main() -> None:
    sys.exit(_cli(sys.argv[1:]))

# ---------------------------------------------------------------------------
# MAIN GUARD
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    main()
