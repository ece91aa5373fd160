"""
Point Parser - Turn user-entered text into raw point data

Strict JSON is tried first. When that fails, text that looks like a list of
``{x: ..., y: ...}`` object literals is read by a small recursive-descent
parser that accepts unquoted keys, single-quoted strings and trailing commas.
The input is never evaluated as code.
"""

import json
import re
from typing import Any, Dict, List

from .debug_logger import debug_logger
from .polygon_errors import ParseError

PARSE_ERROR_MESSAGE = "Could not parse the data. Please check the JSON format"

# Same shape check the relaxed syntax has always required: [ { x: ... } ]
LENIENT_SHAPE_PATTERN = re.compile(r'^\[\s*\{\s*x\s*:.+\}\s*\]$', re.IGNORECASE)

_IDENTIFIER_PATTERN = re.compile(r'[A-Za-z_$][A-Za-z0-9_$]*')
_NUMBER_PATTERN = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')

_ESCAPES = {
    'n': '\n',
    't': '\t',
    'r': '\r',
    'b': '\b',
    'f': '\f',
    'v': '\v',
    '0': '\0',
}

_KEYWORDS = {
    'true': True,
    'false': False,
    'null': None,
}


class LenientLiteralParser:
    """Recursive-descent reader for relaxed JavaScript-style object literals"""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def parse(self) -> Any:
        """Parse the whole text as a single literal value"""
        value = self._parse_value()
        self._skip_whitespace()
        if self.pos != len(self.text):
            self._fail("Unexpected trailing characters")
        return value

    def _fail(self, reason: str):
        raise ParseError(f"{reason} at position {self.pos}")

    def _peek(self) -> str:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return ''

    def _skip_whitespace(self):
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def _expect(self, char: str):
        self._skip_whitespace()
        if self._peek() != char:
            self._fail(f"Expected '{char}'")
        self.pos += 1

    def _parse_value(self) -> Any:
        self._skip_whitespace()
        char = self._peek()

        if char == '':
            self._fail("Unexpected end of input")
        if char == '[':
            return self._parse_array()
        if char == '{':
            return self._parse_object()
        if char in ('"', "'"):
            return self._parse_string()
        if char.isdigit() or char in '+-.':
            return self._parse_number()

        match = _IDENTIFIER_PATTERN.match(self.text, self.pos)
        if match and match.group(0) in _KEYWORDS:
            self.pos = match.end()
            return _KEYWORDS[match.group(0)]

        self._fail(f"Unexpected character {char!r}")

    def _parse_array(self) -> List[Any]:
        self._expect('[')
        items = []
        while True:
            self._skip_whitespace()
            if self._peek() == ']':
                self.pos += 1
                return items
            items.append(self._parse_value())
            self._skip_whitespace()
            if self._peek() == ',':
                self.pos += 1
            elif self._peek() == ']':
                self.pos += 1
                return items
            else:
                self._fail("Expected ',' or ']'")

    def _parse_object(self) -> Dict[str, Any]:
        self._expect('{')
        result = {}
        while True:
            self._skip_whitespace()
            if self._peek() == '}':
                self.pos += 1
                return result
            key = self._parse_key()
            self._expect(':')
            result[key] = self._parse_value()
            self._skip_whitespace()
            if self._peek() == ',':
                self.pos += 1
            elif self._peek() == '}':
                self.pos += 1
                return result
            else:
                self._fail("Expected ',' or '}'")

    def _parse_key(self) -> str:
        char = self._peek()
        if char in ('"', "'"):
            return self._parse_string()
        match = _IDENTIFIER_PATTERN.match(self.text, self.pos)
        if not match:
            self._fail("Expected property name")
        self.pos = match.end()
        return match.group(0)

    def _parse_string(self) -> str:
        quote = self._peek()
        self.pos += 1
        chars = []
        while True:
            if self.pos >= len(self.text):
                self._fail("Unterminated string")
            char = self.text[self.pos]
            if char == quote:
                self.pos += 1
                return ''.join(chars)
            if char == '\n':
                self._fail("Line break inside string")
            if char == '\\':
                self.pos += 1
                chars.append(self._parse_escape())
                continue
            chars.append(char)
            self.pos += 1

    def _parse_escape(self) -> str:
        char = self._peek()
        if char == '':
            self._fail("Unterminated escape sequence")
        if char == 'u':
            digits = self.text[self.pos + 1:self.pos + 5]
            if len(digits) != 4 or not all(c in '0123456789abcdefABCDEF' for c in digits):
                self._fail("Invalid unicode escape")
            self.pos += 5
            return chr(int(digits, 16))
        self.pos += 1
        return _ESCAPES.get(char, char)

    def _parse_number(self):
        match = _NUMBER_PATTERN.match(self.text, self.pos)
        if not match:
            self._fail("Invalid number")
        literal = match.group(0)
        self.pos = match.end()
        try:
            if any(c in literal for c in '.eE'):
                return float(literal)
            return int(literal)
        except ValueError:
            # int() refuses digit strings past the interpreter's conversion limit
            self._fail("Invalid number")


def _reject_constant(name: str):
    # json.loads accepts NaN/Infinity by default, real JSON does not
    raise ValueError(f"Non-standard JSON constant {name}")


def parse_lenient_text(text: str) -> Any:
    """Parse relaxed object-literal syntax, after the shape check passes"""
    cleaned = re.sub(r'\s+', ' ', text).strip()
    if not LENIENT_SHAPE_PATTERN.match(cleaned):
        raise ParseError("Input does not look like a list of points")
    return LenientLiteralParser(text.strip()).parse()


def parse_points_text(text: str, allow_lenient: bool = True) -> Any:
    """
    Parse raw user text into structured data

    Args:
        text: Text meant to encode an array of {x, y} objects
        allow_lenient: Fall back to relaxed object-literal syntax

    Returns:
        The parsed value; its shape is checked by point validation

    Raises:
        ParseError: If neither strict nor lenient parsing succeeds
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as strict_error:
        if not allow_lenient:
            debug_logger.debug('PointParser', "Strict JSON parse failed", {'reason': str(strict_error)})
            raise ParseError(PARSE_ERROR_MESSAGE) from strict_error

    try:
        value = parse_lenient_text(text)
    except RecursionError as lenient_error:
        raise ParseError(PARSE_ERROR_MESSAGE) from lenient_error
    except ParseError as lenient_error:
        debug_logger.debug('PointParser', "Lenient parse failed", {'reason': str(lenient_error)})
        raise ParseError(PARSE_ERROR_MESSAGE) from lenient_error

    debug_logger.debug('PointParser', "Parsed input with lenient syntax")
    return value
