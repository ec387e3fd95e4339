"""Turns EchoScript source text into tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from echoscript.value import EchoScriptError


class TokenType(Enum):
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    SEMICOLON = auto()
    COMMA = auto()
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    EQUAL = auto()

    IDENTIFIER = auto()
    NUMBER = auto()
    STRING = auto()
    CHAR = auto()
    FLOAT = auto()

    LET = auto()
    FUNC = auto()
    RETURN = auto()
    PRINT = auto()
    PRINTLN = auto()
    TRUE = auto()
    FALSE = auto()

    END_OF_FILE = auto()
    UNKNOWN = auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    line: int


class LexError(EchoScriptError):
    """Raised for a malformed literal in the source."""

    def __init__(self, message: str, line: int) -> None:
        super().__init__(message)
        self.line = line


KEYWORDS = {
    "let": TokenType.LET,
    "func": TokenType.FUNC,
    "return": TokenType.RETURN,
    "print": TokenType.PRINT,
    "println": TokenType.PRINTLN,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
}

_SINGLE = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "=": TokenType.EQUAL,
}

_END = "\0"


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_alpha(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z"


def _is_word_char(c: str) -> bool:
    return _is_alpha(c) or _is_digit(c) or c == "_"


class Lexer:
    """Scans one source text into a list of tokens."""

    def __init__(self, source: str) -> None:
        self.source = source
        self._start = 0
        self._current = 0
        self._line = 1
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Scan the whole source; the list always ends with END_OF_FILE."""
        self._start = 0
        self._current = 0
        self._line = 1
        self._tokens = []
        while not self._at_end():
            self._start = self._current
            self._scan_token()
        self._tokens.append(Token(TokenType.END_OF_FILE, "", self._line))
        return list(self._tokens)

    def _at_end(self) -> bool:
        return self._current >= len(self.source)

    def _advance(self) -> str:
        c = self._peek()
        self._current += 1
        return c

    def _peek(self) -> str:
        return _END if self._at_end() else self.source[self._current]

    def _peek_next(self) -> str:
        nxt = self._current + 1
        return self.source[nxt] if nxt < len(self.source) else _END

    def _match(self, expected: str) -> bool:
        if self._peek() != expected or self._at_end():
            return False
        self._current += 1
        return True

    def _add(self, kind: TokenType, text: str | None = None) -> None:
        if text is None:
            text = self.source[self._start:self._current]
        self._tokens.append(Token(kind, text, self._line))

    def _scan_token(self) -> None:
        c = self._advance()
        if c in _SINGLE:
            self._add(_SINGLE[c])
        elif c == '"':
            self._string()
        elif c == "#":
            if self._match("#"):
                while self._peek() != "\n" and not self._at_end():
                    self._advance()
            else:
                self._add(TokenType.UNKNOWN)
        elif c == "'":
            self._char_literal()
        elif c in " \r\t":
            pass
        elif c == "\n":
            self._line += 1
        elif _is_digit(c):
            self._number()
        elif _is_alpha(c) or c == "_":
            self._identifier()
        else:
            self._add(TokenType.UNKNOWN)

    def _identifier(self) -> None:
        while _is_word_char(self._peek()):
            self._advance()
        text = self.source[self._start:self._current]
        self._add(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _number(self) -> None:
        while _is_digit(self._peek()):
            self._advance()
        is_float = False
        if self._peek() == "." and _is_digit(self._peek_next()):
            is_float = True
            self._advance()
            while _is_digit(self._peek()):
                self._advance()
        self._add(TokenType.FLOAT if is_float else TokenType.NUMBER)

    def _string(self) -> None:
        while self._peek() != '"' and not self._at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()
        if self._at_end():
            # An unterminated string is dropped without a token.
            return
        self._advance()
        self._add(TokenType.STRING, self.source[self._start + 1:self._current - 1])

    def _char_literal(self) -> None:
        # The opening quote has already been consumed.
        if self._peek() == "'":
            self._advance()
            if self._peek() != "'":
                raise LexError("Invalid empty character literal", self._line)
            self._advance()
            value = "'"
        else:
            value = self._advance()
        if self._advance() != "'":
            raise LexError("Unterminated character literal", self._line)
        self._add(TokenType.CHAR, value)


def tokenize(source: str) -> list[Token]:
    """Scan ``source`` into tokens."""
    return Lexer(source).tokenize()