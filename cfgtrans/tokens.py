"""Token types for the configuration language."""
from enum import Enum, auto
from dataclasses import dataclass


class TokenType(Enum):
    # === Literals ===
    NUMBER = auto()
    STRING = auto()
    IDENTIFIER = auto()

    # === Delimiters ===
    LBRACE = auto()
    RBRACE = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    LPAREN = auto()
    RPAREN = auto()

    # === Operators ===
    HASH = auto()
    EQUALS = auto()
    QUESTION = auto()

    # === Keywords ===
    GLOBAL = auto()

    # === Special ===
    END = auto()
    INVALID = auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    line: int
    column: int

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r}, L{self.line}:C{self.column})"


KEYWORDS: dict[str, TokenType] = {
    "global": TokenType.GLOBAL,
}

# Booleans come out of the lexer as STRING tokens; the parser tells them apart.
BOOLEAN_WORDS: dict[str, bool] = {
    "true": True,
    "false": False,
}

SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "#": TokenType.HASH,
    "=": TokenType.EQUALS,
    "?": TokenType.QUESTION,
}
