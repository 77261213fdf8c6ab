"""Lexer for the configuration language: turns source text into Tokens on demand."""
from __future__ import annotations
from .tokens import Token, TokenType, KEYWORDS, BOOLEAN_WORDS, SINGLE_CHAR_TOKENS


WHITESPACE = " \t\n\r\v\f"
HEX_DIGITS = "0123456789abcdefABCDEF"


def is_ident_start(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def is_ident_char(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == "_")


class Lexer:
    """Pull-based tokenizer.

    Each call to ``next_token`` returns the next Token and moves the cursor.
    Once the input is exhausted every further call returns an END token.
    The lexer never raises: characters it does not recognise come back as
    INVALID tokens and the parser decides what to do with them.
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1

    @property
    def current(self) -> str:
        if self.pos >= len(self.source):
            return "\0"
        return self.source[self.pos]

    def peek(self, offset: int = 1) -> str:
        p = self.pos + offset
        if p >= len(self.source):
            return "\0"
        return self.source[p]

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def advance(self) -> str:
        ch = self.current
        if self.at_end():
            return ch
        self.pos += 1
        if ch == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def skip_whitespace(self):
        while not self.at_end() and self.current in WHITESPACE:
            self.advance()

    def read_hex_digits(self) -> str:
        """Read the digits of a 0x literal. The prefix is consumed, not returned."""
        self.advance()  # 0
        self.advance()  # x / X
        start = self.pos
        while not self.at_end() and self.current in HEX_DIGITS:
            self.advance()
        return self.source[start : self.pos]

    def read_identifier(self) -> str:
        start = self.pos
        while not self.at_end() and is_ident_char(self.current):
            self.advance()
        return self.source[start : self.pos]

    def read_string(self) -> str:
        """Read a double-quoted string verbatim. An unterminated string runs to end of input."""
        self.advance()  # opening quote
        start = self.pos
        while not self.at_end() and self.current != '"':
            self.advance()
        text = self.source[start : self.pos]
        if not self.at_end():
            self.advance()  # closing quote
        return text

    def next_token(self) -> Token:
        self.skip_whitespace()

        line, col = self.line, self.column
        if self.at_end():
            return Token(TokenType.END, "", line, col)

        ch = self.current

        # Hexadecimal numbers: 0x1F / 0X1f
        if ch == "0" and self.peek() in ("x", "X"):
            return Token(TokenType.NUMBER, self.read_hex_digits(), line, col)

        # Identifiers / keywords / boolean words
        if is_ident_start(ch):
            ident = self.read_identifier()
            if ident in KEYWORDS:
                return Token(KEYWORDS[ident], ident, line, col)
            if ident in BOOLEAN_WORDS:
                return Token(TokenType.STRING, ident, line, col)
            return Token(TokenType.IDENTIFIER, ident, line, col)

        if ch == '"':
            return Token(TokenType.STRING, self.read_string(), line, col)

        if ch in SINGLE_CHAR_TOKENS:
            self.advance()
            return Token(SINGLE_CHAR_TOKENS[ch], ch, line, col)

        self.advance()
        return Token(TokenType.INVALID, ch, line, col)

    def tokenize(self) -> list[Token]:
        """Drain the source into a list of Tokens, ending with (and including) END."""
        tokens = []
        while True:
            tok = self.next_token()
            tokens.append(tok)
            if tok.type == TokenType.END:
                return tokens
