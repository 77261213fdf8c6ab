"""Recursive descent parser for the configuration language."""
from __future__ import annotations
from typing import Optional

from .tokens import Token, TokenType, BOOLEAN_WORDS
from .lexer import Lexer
from .values import (
    CfgValue, cfg_number, cfg_str, cfg_bool, cfg_array, cfg_object, hex_to_int64,
    nesting_depth,
)


UNNAMED_KEY = "unnamed"

# Arrays and objects nested deeper than this are rejected, including depth
# brought in through ?[name]. Keeps parsing, copying and rendering well inside
# the interpreter's recursion limit.
MAX_NESTING_DEPTH = 200


class TranslationError(Exception):
    """Base for every error that aborts a translation."""

    kind = "Translation error"

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        if line is not None:
            text = f"[cfgtrans L{line}:C{column}] {self.kind}: {message}"
        else:
            text = f"[cfgtrans] {self.kind}: {message}"
        super().__init__(text)
        self.message = message
        self.line = line
        self.column = column


class ParseError(TranslationError):
    kind = "Parse error"

    def __init__(self, message: str, token: Token):
        super().__init__(message, token.line, token.column)
        self.token = token


class ConfigSyntaxError(ParseError):
    """The current token is not the one the grammar requires here."""

    kind = "Syntax error"

    def __init__(self, expected: TokenType, token: Token):
        super().__init__(
            f"expected {expected.name}, got {token.type.name} ({token.value!r})", token
        )
        self.expected = expected
        self.actual = token.type


class UnresolvedConstantError(ParseError):
    kind = "Unknown constant"

    def __init__(self, name: str, token: Token):
        super().__init__(f"'{name}' is not declared with 'global' before this point", token)
        self.name = name


class UnexpectedTokenError(ParseError):
    kind = "Unexpected token"


class NumberLiteralError(ParseError):
    kind = "Invalid number"


class DuplicateKeyError(ParseError):
    kind = "Duplicate key"


class NestingTooDeepError(ParseError):
    kind = "Nesting too deep"


class Parser:
    """LL(1) parser over a Lexer.

    One lookahead token (``current``) drives every decision. The constant
    table lives on the instance and only top-level ``global`` declarations
    write to it.
    """

    def __init__(self, lexer: Lexer, flags: dict | None = None):
        self.lexer = lexer
        self.flags = flags or {}
        self.constants: dict[str, CfgValue] = {}
        self.depth = 0
        self.current: Token = lexer.next_token()

    # ================================================
    # Utilities
    # ================================================

    def advance(self) -> Token:
        tok = self.current
        self.current = self.lexer.next_token()
        return tok

    def eat(self, ttype: TokenType) -> Token:
        if self.current.type != ttype:
            raise ConfigSyntaxError(ttype, self.current)
        return self.advance()

    def at_end(self) -> bool:
        return self.current.type == TokenType.END

    def unexpected(self, where: str) -> UnexpectedTokenError:
        tok = self.current
        return UnexpectedTokenError(f"{tok.type.name} ({tok.value!r}) {where}", tok)

    def check_depth(self, depth: int, token: Token):
        if depth > MAX_NESTING_DEPTH:
            raise NestingTooDeepError(
                f"arrays and objects may nest at most {MAX_NESTING_DEPTH} levels deep", token
            )

    def enter_container(self):
        self.depth += 1
        self.check_depth(self.depth, self.current)

    def leave_container(self):
        self.depth -= 1

    # ================================================
    # Top-level
    # ================================================

    def parse(self) -> CfgValue:
        """Parse the whole program and return the root object."""
        root: dict[str, CfgValue] = {}
        strict = self.flags.get("strict")
        seen_bare_object = False

        while not self.at_end():
            tok = self.current
            if tok.type == TokenType.GLOBAL:
                self.parse_global()
            elif tok.type == TokenType.IDENTIFIER:
                if strict and seen_bare_object and tok.value == UNNAMED_KEY:
                    raise DuplicateKeyError(
                        f"'{UNNAMED_KEY}' would replace the bare object stored under it", tok
                    )
                key, value = self.parse_binding()
                root[key] = value
            elif tok.type == TokenType.LBRACE:
                if strict and seen_bare_object:
                    raise DuplicateKeyError(
                        f"a bare object is already stored under '{UNNAMED_KEY}'", tok
                    )
                root[UNNAMED_KEY] = self.parse_object()
                seen_bare_object = True
            else:
                raise self.unexpected("at top level")

        return cfg_object(root)

    def parse_global(self):
        """global NAME = value. Records a constant; nothing is added to the output."""
        self.eat(TokenType.GLOBAL)
        name = self.eat(TokenType.IDENTIFIER).value
        self.eat(TokenType.EQUALS)
        self.constants[name] = self.parse_value()

    def parse_binding(self) -> tuple[str, CfgValue]:
        key = self.eat(TokenType.IDENTIFIER).value
        self.eat(TokenType.EQUALS)
        return key, self.parse_value()

    # ================================================
    # Values
    # ================================================

    def parse_value(self) -> CfgValue:
        tok = self.current

        if tok.type == TokenType.NUMBER:
            return self.parse_number()
        if tok.type == TokenType.STRING:
            self.advance()
            if tok.value in BOOLEAN_WORDS:
                return cfg_bool(BOOLEAN_WORDS[tok.value])
            return cfg_str(tok.value)
        if tok.type == TokenType.HASH:
            return self.parse_array()
        if tok.type == TokenType.QUESTION:
            return self.parse_const_ref()
        if tok.type == TokenType.LBRACE:
            return self.parse_object()

        raise self.unexpected("where a value was expected")

    def parse_number(self) -> CfgValue:
        tok = self.eat(TokenType.NUMBER)
        try:
            return cfg_number(hex_to_int64(tok.value))
        except ValueError as e:
            raise NumberLiteralError(str(e), tok) from e

    def parse_array(self) -> CfgValue:
        """#( value* )"""
        self.enter_container()
        self.eat(TokenType.HASH)
        self.eat(TokenType.LPAREN)
        elements = []
        while self.current.type not in (TokenType.RPAREN, TokenType.END):
            elements.append(self.parse_value())
        self.eat(TokenType.RPAREN)
        self.leave_container()
        return cfg_array(elements)

    def parse_object(self) -> CfgValue:
        """{ (IDENTIFIER = value)* }. A repeated key replaces the earlier value."""
        self.enter_container()
        self.eat(TokenType.LBRACE)
        pairs: dict[str, CfgValue] = {}
        while self.current.type not in (TokenType.RBRACE, TokenType.END):
            if self.current.type != TokenType.IDENTIFIER:
                raise self.unexpected("where an object key was expected")
            key, value = self.parse_binding()
            pairs[key] = value
        self.eat(TokenType.RBRACE)
        self.leave_container()
        return cfg_object(pairs)

    def parse_const_ref(self) -> CfgValue:
        """?[NAME]. Substitutes a copy of the constant declared earlier."""
        self.eat(TokenType.QUESTION)
        self.eat(TokenType.LBRACKET)
        name_tok = self.eat(TokenType.IDENTIFIER)
        self.eat(TokenType.RBRACKET)
        if name_tok.value not in self.constants:
            raise UnresolvedConstantError(name_tok.value, name_tok)
        value = self.constants[name_tok.value]
        self.check_depth(self.depth + nesting_depth(value), name_tok)
        return value.copy()
