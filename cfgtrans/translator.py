"""Source text in, JSON text out."""
from __future__ import annotations

from .lexer import Lexer
from .parser import Parser
from .serializer import to_json
from .values import CfgValue


class Translator:
    """Runs the lexer, parser and serializer over one source buffer at a time.

    Every call builds a fresh Lexer and Parser, so nothing (the constant
    table included) carries over between runs.

    Recognised flags:
        strict          -- a second bare top-level object is an error
        escape_strings  -- JSON-escape string payloads on output
    """

    def __init__(self, flags: dict | None = None):
        self.flags = flags or {}

    def parse(self, source: str) -> CfgValue:
        return Parser(Lexer(source), flags=self.flags).parse()

    def render(self, value: CfgValue) -> str:
        return to_json(value, 0, escape_strings=bool(self.flags.get("escape_strings")))

    def run(self, source: str) -> str:
        return self.render(self.parse(source))


def translate(source: str, **flags) -> str:
    """Translate configuration source to JSON text (no trailing newline)."""
    return Translator(flags).run(source)
