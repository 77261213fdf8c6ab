"""JSON rendering of CfgValue trees."""
from __future__ import annotations
import json

from .values import CfgValue, CfgType


INDENT_STEP = 2


def render_string(text: str, escape: bool = False) -> str:
    # Unescaped by default: a payload holding '"' or '\' yields invalid JSON.
    if escape:
        return json.dumps(text, ensure_ascii=False)
    return f'"{text}"'


def to_json(value: CfgValue, indent: int = 0, escape_strings: bool = False) -> str:
    """Render ``value`` as JSON text.

    Objects break across lines with keys in ascending order, each entry
    indented ``indent + 2`` spaces and the closing brace at ``indent``.
    Arrays always stay on one line; their elements are rendered at depth 0.
    No trailing newline is added.
    """
    t = value.type
    if t == CfgType.NUMBER:
        return str(value.value)
    if t == CfgType.STR:
        return render_string(value.value, escape_strings)
    if t == CfgType.BOOL:
        return "true" if value.value else "false"
    if t == CfgType.ARRAY:
        inner = ", ".join(to_json(v, 0, escape_strings) for v in value.value)
        return f"[{inner}]"
    if t == CfgType.OBJECT:
        if not value.value:
            return "{}"
        pad = " " * (indent + INDENT_STEP)
        entries = []
        for key in sorted(value.value):
            rendered = to_json(value.value[key], indent + INDENT_STEP, escape_strings)
            entries.append(f"{pad}{render_string(key, escape_strings)}: {rendered}")
        return "{\n" + ",\n".join(entries) + "\n" + " " * indent + "}"
    raise TypeError(f"Cannot render value of type {t!r}")
