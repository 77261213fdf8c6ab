"""Value model for translated configuration trees."""
from __future__ import annotations
from enum import Enum
from typing import Any


class CfgType(Enum):
    NUMBER = "Number"
    STR = "Str"
    BOOL = "Bool"
    ARRAY = "Array"
    OBJECT = "Object"


class CfgValue:
    """Wraps a Python value with its configuration type.

    NUMBER holds an int in the signed 64-bit range, STR a str, BOOL a bool,
    ARRAY a list of CfgValue and OBJECT a dict of str -> CfgValue. Values are
    not mutated once the parser has built them.
    """

    __slots__ = ("value", "type")

    def __init__(self, value: Any, cfg_type: CfgType):
        self.value = value
        self.type = cfg_type

    def __repr__(self):
        return f"CfgValue({self.type.value}: {self.value!r})"

    def __eq__(self, other):
        if not isinstance(other, CfgValue):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def copy(self) -> CfgValue:
        if self.type == CfgType.ARRAY:
            return CfgValue([v.copy() for v in self.value], self.type)
        if self.type == CfgType.OBJECT:
            return CfgValue({k: v.copy() for k, v in self.value.items()}, self.type)
        return CfgValue(self.value, self.type)

    def to_python(self) -> Any:
        """Plain Python view: ints, strs, bools, lists and key-sorted dicts."""
        if self.type == CfgType.ARRAY:
            return [v.to_python() for v in self.value]
        if self.type == CfgType.OBJECT:
            return {k: self.value[k].to_python() for k in sorted(self.value)}
        return self.value


# ============================================================
# Constructors
# ============================================================

def cfg_number(value: int) -> CfgValue:
    return CfgValue(value, CfgType.NUMBER)

def cfg_str(value: str) -> CfgValue:
    return CfgValue(value, CfgType.STR)

def cfg_bool(value: bool) -> CfgValue:
    return CfgValue(bool(value), CfgType.BOOL)

def cfg_array(elements: list[CfgValue] | None = None) -> CfgValue:
    return CfgValue(list(elements or []), CfgType.ARRAY)

def cfg_object(pairs: dict[str, CfgValue] | None = None) -> CfgValue:
    return CfgValue(dict(pairs or {}), CfgType.OBJECT)


def nesting_depth(value: CfgValue) -> int:
    """Levels of arrays/objects in ``value``; scalars are 0, ``[]`` and ``{}`` are 1."""
    deepest = 0
    stack = [(value, 1)]
    while stack:
        node, level = stack.pop()
        if node.type == CfgType.ARRAY:
            children = node.value
        elif node.type == CfgType.OBJECT:
            children = node.value.values()
        else:
            continue
        deepest = max(deepest, level)
        stack.extend((child, level + 1) for child in children)
    return deepest


# ============================================================
# Hex literals
# ============================================================

INT64_BITS = 64
INT64_SIGN = 1 << (INT64_BITS - 1)
UINT64_LIMIT = 1 << INT64_BITS


def hex_to_int64(digits: str) -> int:
    """Convert hex digits (no prefix) to a signed 64-bit int.

    Raises ValueError for an empty digit string or a value that does not fit
    in 64 bits. Values with the top bit set come back negative.
    """
    if not digits:
        raise ValueError("hexadecimal literal has no digits")
    raw = int(digits, 16)
    if raw >= UINT64_LIMIT:
        raise ValueError(f"hexadecimal literal 0x{digits} does not fit in {INT64_BITS} bits")
    if raw >= INT64_SIGN:
        raw -= UINT64_LIMIT
    return raw
