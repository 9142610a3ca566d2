"""Syntax highlighting rules for disassembly listings."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Rule:
    """A pattern and the format given to its matches."""

    name: str
    pattern: re.Pattern
    color: str
    bold: bool = False


@dataclass(frozen=True)
class Span:
    """A highlighted stretch of a line."""

    start: int
    length: int
    rule: Rule

    @property
    def end(self) -> int:
        return self.start + self.length


RULES = (
    Rule("address", re.compile(r"^0x[0-9a-fA-F]+", re.ASCII), "#808080"),
    Rule("mnemonic", re.compile(r"\b[a-zA-Z]{2,7}\b", re.ASCII), "#FFA500", bold=True),
    Rule(
        "register",
        re.compile(r"\b(eax|ebx|ecx|edx|r\d+|rsp|rbp|rip|esi|edi)\b", re.ASCII),
        "#87CEFA",
    ),
    Rule("number", re.compile(r"0x[0-9a-fA-F]+|\b\d+\b", re.ASCII), "#dcdcaa"),
    Rule("comment", re.compile(r";.*$", re.ASCII), "#6A9955"),
)


def highlight_line(text: str) -> list[Span]:
    """Return the spans of one line in rule order; later spans take precedence."""
    return [
        Span(match.start(), match.end() - match.start(), rule)
        for rule in RULES
        for match in rule.pattern.finditer(text)
        if match.end() > match.start()
    ]


def join_instructions(instructions: Iterable[str]) -> str:
    """Join instruction lines into the text of a listing."""
    return "\n".join(instructions)