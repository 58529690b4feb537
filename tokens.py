"""Token definitions for the lexer.

This module defines the `TokenType` enum for all token kinds recognized by
the lexer and a small `Token` dataclass that holds a token type and an
optional lexeme. Tokens are the atomic units produced by the lexer and
consumed one at a time by the interpreter's lookahead.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Optional


class TokenType(Enum):
    # Operands
    IDENTIFIER = auto()
    CONSTANT = auto()

    # Arithmetic operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # Punctuation
    ASSIGN = auto()
    SEMICOLON = auto()
    LPAREN = auto()
    RPAREN = auto()

    # Special
    EOF = auto()
    INVALID = auto()

    def __str__(self) -> str:
        return self.name


ADD_OPERATORS = (TokenType.PLUS, TokenType.MINUS)
MULT_OPERATORS = (TokenType.STAR, TokenType.SLASH)
OPERATORS = ADD_OPERATORS + MULT_OPERATORS


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[str] = None
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)})"

    @property
    def lexeme(self) -> str:
        if self.value is None:
            return str(self.type)
        return self.value
