"""
Lexer for the assignment-statement language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    turns the input text into `Token` objects defined in `tokens.py`, one
    token per call to `get_next_token()`.
- It recognizes identifiers, non-negative integer constants, the assignment
    operator `:=`, the arithmetic operators `+ - * /`, semicolons and
    parentheses. Whitespace (newlines included) separates tokens and is
    otherwise ignored.

Examples:
    Input:  "a := b * (2 + c);"
    Tokens: [IDENTIFIER('a'), ASSIGN, IDENTIFIER('b'), STAR, LPAREN, ...]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and `self.current_char`
    with one character of lookahead through `peek_char()`.
- Nothing here raises: an unrecognized character, or a `:` that is not
    followed by `=`, becomes an `INVALID` token and the grammar reports it.
- Once the input is exhausted every further call returns `EOF`.
- Identifier, digit and whitespace classes are ASCII only; `str.isalpha`,
    `str.isdigit` and `str.isspace` would also accept characters such as
    other scripts' letters, `\\x1c`-`\\x1f`, `\\x85` and `\\xa0`, which lex as
    `INVALID` here.
"""

from __future__ import annotations
from typing import Optional, List
from tokens import Token, TokenType

WHITESPACE = " \t\n\r\x0b\x0c"


def is_ident_start(ch: Optional[str]) -> bool:
    return ch is not None and (ch == "_" or (ch.isascii() and ch.isalpha()))


def is_ident_char(ch: Optional[str]) -> bool:
    return ch is not None and (ch == "_" or (ch.isascii() and ch.isalnum()))


def is_digit(ch: Optional[str]) -> bool:
    return ch is not None and "0" <= ch <= "9"


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.text[self.pos] if self.text else None

        self.single_char_tokens = {
            "+": TokenType.PLUS,
            "-": TokenType.MINUS,
            "*": TokenType.STAR,
            "/": TokenType.SLASH,
            ";": TokenType.SEMICOLON,
            "(": TokenType.LPAREN,
            ")": TokenType.RPAREN,
        }

    def advance(self) -> None:
        """Advance to next character."""
        if self.current_char is None:
            return
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def peek_char(self) -> Optional[str]:
        """Look at next character without consuming it."""
        next_pos = self.pos + 1
        if next_pos < len(self.text):
            return self.text[next_pos]
        return None

    def skip_whitespace(self) -> None:
        """Skip whitespace characters."""
        while self.current_char is not None and self.current_char in WHITESPACE:
            self.advance()

    def constant(self) -> str:
        """Scan a maximal run of decimal digits."""
        result = []
        while is_digit(self.current_char):
            result.append(self.current_char)
            self.advance()
        return "".join(result)

    def identifier(self) -> str:
        """Scan an identifier: letter or underscore, then letters, digits, underscores."""
        result = [self.current_char]
        self.advance()
        while is_ident_char(self.current_char):
            result.append(self.current_char)
            self.advance()
        return "".join(result)

    def get_next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        self.skip_whitespace()

        line, column = self.line, self.column
        ch = self.current_char

        if ch is None:
            return Token(TokenType.EOF, None, line, column)

        if is_ident_start(ch):
            return Token(TokenType.IDENTIFIER, self.identifier(), line, column)

        if is_digit(ch):
            return Token(TokenType.CONSTANT, self.constant(), line, column)

        # `:` only forms a token together with `=`; a lone colon is consumed
        # by itself and the following character is left for the next token.
        if ch == ":":
            if self.peek_char() == "=":
                self.advance()
                self.advance()
                return Token(TokenType.ASSIGN, ":=", line, column)
            self.advance()
            return Token(TokenType.INVALID, ":", line, column)

        self.advance()
        token_type = self.single_char_tokens.get(ch, TokenType.INVALID)
        return Token(token_type, ch, line, column)

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string, ending with EOF."""
        tokens = []
        while True:
            token = self.get_next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens
