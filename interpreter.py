"""
Single-pass interpreter for `;`-separated assignment statements.

Overview and approach:
- Lexing, parsing and evaluation are fused: the interpreter pulls one token
    at a time from the `Lexer` into `self.current` (the only lookahead) and
    each recursive-descent routine returns the integer value of the construct
    it recognized. No syntax tree is built.

Grammar:
    program    -> statement { ';' statement } [ ';' ]
    statement  -> IDENT ':=' expression
    expression -> term { ('+' | '-') term }
    term       -> factor { ('*' | '/') factor }
    factor     -> '(' expression ')' | IDENT | CONST

Key points:
- Every routine returns with the lookahead on the first token after the
    construct it consumed.
- Errors never unwind. A failing construct sets `has_error` on the current
    statement's `StatementDiagnostics`, records a message on the error stream
    and yields `0`; recovery only happens at statement boundaries.
- The symbol table is written once per statement, and only when the
    statement finished without error.
- Values are signed 32-bit integers. Constants and intermediate results
    outside that range are errors, and `/` truncates toward zero.
- Parentheses nest at most `MAX_NESTING` deep; a deeper group is skipped
    up to its matching `)` and reported as an error.

Examples:
    Input:  "a := 5; b := a + 3;"
    Output: a := 5; ID: 1; CONST: 1; OP: 0;
            (OK)
            b := 8; ID: 2; CONST: 1; OP: 1;
            (OK)
            Result ==> a: 5; b: 8;
"""

from __future__ import annotations
import sys
from typing import List, Optional, TextIO
from tokens import Token, TokenType, ADD_OPERATORS, MULT_OPERATORS, OPERATORS
from lexer import Lexer
from symbols import SymbolTable, INT_MAX, in_int_range
from diagnostics import ProgramState, StatementDiagnostics, StatementReport
from pretty_printer import PrettyPrinter

MAX_NESTING = 100
MAX_CONSTANT_DIGITS = len(str(INT_MAX))


def truncating_div(left: int, right: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


class Interpreter:
    def __init__(
        self,
        text: str,
        symbol_table: Optional[SymbolTable] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ):
        self.lexer = Lexer(text)
        self.symbol_table = symbol_table if symbol_table is not None else SymbolTable()
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr

        self.diagnostics = StatementDiagnostics()
        self.reports: List[StatementReport] = []
        self.messages: List[str] = []
        self.state = ProgramState.START
        self.state_trace: List[ProgramState] = [ProgramState.START]
        self.depth = 0

        self.current: Token = self.lexer.get_next_token()

    def advance(self) -> Token:
        """Move the lookahead to the next token."""
        self.current = self.lexer.get_next_token()
        return self.current

    def transition(self, state: ProgramState) -> None:
        self.state = state
        self.state_trace.append(state)

    def report(self, kind: str, message: str, token: Optional[Token] = None) -> None:
        """Write a diagnostic line to the error stream."""
        token = token if token is not None else self.current
        text = f"{kind} at line {token.line}, column {token.column}: {message}"
        self.messages.append(text)
        print(text, file=self.err)

    def error(self, message: str, token: Optional[Token] = None) -> int:
        """Flag a semantic error on the current statement and yield 0."""
        self.diagnostics.has_error = True
        self.report("Error", message, token)
        return 0

    def syntax_error(self, message: str) -> int:
        """Flag a syntax error on the current statement and yield 0."""
        self.diagnostics.has_error = True
        self.report("Parsing error", message)
        return 0

    def skip_group(self) -> None:
        """Consume a parenthesized group up to its matching `)`, `;` or EOF."""
        depth = 0
        while self.current.type not in (TokenType.SEMICOLON, TokenType.EOF):
            if self.current.type == TokenType.LPAREN:
                depth += 1
            elif self.current.type == TokenType.RPAREN:
                depth -= 1
            self.advance()
            if depth == 0:
                break

    def checked(self, value: int, token: Token) -> int:
        if in_int_range(value):
            return value
        return self.error("Integer overflow", token)

    @property
    def has_error(self) -> bool:
        """True when any statement of the run had an error."""
        return any(r.has_error for r in self.reports)

    def run(self) -> SymbolTable:
        """Evaluate the whole program and print the final symbol table."""
        self.parse_program()
        if not self.has_error:
            print(PrettyPrinter.print_symbol_table(self.symbol_table), file=self.out)
        return self.symbol_table

    def parse_program(self) -> ProgramState:
        """program -> statement { ';' statement } [ ';' ]"""
        if self.current.type == TokenType.EOF:
            self.transition(ProgramState.DONE)
            return self.state

        while True:
            self.transition(ProgramState.PARSING_STATEMENT)
            self.parse_statement()
            self.transition(ProgramState.EXPECT_SEPARATOR_OR_END)

            if self.current.type == TokenType.SEMICOLON:
                self.advance()
                if self.current.type == TokenType.EOF:
                    self.transition(ProgramState.DONE)
                    break
                continue
            if self.current.type == TokenType.EOF:
                self.transition(ProgramState.DONE)
                break

            self.report("Parsing error", "Expected ';' or end of file.")
            self.transition(ProgramState.HALTED_ON_ERROR)
            break

        if self.current.type != TokenType.EOF:
            self.report("Parsing error", "Extra tokens after program end.")
        return self.state

    def parse_statement(self) -> StatementReport:
        """statement -> IDENT ':=' expression"""
        self.diagnostics.reset()

        if self.current.type != TokenType.IDENTIFIER:
            self.syntax_error("Expected identifier at the beginning of the statement.")
            return self._finish_statement(None, None, complete=False)

        ident = self.current.value
        self.diagnostics.id_count += 1
        self.advance()

        if self.current.type != TokenType.ASSIGN:
            self.syntax_error("Expected assignment operator after identifier.")
            return self._finish_statement(ident, None, complete=False)
        self.advance()

        value = self.evaluate_expression()
        if not self.diagnostics.has_error:
            self.symbol_table.assign(ident, value)

        report = self._finish_statement(ident, value)
        print(PrettyPrinter.print_statement(report), file=self.out)
        print(PrettyPrinter.print_status(report), file=self.out)
        return report

    def _finish_statement(
        self, ident: Optional[str], value: Optional[int], complete: bool = True
    ) -> StatementReport:
        report = StatementReport.from_diagnostics(
            ident, value, self.diagnostics, complete=complete
        )
        self.reports.append(report)
        return report

    def evaluate_expression(self) -> int:
        """expression -> term { ('+' | '-') term }"""
        value = self.evaluate_term()
        while self.current.type in ADD_OPERATORS:
            op = self.current
            self.diagnostics.op_count += 1
            self.advance()

            # Only the first operator of a run is applied; one extra is skipped.
            if self.current.type in OPERATORS:
                self.diagnostics.has_warning = True
                self.report("Warning", "consecutive operators detected")
                self.advance()

            right = self.evaluate_term()
            if op.type == TokenType.PLUS:
                value = self.checked(value + right, op)
            else:
                value = self.checked(value - right, op)
        return value

    def evaluate_term(self) -> int:
        """term -> factor { ('*' | '/') factor }"""
        value = self.evaluate_factor()
        while self.current.type in MULT_OPERATORS:
            op = self.current
            self.diagnostics.op_count += 1
            self.advance()

            right = self.evaluate_factor()
            if op.type == TokenType.STAR:
                value = self.checked(value * right, op)
            elif right == 0:
                value = self.error("Division by zero", op)
            else:
                value = self.checked(truncating_div(value, right), op)
        return value

    def evaluate_factor(self) -> int:
        """factor -> '(' expression ')' | IDENT | CONST"""
        token = self.current

        match token.type:
            case TokenType.LPAREN:
                if self.depth >= MAX_NESTING:
                    self.syntax_error("Expression nested too deeply.")
                    self.skip_group()
                    return 0
                self.advance()
                self.depth += 1
                value = self.evaluate_expression()
                self.depth -= 1
                if self.current.type == TokenType.RPAREN:
                    self.advance()
                else:
                    self.syntax_error("Expected ')' after expression.")
                return value

            case TokenType.IDENTIFIER:
                self.diagnostics.id_count += 1
                self.advance()
                if token.value in self.symbol_table:
                    return self.symbol_table.lookup(token.value)
                return self.error(f"Undefined variable {token.value}", token)

            case TokenType.CONSTANT:
                self.diagnostics.const_count += 1
                self.advance()
                # int() rejects very long digit strings; bound the length first.
                digits = token.value.lstrip("0") or "0"
                if len(digits) > MAX_CONSTANT_DIGITS or int(digits) > INT_MAX:
                    shown = token.value if len(token.value) <= 20 else token.value[:20] + "..."
                    return self.error(f"Constant overflow ({shown})", token)
                return int(digits)

            case _:
                # The offending token is left in place for the program driver.
                return self.syntax_error(
                    f"Expected '(' or identifier or constant, got '{token.lexeme}'."
                )
