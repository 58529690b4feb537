"""Output formatting for statement results and the symbol table.

Provides `PrettyPrinter` with static helpers that render a `StatementReport`
as the statement line and the status line, the final `Result ==>` dump of a
`SymbolTable`, and a numbered token listing for debugging.

Examples:
    PrettyPrinter.print_statement(report)  # 'a := 5; ID: 1; CONST: 1; OP: 0;'
    PrettyPrinter.print_status(report)     # '(OK)'
"""

from __future__ import annotations
from typing import List
from tokens import Token
from symbols import SymbolTable
from diagnostics import Status, StatementReport

UNKNOWN_VALUE = "Unknown"
OK_STATUS = "(OK)"
WARNING_STATUS = '(Warning) "invalid operator usage"'
ERROR_STATUS = '(Error) "undefined variable ({ident}) referenced"'


class PrettyPrinter:
    @staticmethod
    def print_statement(report: StatementReport) -> str:
        value = UNKNOWN_VALUE if report.value is None else str(report.value)
        return (
            f"{report.ident} := {value}; "
            f"ID: {report.id_count}; CONST: {report.const_count}; OP: {report.op_count};"
        )

    @staticmethod
    def print_status(report: StatementReport) -> str:
        match report.status:
            case Status.ERROR:
                return ERROR_STATUS.format(ident=report.ident)
            case Status.WARNING:
                return WARNING_STATUS
            case _:
                return OK_STATUS

    @staticmethod
    def print_symbol_table(table: SymbolTable) -> str:
        """Render `Result ==> name: value; ...` in sorted name order."""
        entries = "".join(f"{name}: {value}; " for name, value in table.items())
        return f"Result ==> {entries}"

    @staticmethod
    def print_tokens(tokens: List[Token]) -> str:
        lines = [f"Tokens ({len(tokens)}):"]
        for i, token in enumerate(tokens):
            lines.append(f"  {i:3}: {token}  @{token.line}:{token.column}")
        return "\n".join(lines)
