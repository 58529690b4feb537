"""Convert a finished interpreter run into JSON-serializable structures.

This module provides `report_to_json(interpreter)` which returns nested
dicts/lists/primitives describing the run: one entry per statement, the
final symbol table, the diagnostics written to the error stream and the
states the program driver went through.
"""

from typing import Any, Dict
from diagnostics import StatementReport
from interpreter import Interpreter


def statement_to_json(report: StatementReport) -> Dict[str, Any]:
    return {
        "ident": report.ident,
        "value": report.value,
        "id_count": report.id_count,
        "const_count": report.const_count,
        "op_count": report.op_count,
        "status": str(report.status),
        "complete": report.complete,
    }


def report_to_json(interp: Interpreter) -> Dict[str, Any]:
    # The symbol table is only part of the printed output on an error-free
    # run, but it is always exported here.
    return {
        "statements": [statement_to_json(r) for r in interp.reports],
        "symbols": interp.symbol_table.as_dict(),
        "has_error": interp.has_error,
        "final_state": str(interp.state),
        "state_trace": [str(s) for s in interp.state_trace],
        "messages": list(interp.messages),
    }
