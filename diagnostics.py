"""Per-statement diagnostic state and program driver states.

`StatementDiagnostics` is the mutable record the interpreter updates while a
statement is being evaluated (token counters plus error/warning flags). When
the statement finishes it is frozen into a `StatementReport`, which is what
the printers and the JSON report work from.

`ProgramState` names the states of the program driver:

    START -> PARSING_STATEMENT -> EXPECT_SEPARATOR_OR_END
          -> PARSING_STATEMENT | DONE | HALTED_ON_ERROR
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class Status(Enum):
    OK = auto()
    WARNING = auto()
    ERROR = auto()

    def __str__(self) -> str:
        return self.name


class ProgramState(Enum):
    START = auto()
    PARSING_STATEMENT = auto()
    EXPECT_SEPARATOR_OR_END = auto()
    DONE = auto()
    HALTED_ON_ERROR = auto()

    def __str__(self) -> str:
        return self.name

    @property
    def is_terminal(self) -> bool:
        return self in (ProgramState.DONE, ProgramState.HALTED_ON_ERROR)


@dataclass
class StatementDiagnostics:
    id_count: int = 0
    const_count: int = 0
    op_count: int = 0
    has_error: bool = False
    has_warning: bool = False

    def reset(self) -> None:
        self.id_count = 0
        self.const_count = 0
        self.op_count = 0
        self.has_error = False
        self.has_warning = False

    @property
    def status(self) -> Status:
        if self.has_error:
            return Status.ERROR
        if self.has_warning:
            return Status.WARNING
        return Status.OK


@dataclass(frozen=True)
class StatementReport:
    """Outcome of one statement.

    `ident` is None when the statement did not start with an identifier, and
    `value` is None whenever the statement had an error. `complete` is False
    for statements rejected before their expression was evaluated; those do
    not get a statement line in the output.
    """

    ident: Optional[str]
    value: Optional[int]
    id_count: int
    const_count: int
    op_count: int
    status: Status
    complete: bool = True

    @classmethod
    def from_diagnostics(
        cls,
        ident: Optional[str],
        value: Optional[int],
        diag: StatementDiagnostics,
        complete: bool = True,
    ) -> StatementReport:
        status = diag.status
        return cls(
            ident=ident,
            value=None if status == Status.ERROR else value,
            id_count=diag.id_count,
            const_count=diag.const_count,
            op_count=diag.op_count,
            status=status,
            complete=complete,
        )

    @property
    def has_error(self) -> bool:
        return self.status == Status.ERROR

