"""End-to-end tests for statement output and the program driver."""

from diagnostics import ProgramState, Status
from tests.utils import run_text


def test_example_program_output():
    _, out, err = run_text("a := 5; b := a + 3;")
    assert out == (
        "a := 5; ID: 1; CONST: 1; OP: 0;\n"
        "(OK)\n"
        "b := 8; ID: 2; CONST: 1; OP: 1;\n"
        "(OK)\n"
        "Result ==> a: 5; b: 8; \n"
    )
    assert err == ""


def test_undefined_variable_output_suppresses_result():
    interp, out, _ = run_text("c := d + 1;")
    assert out == (
        "c := Unknown; ID: 2; CONST: 1; OP: 1;\n"
        '(Error) "undefined variable (c) referenced"\n'
    )
    assert interp.has_error


def test_warning_output():
    _, out, _ = run_text("e := 2 + + 3;")
    assert out == (
        "e := 5; ID: 1; CONST: 2; OP: 1;\n"
        '(Warning) "invalid operator usage"\n'
        "Result ==> e: 5; \n"
    )


def test_division_by_zero_output():
    _, out, _ = run_text("f := 4 / 0;")
    assert out.splitlines() == [
        "f := Unknown; ID: 1; CONST: 2; OP: 1;",
        '(Error) "undefined variable (f) referenced"',
    ]


def test_result_is_sorted_by_name():
    _, out, _ = run_text("zz := 1; b := 2; a_1 := 3; B := 4")
    assert out.splitlines()[-1] == "Result ==> B: 4; a_1: 3; b: 2; zz: 1; "


def test_any_error_in_run_suppresses_result():
    interp, out, _ = run_text("a := x; b := 2;")
    assert "Result ==>" not in out
    assert interp.symbol_table.as_dict() == {"b": 2}
    assert [r.status for r in interp.reports] == [Status.ERROR, Status.OK]


def test_statements_continue_after_error():
    _, out, _ = run_text("a := 1 / 0; b := 2; c := b * 2;")
    lines = out.splitlines()
    assert lines[2] == "b := 2; ID: 1; CONST: 1; OP: 0;"
    assert lines[4] == "c := 4; ID: 2; CONST: 1; OP: 1;"


def test_trailing_separator_is_optional():
    interp_a, out_a, _ = run_text("a := 1; b := 2;")
    interp_b, out_b, _ = run_text("a := 1; b := 2")
    assert out_a == out_b
    assert interp_a.state == interp_b.state == ProgramState.DONE


def test_newlines_between_tokens():
    _, out, _ = run_text("a\n:=\n  1\n;\nb := a\n  + 1\n;\n")
    assert out.splitlines()[-1] == "Result ==> a: 1; b: 2; "


def test_empty_program():
    interp, out, err = run_text("")
    assert out == "Result ==> \n"
    assert err == ""
    assert interp.state_trace == [ProgramState.START, ProgramState.DONE]


def test_state_trace_for_clean_run():
    interp, _, _ = run_text("a := 1; b := 2;")
    assert interp.state_trace == [
        ProgramState.START,
        ProgramState.PARSING_STATEMENT,
        ProgramState.EXPECT_SEPARATOR_OR_END,
        ProgramState.PARSING_STATEMENT,
        ProgramState.EXPECT_SEPARATOR_OR_END,
        ProgramState.DONE,
    ]


def test_missing_separator_halts_and_reports_extra_tokens():
    interp, out, err = run_text("a := 1 2; b := 3;")
    assert interp.state == ProgramState.HALTED_ON_ERROR
    assert len(interp.reports) == 1
    assert "Expected ';' or end of file." in err
    assert "Extra tokens after program end." in err
    # The separator error is not a statement error, so the dump still runs.
    assert out.splitlines() == [
        "a := 1; ID: 1; CONST: 1; OP: 0;",
        "(OK)",
        "Result ==> a: 1; ",
    ]


def test_missing_identifier_at_statement_start():
    interp, out, err = run_text("5 := 3;")
    assert out == ""
    assert "Expected identifier at the beginning of the statement." in err
    assert interp.state == ProgramState.HALTED_ON_ERROR
    r = interp.reports[0]
    assert r.ident is None
    assert not r.complete
    assert r.status == Status.ERROR


def test_missing_assignment_operator():
    interp, out, err = run_text("a = 3;")
    assert out == ""
    assert "Expected assignment operator after identifier." in err
    assert interp.reports[0].ident == "a"
    assert interp.reports[0].id_count == 1
    assert "a" not in interp.symbol_table


def test_invalid_character_in_expression():
    interp, out, err = run_text("a := 1 + @; b := 2;")
    assert out.splitlines() == [
        "a := Unknown; ID: 1; CONST: 1; OP: 1;",
        '(Error) "undefined variable (a) referenced"',
    ]
    assert "got '@'" in err
    assert interp.state == ProgramState.HALTED_ON_ERROR


def test_diagnostics_carry_source_positions():
    interp, _, _ = run_text("a := 1;\nb := zz;")
    assert interp.messages == ["Error at line 2, column 6: Undefined variable zz"]


def test_symbol_table_is_fresh_per_run_and_output_repeats():
    src = "a := 5; b := a * 2 - 1; c := (b + a) / 3;"
    first = run_text(src)
    second = run_text(src)
    assert first[1] == second[1]
    assert first[2] == second[2]
    assert first[0].symbol_table is not second[0].symbol_table
