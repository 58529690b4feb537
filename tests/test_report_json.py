import json

from report_json import report_to_json
from tests.utils import run_text


def test_report_contains_statements_and_symbols():
    interp, _, _ = run_text("a := 1; b := a + + 2; c := nope;")
    data = report_to_json(interp)

    assert data["symbols"] == {"a": 1, "b": 3}
    assert data["has_error"] is True
    statements = data["statements"]
    assert [s["ident"] for s in statements] == ["a", "b", "c"]
    assert [s["status"] for s in statements] == ["OK", "WARNING", "ERROR"]
    assert statements[2]["value"] is None
    assert statements[1]["op_count"] == 1
    assert data["state_trace"][0] == "START"
    assert data["final_state"] == "DONE"
    assert any("Undefined variable nope" in m for m in data["messages"])


def test_report_is_json_serializable():
    interp, _, _ = run_text("5;")
    text = json.dumps(report_to_json(interp))
    assert '"final_state": "HALTED_ON_ERROR"' in text
    assert '"complete": false' in text
