"""Graphviz visualization of the program driver state machine.

Provides `render_states_dot(trace)` which returns a `graphviz.Digraph`
object (not rendered) showing every `ProgramState`, with the transitions
taken during a run drawn as edges labelled by how often they were taken.
`write_and_render` writes the rendered file to disk.

Layout: terminal states are double circles, states the run visited are
filled, and the state the run ended in is outlined in bold.
"""

from typing import Dict, List, Tuple
from graphviz import Digraph
from diagnostics import ProgramState

# Transitions the driver can take, drawn dashed when not taken.
ALLOWED_TRANSITIONS = [
    (ProgramState.START, ProgramState.PARSING_STATEMENT),
    (ProgramState.START, ProgramState.DONE),
    (ProgramState.PARSING_STATEMENT, ProgramState.EXPECT_SEPARATOR_OR_END),
    (ProgramState.EXPECT_SEPARATOR_OR_END, ProgramState.PARSING_STATEMENT),
    (ProgramState.EXPECT_SEPARATOR_OR_END, ProgramState.DONE),
    (ProgramState.EXPECT_SEPARATOR_OR_END, ProgramState.HALTED_ON_ERROR),
]


def count_transitions(
    trace: List[ProgramState],
) -> Dict[Tuple[ProgramState, ProgramState], int]:
    counts: Dict[Tuple[ProgramState, ProgramState], int] = {}
    for src, dst in zip(trace, trace[1:]):
        counts[(src, dst)] = counts.get((src, dst), 0) + 1
    return counts


def render_states_dot(trace: List[ProgramState]) -> Digraph:
    """Return a graphviz.Digraph for the given state trace.

    The caller may inspect `dot.source` or call `dot.render(...)` (the latter
    requires the Graphviz binaries).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="LR")

    visited = set(trace)
    final = trace[-1] if trace else None
    for state in ProgramState:
        attrs = {"shape": "doublecircle" if state.is_terminal else "circle"}
        if state in visited:
            attrs["style"] = "filled"
            attrs["fillcolor"] = "#ffefef" if state == ProgramState.HALTED_ON_ERROR else "#efffef"
        if state == final:
            attrs["penwidth"] = "2"
        dot.node(state.name, label=state.name.replace("_", "\\n"), **attrs)

    counts = count_transitions(trace)
    for src, dst in ALLOWED_TRANSITIONS:
        taken = counts.get((src, dst), 0)
        if taken:
            dot.edge(src.name, dst.name, label=str(taken))
        else:
            dot.edge(src.name, dst.name, style="dashed", color="gray")

    return dot


def write_and_render(trace: List[ProgramState], out_path: str, fmt: str = "svg") -> None:
    """Write and render the state graph to `out_path` (extension added by Graphviz).

    Example: write_and_render(trace, 'out/states', fmt='png') creates out/states.png
    """
    dot = render_states_dot(trace)
    dot.format = fmt
    dot.render(out_path, cleanup=True)
