import io

from lexer import Lexer
from interpreter import Interpreter


def lex(text: str):
    """Return a list of tokens for the given source text."""
    return Lexer(text).tokenize()


def token_types(text: str):
    return [t.type for t in lex(text)]


def run_text(text: str):
    """Run a program and return (interpreter, stdout text, stderr text)."""
    out = io.StringIO()
    err = io.StringIO()
    interp = Interpreter(text, out=out, err=err)
    interp.run()
    return interp, out.getvalue(), err.getvalue()
