"""
iota CLI - evaluate one prefix arithmetic expression per invocation.

    iota "(* (- 7 4) (+ (/ 26 2) 1))"
    echo "(+ 1 2)" | iota

Prints the integer result. On a syntax or evaluation error the message goes
to stderr and the exit code is 1.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import typer

from iota.debug_utils.pprint import pprint_tree
from iota.errors import IotaError
from iota.evaluation.evaluator import evaluate
from iota.reader.parser import Parser
from iota.reader.tokenizer import Tokenizer

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Evaluate parenthesized prefix integer arithmetic, e.g. (+ 1 2).",
    add_completion=False,
)


@app.command()
def run(
    expression: Optional[List[str]] = typer.Argument(
        None, help="Expression to evaluate. Read from stdin when omitted."
    ),
    tree: bool = typer.Option(False, "--tree", help="Print the parsed tree before the result."),
    max_depth: Optional[int] = typer.Option(
        None, "--max-depth", min=1, help="Maximum nesting depth (default: $IOTA_MAX_DEPTH or 200)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if expression:
        source = " ".join(expression)
    else:
        source = typer.get_text_stream("stdin").read()
    logger.debug("source: %r", source)

    try:
        parsed = Parser(Tokenizer(source), max_depth=max_depth).parse()
        if tree:
            typer.echo(pprint_tree(parsed))
        result = evaluate(parsed)
    except IotaError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(result)


def main() -> None:
    app()
