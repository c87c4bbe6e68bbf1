import logging
from typing import Optional

from iota import Value
from iota.reader.parser import Parser
from iota.reader.tokenizer import Tokenizer
from iota.evaluation.evaluator import evaluate

logger = logging.getLogger(__name__)


def evaluate_expression(source: str, max_depth: Optional[int] = None) -> Value:
    """Tokenize, parse and evaluate one expression.

    Raises an IotaError subclass on the first syntax or evaluation failure.
    Nothing is kept between calls.
    """
    tree = Parser(Tokenizer(source), max_depth=max_depth).parse()
    result = evaluate(tree)
    logger.debug("%r => %d", source, result)
    return result


class Interpreter:
    """
    Evaluates iota expressions with a fixed nesting limit.
    Holds no state besides that limit, so repeated calls are independent.
    """
    def __init__(self, max_depth: Optional[int] = None):
        self.max_depth = max_depth

    def eval(self, code: str) -> Value:
        return evaluate_expression(code, max_depth=self.max_depth)


#  Example use-age:
if __name__ == "__main__":
    interp = Interpreter()

    tests = [
        "(+ 1 2)                          ;; -> 3",
        "(* (- 7 4) (+ (/ 26 2) 1))       ;; -> 42",
        "(/ (- 0 7) 2)                    ;; -> -3",
    ]

    for line in tests:
        code = line.split(";;")[0]
        print(code.strip(), "=>", interp.eval(code))
