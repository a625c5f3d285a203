import logging
import sys
from typing import TextIO

from . import syntax, parser, code_gen, instruction, runner

log = logging.getLogger(__name__)


def compile_regex(regex: str, counter_max: int = instruction.COUNTER_MAX) -> list[instruction.Instruction]:
    parsed = parser.parse(regex)
    return code_gen.compile(parsed, counter_max)

def match(regex: str, text: str, config: runner.Config | None = None) -> bool:
    '''
    Reports whether `regex` matches at the beginning of `text`.
    '''
    config = config or runner.Config()
    program = compile_regex(regex, config.counter_max)
    matched = runner.evaluate(program, text, 0, config)
    log.debug("match(%r, %r) = %s", regex, text, matched)
    return matched

def describe(regex: str) -> str:
    '''
    Renders the AST and the compiled program of a regex as text.
    '''
    parsed = parser.parse(regex)
    code = code_gen.compile(parsed)
    return f"# regex: {regex}\n" \
        + "## AST\n" + syntax.render(parsed) + "\n" \
        + "## code\n" + instruction.listing(code)

def explain(regex: str, file: TextIO | None = None):
    print(describe(regex), file=file if file is not None else sys.stdout)
