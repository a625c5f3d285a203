import logging
from dataclasses import dataclass
from enum import Enum

from . import instruction as inst
from .exceptions import (
    EvalPCOverflow, SPOverflow, InvalidPC, InvalidContext, StepLimitExceeded, UnsupportedStrategy)

log = logging.getLogger(__name__)

class SearchStrategy(Enum):
    DEPTH_FIRST = "depth-first"
    # Not implemented, evaluate() rejects it.
    BREADTH_FIRST = "breadth-first"

@dataclass
class Config:
    """
    Options for a single evaluation.

    `max_steps` bounds the number of instructions executed per evaluation (None means no bound);
    hosts matching untrusted patterns should set it since backtracking can take exponential time.
    `counter_max` is the largest value the program counter and scan pointer may reach.
    """
    strategy: SearchStrategy = SearchStrategy.DEPTH_FIRST
    max_steps: int | None = None
    counter_max: int = inst.COUNTER_MAX

def _increment(value: int, limit: int, error: type) -> int:
    if value >= limit:
        raise error()
    return value + 1

def evaluate(
        program: list[inst.Instruction],
        symbols: str,
        start: int = 0,
        config: Config | None = None
) -> bool:
    '''
    Runs `program` against `symbols` with depth-first backtracking and reports whether it matches
    at the beginning of `symbols`. `start` is the position of `symbols` within the line being
    scanned, which `^` needs to know.
    '''
    config = config or Config()
    if config.strategy is not SearchStrategy.DEPTH_FIRST:
        raise UnsupportedStrategy(config.strategy)

    limit = config.counter_max
    steps = 0
    # Pending (pc, sp) alternatives of the splits seen so far. The most recent split's second
    # branch sits on top, so it's tried only after everything reachable from its first branch.
    pending = [(0, 0)]
    # Splits already explored at a given sp. The outcome from a (pc, sp) state never changes, so
    # reaching one again adds nothing and would loop forever on patterns like `(a*)*`.
    visited: set[tuple[int, int]] = set()

    while pending:
        pc, sp = pending.pop()
        while True:
            if config.max_steps is not None:
                steps += 1
                if steps > config.max_steps:
                    raise StepLimitExceeded(config.max_steps)

            if pc < 0 or pc >= len(program):
                raise InvalidPC(pc)
            i = program[pc]

            if isinstance(i, inst.Char):
                if sp >= len(symbols) or symbols[sp] != i.val:
                    break
                pc = _increment(pc, limit, EvalPCOverflow)
                sp = _increment(sp, limit, SPOverflow)
            elif isinstance(i, inst.Dot):
                if sp >= len(symbols):
                    break
                pc = _increment(pc, limit, EvalPCOverflow)
                sp = _increment(sp, limit, SPOverflow)
            elif isinstance(i, inst.Caret):
                if pc != 0:
                    raise InvalidContext(pc)
                if start != 0:
                    break
                pc = _increment(pc, limit, EvalPCOverflow)
            elif isinstance(i, inst.Dollar):
                if sp == len(symbols):
                    return True
                break
            elif isinstance(i, inst.Match):
                return True
            elif isinstance(i, inst.Jump):
                pc = i.dest
            elif isinstance(i, inst.Split):
                if (pc, sp) in visited:
                    break
                visited.add((pc, sp))
                pending.append((i.dest2, sp))
                pc = i.dest1
            else:
                raise AssertionError(f"{i} is not a recognized instruction!")

    return False

def search(line: str, program: list[inst.Instruction], config: Config | None = None) -> int | None:
    '''
    Tries to match at every offset of `line` in turn and returns the first offset that matches.
    '''
    for offset in range(len(line)):
        if evaluate(program, line[offset:], offset, config):
            log.debug("match at offset %d of %r", offset, line)
            return offset
    return None
