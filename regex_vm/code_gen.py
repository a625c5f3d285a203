import logging
from functools import singledispatch
from typing import Callable

from . import syntax
from .instruction import *
from .exceptions import CodeGenPCOverflow, FailOr, FailStar, FailQuestion

log = logging.getLogger(__name__)

class Generator:
    '''
    Holds the program being generated. Targets that aren't known yet are emitted as placeholders
    and patched once the code they point past has been generated.

    Sub-expressions aren't generated recursively. Each node's code generator schedules its
    children along with callbacks that emit the code following them, and `generate` works through
    that schedule, so nesting depth isn't limited by the Python stack.
    '''
    def __init__(self, counter_max: int = COUNTER_MAX):
        self.pc = 0
        self.insts: list[Instruction] = []
        self.counter_max = counter_max
        self.work: list[syntax.Construction | Callable[[], None]] = []

    def emit(self, inst: Instruction) -> int:
        '''
        Appends an instruction and returns its address.
        '''
        if self.pc >= self.counter_max:
            raise CodeGenPCOverflow()
        addr = self.pc
        self.insts.append(inst)
        self.pc += 1
        return addr

    def patch(self, addr: int, expected: type, error: type, **operands):
        inst = self.insts[addr] if addr < len(self.insts) else None
        if not isinstance(inst, expected):
            raise error()
        for name, dest in operands.items():
            setattr(inst, name, dest)

    def schedule(self, *steps: syntax.Construction | Callable[[], None]):
        '''
        Queues sub-expressions and callbacks to run, in order, before anything queued earlier.
        '''
        self.work.extend(reversed(steps))

    def generate(self, val: syntax.Construction):
        self.schedule(val)
        while self.work:
            step = self.work.pop()
            if isinstance(step, syntax.Construction):
                gen_expr(step, self)
            else:
                step()

def compile(val: syntax.Construction, counter_max: int = COUNTER_MAX) -> list[Instruction]:
    gen = Generator(counter_max)
    gen.generate(val)

    # Stick a match at the end to represent a successful match.
    gen.emit(Match())
    log.debug("generated %d instructions", len(gen.insts))
    return gen.insts

@singledispatch
def gen_expr(val, gen: Generator):
    raise AssertionError(f"Unexpected type for val {type(val).__name__}")

@gen_expr.register
def _(val: syntax.Char, gen: Generator):
    gen.emit(Char(val.val))

@gen_expr.register
def _(_: syntax.Dot, gen: Generator):
    gen.emit(Dot())

@gen_expr.register
def _(_: syntax.Caret, gen: Generator):
    gen.emit(Caret())

@gen_expr.register
def _(_: syntax.Dollar, gen: Generator):
    gen.emit(Dollar())

@gen_expr.register
def _(val: syntax.Seq, gen: Generator):
    gen.schedule(*val.val)

@gen_expr.register
def _(val: syntax.Or, gen: Generator):
    """
        Split L1, L2
    L1: code for alt1
        Jump L3
    L2: code for alt2
    L3:
    """
    split_addr = gen.emit(Split(gen.pc + 1, 0))
    jump_addr = 0

    def jump_over_alt2():
        nonlocal jump_addr
        jump_addr = gen.emit(Jump(0))
        gen.patch(split_addr, Split, FailOr, dest2=gen.pc)

    def patch_exit():
        gen.patch(jump_addr, Jump, FailOr, dest=gen.pc)

    gen.schedule(val.alt1, jump_over_alt2, val.alt2, patch_exit)

@gen_expr.register
def _(val: syntax.Question, gen: Generator):
    """
        Split L1, L2
    L1: code for val
    L2:
    """
    split_addr = gen.emit(Split(gen.pc + 1, 0))

    def patch_skip():
        gen.patch(split_addr, Split, FailQuestion, dest2=gen.pc)

    gen.schedule(val.val, patch_skip)

@gen_expr.register
def _(val: syntax.Plus, gen: Generator):
    """
    L1: code for val
        Split L1, L2
    L2:
    """
    l1 = gen.pc

    def loop_back():
        gen.emit(Split(l1, gen.pc + 1))

    gen.schedule(val.val, loop_back)

@gen_expr.register
def _(val: syntax.Star, gen: Generator):
    """
    L1: Split L2, L3
    L2: code for val
        Jump L1
    L3:
    """
    l1 = gen.emit(Split(gen.pc + 1, 0))

    def loop_back():
        gen.emit(Jump(l1))
        gen.patch(l1, Split, FailStar, dest2=gen.pc)

    gen.schedule(val.val, loop_back)
