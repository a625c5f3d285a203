import logging
from enum import Enum, auto

from .syntax import *
from .exceptions import InvalidEscape, InvalidRightParen, NoPrev, NoRightParen, Empty

log = logging.getLogger(__name__)

_escapable_chars = ['\\', '(', ')', '|', '+', '*', '?']
_quantifiers = {'+': Plus, '*': Star, '?': Question}

class _State(Enum):
    NORMAL = auto()
    ESCAPE = auto()

def fold_or(branches: list[Construction]) -> Construction | None:
    '''
    Folds alternative branches into a right-nested alternation, ex: `a|b|c` becomes
    `Or(a, Or(b, c))`. Returns None when there are no branches.
    '''
    if len(branches) == 0:
        return None
    folded = branches[-1]
    for branch in reversed(branches[:-1]):
        folded = Or(branch, folded)
    return folded

def _apply_quantifier(seq: list[Construction], c: str, pos: int):
    if len(seq) == 0:
        raise NoPrev(pos)
    seq.append(_quantifiers[c](seq.pop()))

def parse(regex: str) -> Construction:
    '''
    Parse an AST for a regex from a string.
    '''
    seq: list[Construction] = []
    branches: list[Construction] = []
    # Saved (seq, branches) contexts of the enclosing groups.
    stack: list[tuple[list[Construction], list[Construction]]] = []
    state = _State.NORMAL

    for index, c in enumerate(regex):
        if state is _State.ESCAPE:
            if c not in _escapable_chars:
                raise InvalidEscape(index, c)
            seq.append(Char(c))
            state = _State.NORMAL
            continue

        match c:
            case '+' | '*' | '?':
                _apply_quantifier(seq, c, index)
            case '(':
                stack.append((seq, branches))
                seq, branches = [], []
            case ')':
                if len(stack) == 0:
                    raise InvalidRightParen(index)
                prev_seq, prev_branches = stack.pop()
                # An empty group like `()` adds nothing.
                if len(seq) != 0:
                    branches.append(Seq(seq))
                group = fold_or(branches)
                if group is not None:
                    prev_seq.append(group)
                seq, branches = prev_seq, prev_branches
            case '|':
                if len(seq) == 0:
                    raise NoPrev(index)
                branches.append(Seq(seq))
                seq = []
            case '\\':
                state = _State.ESCAPE
            case '.':
                seq.append(Dot())
            case '^':
                seq.append(Caret())
            case '$':
                seq.append(Dollar())
            case _:
                seq.append(Char(c))

    if state is _State.ESCAPE:
        raise InvalidEscape(len(regex), "")
    if len(stack) != 0:
        raise NoRightParen()

    if len(seq) != 0:
        branches.append(Seq(seq))
    ast = fold_or(branches)
    if ast is None:
        raise Empty()

    log.debug("parsed %r into %s", regex, type(ast).__name__)
    return ast
