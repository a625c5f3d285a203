import sys
from dataclasses import dataclass

"""
Instructions:
- Char <char>
- Dot
- Caret
- Dollar
- Match
- Jump <dest>
- Split <dest1> <dest2>

Destinations are indexes into the program the instruction belongs to.
"""

# Largest value the program counter and scan pointer may take. Going past it is an overflow
# error rather than a silent wrap.
COUNTER_MAX = sys.maxsize

class Instruction:
    """
    One step of a compiled program. `code()` gives its line in the program listing.
    """
    def code(self) -> str:
        raise AssertionError(f"{type(self).__name__} has no listing form")

def address(dest: int) -> str:
    return f"{dest:04}"

@dataclass
class Char(Instruction):
    """
    Consumes the current input character if it equals `val` and fails otherwise.
    """
    val: str
    def code(self) -> str:
        return f"char {self.val}"

@dataclass
class Dot(Instruction):
    """
    Consumes any input character, failing only at the end of the input.
    """
    def code(self) -> str:
        return "dot"

@dataclass
class Caret(Instruction):
    """
    Succeeds without consuming input if matching started at the beginning of the line.
    """
    def code(self) -> str:
        return "caret"

@dataclass
class Dollar(Instruction):
    """
    Execution reaching this point at the end of the input means the input matches.
    """
    def code(self) -> str:
        return "dollar"

@dataclass
class Match(Instruction):
    """
    Ends the whole search with a successful result, whatever input is left over.
    """
    def code(self) -> str:
        return "match"

@dataclass
class Jump(Instruction):
    """
    Continues at `dest` without consuming input. Loops use it to return to their split.
    """
    dest: int
    def code(self) -> str:
        return f"jump {address(self.dest)}"

@dataclass
class Split(Instruction):
    """
    Continue execution from two different locations in the program, trying `dest1` first.
    """
    dest1: int
    dest2: int
    def code(self) -> str:
        return f"split {address(self.dest1)}, {address(self.dest2)}"

def listing(program: list[Instruction]) -> str:
    return '\n'.join(f"{address(pc)}: {i.code()}" for pc, i in enumerate(program))
