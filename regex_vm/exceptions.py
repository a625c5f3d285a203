"""
Errors raised while parsing, compiling or evaluating a regex.

Each stage has its own family. A regex that simply does not match is not an
error; the evaluator returns False for that.
"""


class RegexError(Exception):
    """Base class for every error raised by regex_vm."""


#region parse errors

class ParseError(RegexError):
    """The regex text is malformed."""


class InvalidEscape(ParseError):
    def __init__(self, position: int, char: str):
        self.position = position
        self.char = char
        super().__init__(f"invalid escape: pos = {position}, char = '{char}'")


class InvalidRightParen(ParseError):
    def __init__(self, position: int):
        self.position = position
        super().__init__(f"invalid right parenthesis: pos = {position}")


class NoPrev(ParseError):
    """`+`, `*`, `?` or `|` with nothing before it."""
    def __init__(self, position: int):
        self.position = position
        super().__init__(f"no previous expression: pos = {position}")


class NoRightParen(ParseError):
    def __init__(self):
        super().__init__("no right parenthesis")


class Empty(ParseError):
    def __init__(self):
        super().__init__("empty expression")

#endregion

#region code generation errors

class CodeGenError(RegexError):
    """
    Raised by the code generator. Apart from CodeGenPCOverflow these only happen when the
    generator itself is broken.
    """


class CodeGenPCOverflow(CodeGenError):
    def __init__(self):
        super().__init__("program counter overflow while generating code")


class FailOr(CodeGenError):
    def __init__(self):
        super().__init__("could not patch the targets of an alternation")


class FailStar(CodeGenError):
    def __init__(self):
        super().__init__("could not patch the exit target of a star loop")


class FailQuestion(CodeGenError):
    def __init__(self):
        super().__init__("could not patch the skip target of an option")

#endregion

#region evaluation errors

class EvalError(RegexError):
    """Raised by the evaluator. A correctly generated program never triggers these."""


class EvalPCOverflow(EvalError):
    def __init__(self):
        super().__init__("program counter overflow during evaluation")


class SPOverflow(EvalError):
    def __init__(self):
        super().__init__("scan pointer overflow during evaluation")


class InvalidPC(EvalError):
    def __init__(self, pc: int):
        self.pc = pc
        super().__init__(f"program counter out of range: pc = {pc}")


class InvalidContext(EvalError):
    """A `^` anchor somewhere other than the start of the program."""
    def __init__(self, pc: int):
        self.pc = pc
        super().__init__(f"'^' is only supported at the start of the regex: pc = {pc}")


class StepLimitExceeded(EvalError):
    def __init__(self, max_steps: int):
        self.max_steps = max_steps
        super().__init__(f"evaluation exceeded {max_steps} steps")

#endregion


class UnsupportedStrategy(RegexError):
    """The requested search strategy is not implemented."""
    def __init__(self, strategy):
        self.strategy = strategy
        super().__init__(f"unsupported search strategy: {strategy}")
