from dataclasses import dataclass

#region types

class Construction:
    '''
    Base type for all regular expression grammar constructions.
    '''
    def children(self) -> list['Construction']:
        return []

    def label(self) -> str:
        return type(self).__name__

@dataclass
class Char(Construction):
    '''
    A single character literal to match.
    '''
    val: str

    def label(self) -> str:
        return f"Char {self.val!r}"

@dataclass
class Dot(Construction):
    '''
    Matches any single character, ex: `.`
    '''

@dataclass
class Caret(Construction):
    '''
    Matches the start of the line without consuming anything, ex: `^`
    '''

@dataclass
class Dollar(Construction):
    '''
    Matches the end of the input without consuming anything, ex: `$`
    '''

@dataclass
class Plus(Construction):
    '''
    Matches one or more occurrences, ex: `a+`
    '''
    val: Construction

    def children(self) -> list[Construction]:
        return [self.val]

@dataclass
class Star(Construction):
    '''
    Matches zero or more occurrences, ex: `a*`
    '''
    val: Construction

    def children(self) -> list[Construction]:
        return [self.val]

@dataclass
class Question(Construction):
    '''
    Matches zero or one occurrences, ex: `a?`
    '''
    val: Construction

    def children(self) -> list[Construction]:
        return [self.val]

@dataclass
class Or(Construction):
    '''
    Matches one of two alternative sub-expressions, ex: `ab|cd`
    '''
    alt1: Construction
    alt2: Construction

    def children(self) -> list[Construction]:
        return [self.alt1, self.alt2]

@dataclass
class Seq(Construction):
    '''
    Matches a sequence of sub-expressions, ex: `abc`
    '''
    val: list[Construction]

    def children(self) -> list[Construction]:
        return list(self.val)

#endregion

def render(val: Construction) -> str:
    '''
    Renders an AST as an indented tree, one node per line.
    '''
    lines: list[str] = []
    # Walk with an explicit stack so that deeply nested expressions don't hit the recursion limit.
    stack = [(val, 0)]
    while stack:
        node, depth = stack.pop()
        lines.append("  " * depth + node.label())
        for child in reversed(node.children()):
            stack.append((child, depth + 1))
    return '\n'.join(lines)
