import logging
import sys

from . import compiler, runner
from .exceptions import RegexError

def main():
    logging.basicConfig(level=logging.WARNING)
    prog = sys.argv[0]
    if len(sys.argv) != 3:
        print(f"Usage: {prog} <regex> <file>", file=sys.stderr)
        sys.exit(1)

    regex, path = sys.argv[1], sys.argv[2]
    try:
        compiler.explain(regex)
        program = compiler.compile_regex(regex)
        with open(path, "r") as f:
            for lineno, line in enumerate(f, start=1):
                line = line.rstrip('\n')
                offset = runner.search(line, program)
                if offset is not None:
                    print(f"{path}:{lineno}:{offset}: {line}")
    except (RegexError, OSError) as e:
        print(f"{prog}: error: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == '__main__':
    main()
