"""CLI entry point for the Lox interpreter.

Usage:
    python -m lox [-v|-vv] <script>
    python -m lox [-v|-vv]

Options:
  -v            Increase debug verbosity (can be repeated)

With a script the whole file is run once. Exit status is 65 when the
script has a scan or parse error, 70 when it stops on a runtime error and
66 when the file does not exist. Without a script an interactive prompt
is started; every line runs in the same interpreter, and a syntax error
on one line does not affect the next.

Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, TextIO

from .diagnostics import Diagnostics
from .interpreter import Interpreter, run_program

EXIT_USAGE = 64
EXIT_DATAERR = 65
EXIT_NOINPUT = 66
EXIT_SOFTWARE = 70


def run_file(path: Path, interpreter: Interpreter) -> int:
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        source = f.read()
    diagnostics = run_program(source, interpreter)
    if diagnostics.had_error:
        return EXIT_DATAERR
    if diagnostics.had_runtime_error:
        return EXIT_SOFTWARE
    return 0


def run_prompt(interpreter: Interpreter, stdin: Optional[TextIO] = None) -> int:
    stdin = stdin if stdin is not None else sys.stdin
    while True:
        print('> ', end='', flush=True)
        line = stdin.readline()
        if not line:
            print()
            break
        run_program(line, interpreter)
        interpreter.diagnostics.reset()
    return 0


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(prog='lox', description='Lox language interpreter')
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('script', nargs='?', help='Lox script to execute; omit for an interactive prompt')
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse exits with 2; keep the conventional usage code
        if e.code:
            sys.exit(EXIT_USAGE)
        raise

    interpreter = Interpreter(Diagnostics(), debug_level=args.v)
    try:
        if args.script:
            script = Path(args.script)
            if not script.exists():
                print(f"Error: file {script} not found", file=sys.stderr)
                sys.exit(EXIT_NOINPUT)
            status = run_file(script, interpreter)
        else:
            status = run_prompt(interpreter)
    finally:
        interpreter.close()
    if status:
        sys.exit(status)


if __name__ == '__main__':
    main()
