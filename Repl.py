#!/usr/bin/env python3
# Repl.py - interactive loop for fsshell: prompt, tokenize, dispatch, report
import glob
import os
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.history import InMemoryHistory

from shell_errors import InvalidArgument, UnknownCommand
from registry import Session, build_registry

COLOR_PROMPT = '\033[32m'
COLOR_RESET = '\033[0m'

EXIT_COMMAND = "exit"

# status codes returned by process_line; the process itself always exits 0
STATUS_OK = 0
STATUS_ERROR = 1
STATUS_USAGE = 2
STATUS_NOT_FOUND = 127

# script mode flag -> True when stdin is not a terminal; the prompt is written uncoloured
SCRIPT_MODE = False

def prompt(session, color=True):
    text = f"{session.cwd} $ "
    if color:
        return f"{COLOR_PROMPT}{text}{COLOR_RESET}"
    return text

# -----------------------
# Utilities
# -----------------------
def tokenize(line: str):
    # whitespace only: no quoting, escaping or expansion
    return line.split()


class ShellCompleter(Completer):
    def __init__(self, registry):
        self.registry = registry

    def get_completions(self, document, complete_event):
        word_before_cursor = document.get_word_before_cursor(WORD=True)
        word_len = len(word_before_cursor)
        text = document.text_before_cursor.strip()

        # 1. Command names for the first word
        if not text or text == word_before_cursor:
            for name in self.registry.names() + [EXIT_COMMAND]:
                if name.startswith(word_before_cursor):
                    yield Completion(name, -word_len)
            return

        # 2. File paths for everything after it
        if word_before_cursor:
            for path in sorted(glob.glob(glob.escape(word_before_cursor) + '*')):
                display = path
                if os.path.isdir(path):
                    display += os.sep
                yield Completion(display, -word_len)

# -----------------------
# Line processor
# -----------------------
def process_line(line: str, session, registry) -> int:
    argv = tokenize(line)
    if not argv:
        return STATUS_OK
    cmd, args = argv[0], argv[1:]
    try:
        registry.dispatch(cmd, args, session)
    except UnknownCommand as e:
        print(f"Command not found: {e.name}", file=sys.stderr)
        return STATUS_NOT_FOUND
    except InvalidArgument as e:
        print(f"usage: {e.usage}", file=sys.stderr)
        return STATUS_USAGE
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return STATUS_ERROR
    return STATUS_OK

# -----------------------
# Main loop
# -----------------------
def repl(read_line, session, registry):
    """Run the loop until `exit` or end of input.

    `read_line` takes the prompt text and returns one line without its
    newline, raising EOFError when input is exhausted.
    """
    while True:
        try:
            line = read_line(prompt(session, color=not SCRIPT_MODE))
        except KeyboardInterrupt:
            print()
            continue
        except EOFError:
            break
        if line == EXIT_COMMAND:
            break
        process_line(line, session, registry)
    return 0

def _read_script_line(text):
    return input(text).rstrip("\r")

def main():
    global SCRIPT_MODE
    registry = build_registry()
    session = Session(registry)

    if not sys.stdin.isatty():
        SCRIPT_MODE = True
        return repl(_read_script_line, session, registry)

    prompt_session = PromptSession(history=InMemoryHistory(),
                                   completer=ShellCompleter(registry))
    return repl(lambda text: prompt_session.prompt(ANSI(text)), session, registry)

if __name__ == "__main__":
    sys.exit(main())
