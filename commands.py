#!/usr/bin/env python3
# commands.py - builtins for fsshell

import os
import shutil
import sys

from shell_errors import InvalidArgument

# Home the cursor after wiping the screen; understood by VT100-compatible terminals
CLEAR_SEQUENCE = "\033[2J\033[H"

# -----------------------
# Builtin commands
# Each function accepts the session and the tokens that followed the command name
# -----------------------
def list_directory(session, args):
    show_hidden = "-a" in args
    paths = [a for a in args if a != "-a"]
    path = os.path.join(session.cwd, paths[0]) if paths else session.cwd
    with os.scandir(path) as it:
        entries = sorted(it, key=lambda e: e.name)
    for e in entries:
        if not show_hidden and e.name.startswith("."):
            continue
        kind = "[DIR]" if e.is_dir() else "[FILE]"
        print(f"{kind} {e.name}")

def change_directory(session, args):
    path = args[0]
    try:
        session.chdir(path)
    except OSError:
        print(f"Error: Invalid directory: {path}", file=sys.stderr)

def print_working_directory(session, args):
    print(os.getcwd())

def make_directory(session, args):
    os.makedirs(args[0], exist_ok=True)

def remove(session, args):
    recursive = "-r" in args
    targets = [a for a in args if a != "-r"]
    if not targets:
        raise InvalidArgument("rm [-r] <path>")
    for path in targets:
        # a missing path is skipped and the rest are still removed
        if not os.path.lexists(path):
            continue
        if os.path.isdir(path) and not os.path.islink(path):
            if recursive:
                shutil.rmtree(path)
            else:
                os.rmdir(path)
        else:
            os.remove(path)

def copy_file(session, args):
    source, destination = args[0], args[1]
    if os.path.isdir(source):
        shutil.copytree(source, destination, dirs_exist_ok=True)
    else:
        shutil.copy2(source, destination)

def move_file(session, args):
    shutil.move(args[0], args[1])

def create_file(session, args):
    """Create an empty file, or bump the mtime of one that already exists.

    The file is opened for append so existing contents survive.
    """
    path = args[0]
    with open(path, "a", encoding="utf-8"):
        pass
    os.utime(path, None)

def cat_command(session, args):
    with open(args[0], "r", encoding="utf-8", errors="replace") as f:
        content = f.read()
    print(content)

def echo(session, args):
    """Print the tokens, or write them to a file when the line has `> file`.

    Redirected output keeps one trailing space after every token and no
    newline. Tokens after the filename are ignored. No tokens, no output.
    """
    if not args:
        return
    if ">" in args:
        i = args.index(">")
        if i + 1 < len(args):
            with open(args[i + 1], "w", encoding="utf-8") as f:
                f.write("".join(tok + " " for tok in args[:i]))
            return
    print(" ".join(args))

def clear_screen(session, args):
    sys.stdout.write(CLEAR_SEQUENCE)
    sys.stdout.flush()

def show_help(session, args):
    print("Supported commands:")
    if session.registry is not None:
        for cmd in session.registry:
            print(f"{cmd.usage:<15}{cmd.summary}")
    print(f"{'exit':<15}Quit terminal")
