#!/usr/bin/env python3
# registry.py - command table and session state for fsshell

import os

import commands
from shell_errors import InvalidArgument, UnknownCommand


class Session:
    """Per-shell state: the working directory and the command table."""

    def __init__(self, registry=None):
        self.cwd = os.getcwd()
        self.registry = registry

    def chdir(self, path):
        # cwd only moves once os.chdir succeeds
        os.chdir(path)
        self.cwd = os.getcwd()


class Command:
    def __init__(self, name, func, usage="", summary="", min_args=0):
        self.name = name
        self.func = func
        self.usage = usage or name
        self.summary = summary
        self.min_args = min_args

    def execute(self, session, args):
        if len(args) < self.min_args:
            raise InvalidArgument(self.usage)
        self.func(session, args)

    def __repr__(self):
        return f"Command({self.name!r})"


class CommandRegistry:
    def __init__(self):
        self._commands = {}

    def register(self, name, func, usage="", summary="", min_args=0):
        cmd = Command(name, func, usage, summary, min_args)
        self._commands[name] = cmd
        return cmd

    def get(self, name):
        return self._commands.get(name)

    def dispatch(self, name, args, session):
        cmd = self.get(name)
        if cmd is None:
            raise UnknownCommand(name)
        cmd.execute(session, list(args))

    def names(self):
        return list(self._commands)

    def __contains__(self, name):
        return name in self._commands

    def __iter__(self):
        return iter(self._commands.values())

    def __len__(self):
        return len(self._commands)


def build_registry():
    reg = CommandRegistry()

    reg.register("ls", commands.list_directory,
                 "ls [-a] [dir]", "List directory contents")
    reg.register("cd", commands.change_directory,
                 "cd <path>", "Change directory", min_args=1)
    reg.register("pwd", commands.print_working_directory,
                 "pwd", "Print working directory")
    reg.register("mkdir", commands.make_directory,
                 "mkdir <dir>", "Create directory", min_args=1)
    reg.register("rm", commands.remove,
                 "rm [-r] <path>", "Remove file/directory", min_args=1)
    reg.register("cp", commands.copy_file,
                 "cp <src> <dst>", "Copy file/directory", min_args=2)
    reg.register("mv", commands.move_file,
                 "mv <src> <dst>", "Move/rename file", min_args=2)
    reg.register("touch", commands.create_file,
                 "touch <file>", "Create empty file", min_args=1)
    reg.register("cat", commands.cat_command,
                 "cat <file>", "Display file content", min_args=1)
    reg.register("echo", commands.echo,
                 "echo [> file]", "Print/write text")
    reg.register("clear", commands.clear_screen,
                 "clear", "Clear screen")
    reg.register("help", commands.show_help,
                 "help", "Show this help")

    return reg
