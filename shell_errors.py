"""
Exceptions raised by the command table and its builtins.
"""


class ShellError(Exception):
    """Base exception class for shell errors."""

    pass


class UnknownCommand(ShellError):
    """Exception raised when a line names no registered command."""

    def __init__(self, name):
        super().__init__(name)
        self.name = name


class InvalidArgument(ShellError):
    """Exception raised when a command is missing required arguments."""

    def __init__(self, usage):
        super().__init__(usage)
        self.usage = usage
