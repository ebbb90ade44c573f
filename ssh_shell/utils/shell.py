"""Shell command safety utilities."""

import shlex


def escape(arg: str) -> str:
    """Quote an argument for the remote POSIX shell.

    Args:
        arg: Argument to quote

    Returns:
        Shell-safe quoted argument
    """
    return shlex.quote(arg)


def join_command(args: list[str]) -> str:
    """Build a command line from separate arguments, quoting each one.

    Args:
        args: Program followed by its arguments

    Returns:
        Command line safe to pass to Shell.exec
    """
    return " ".join(escape(arg) for arg in args)
