"""Entry point: run one command over SSH.

Usage:
    SSH_SHELL_HOST=example.com SSH_SHELL_LOGIN=deploy SSH_SHELL_PASSWORD=... \\
        python -m ssh_shell uname -a

Arguments are joined with spaces into the remote command line, as ssh(1)
does. The process exits with the remote exit status, or 255 when the
command could not be run.
"""

import io
import logging
import sys

from ssh_shell.config import Settings
from ssh_shell.errors import ShellError
from ssh_shell.utils.console import configure_logging

logger = logging.getLogger(__name__)

FAILURE_EXIT_CODE = 255


def main(argv: list[str] | None = None) -> int:
    """Run the command given on the command line.

    Returns:
        Exit code for the process
    """
    args = sys.argv[1:] if argv is None else argv
    settings = Settings.from_env()
    configure_logging(settings.log_level, settings.log_colors)

    if not args:
        logger.error("No command given. Usage: python -m ssh_shell COMMAND [ARGS...]")
        return 2

    try:
        shell = settings.build_shell()
    except ValueError as e:
        logger.error("Invalid connection settings: %s", e)
        return 2

    command = " ".join(args)
    stdin = io.BytesIO() if sys.stdin.isatty() else sys.stdin.buffer
    logger.info("Running %r on %s:%d", command, settings.host, settings.port)

    try:
        code = shell.exec(command, stdin, sys.stdout.buffer, sys.stderr.buffer)
    except ShellError as e:
        logger.error("Command failed: %s", e)
        return FAILURE_EXIT_CODE

    logger.debug("Command completed with exit code %d", code)
    return code


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
