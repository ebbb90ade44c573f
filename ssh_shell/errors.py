"""Failures raised by remote shells.

Every failure of a remote invocation surfaces as a subclass of
ShellError. The library exception that caused it is kept both as
``original_error`` and as ``__cause__``.
"""


class ShellError(Exception):
    """Base class for remote shell failures."""


class ConnectivityError(ShellError):
    """Cannot reach the SSH server at host:port."""

    def __init__(self, host: str, port: int, original_error: Exception):
        """Initialize connectivity error.

        Args:
            host: Host the client tried to reach
            port: Port the client tried to reach
            original_error: Exception raised by the transport layer
        """
        self.host = host
        self.port = port
        self.original_error = original_error
        super().__init__(f"Cannot connect to {host}:{port}: {original_error}")


class AuthenticationError(ShellError):
    """Server rejected the login/password pair."""

    def __init__(self, login: str, host: str, original_error: Exception):
        """Initialize authentication error.

        Args:
            login: Login that was rejected
            host: Host that rejected it
            original_error: Exception raised during user authentication
        """
        self.login = login
        self.host = host
        self.original_error = original_error
        super().__init__(
            f"Authentication failed for {login}@{host}: {original_error}"
        )


class ChannelError(ShellError):
    """Command channel could not be opened or died unexpectedly."""

    def __init__(self, host: str, reason: str):
        self.host = host
        self.reason = reason
        super().__init__(f"Channel to {host} failed: {reason}")


class CommandTimeoutError(ChannelError):
    """Remote command did not finish within the configured timeout."""

    def __init__(self, host: str, timeout: float):
        self.timeout = timeout
        super().__init__(host, f"command did not finish within {timeout}s")


class StreamError(ShellError):
    """Copying bytes between a local stream and the channel failed."""

    def __init__(self, stream: str, original_error: Exception):
        """Initialize stream error.

        Args:
            stream: Which stream failed ("stdin", "stdout" or "stderr")
            original_error: Exception raised by the local stream
        """
        self.stream = stream
        self.original_error = original_error
        super().__init__(f"Cannot copy {stream}: {original_error}")


class NonZeroExitError(ShellError):
    """Remote command finished with a non-zero exit status."""

    def __init__(self, command: str, exit_code: int):
        self.command = command
        self.exit_code = exit_code
        super().__init__(f"Command {command!r} exited with code {exit_code}")


__all__ = [
    "AuthenticationError",
    "ChannelError",
    "CommandTimeoutError",
    "ConnectivityError",
    "NonZeroExitError",
    "ShellError",
    "StreamError",
]
