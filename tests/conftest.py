"""Shared fixtures: an in-process SSH server with password authentication.

The server runs paramiko's server mode on an OS-assigned localhost port.
It accepts exactly one login/password pair and hands every exec request
to a scriptable command handler (echo by default).
"""

import socket
import threading
import time
from collections.abc import Callable, Generator
from typing import BinaryIO

import paramiko
import pytest

LOGIN = "test"
PASSWORD = "password"

EXEC_REPLY_GRACE = 0.05

# handler(command, stdin) -> (stdout, stderr, exit status or None to omit it)
# stdin is the channel's input stream; handlers read it only if they need it
CommandHandler = Callable[[str, BinaryIO], tuple[bytes, bytes, int | None]]


def echo(command: str, stdin: BinaryIO) -> tuple[bytes, bytes, int | None]:
    """Print the command line itself and exit 0 without reading stdin."""
    return command.encode("utf-8"), b"", 0


class _ServerInterface(paramiko.ServerInterface):
    """Password-only server interface that delegates exec to the test server."""

    def __init__(self, server: "SSHTestServer") -> None:
        self.server = server

    def get_allowed_auths(self, username: str) -> str:
        return "password"

    def check_auth_password(self, username: str, password: str) -> int:
        if (username, password) == self.server.credentials:
            return paramiko.AUTH_SUCCESSFUL
        return paramiko.AUTH_FAILED

    def check_channel_request(self, kind: str, chanid: int) -> int:
        if kind == "session" and self.server.accept_sessions:
            return paramiko.OPEN_SUCCEEDED
        return paramiko.OPEN_FAILED_ADMINISTRATIVELY_PROHIBITED

    def check_channel_exec_request(self, channel: paramiko.Channel, command: bytes) -> bool:
        text = command.decode("utf-8") if isinstance(command, bytes) else command
        self.server.commands.append(text)
        threading.Thread(
            target=self.server.run_command, args=(channel, text), daemon=True
        ).start()
        return True


class SSHTestServer:
    """Throwaway SSH server for exercising clients end to end."""

    def __init__(self, host_key: paramiko.PKey, handler: CommandHandler = echo) -> None:
        self.host_key = host_key
        self.handler = handler
        self.credentials = (LOGIN, PASSWORD)
        self.accept_sessions = True
        self.commands: list[str] = []
        self.transports: list[paramiko.Transport] = []

        self._stopped = threading.Event()
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self._sock.bind(("127.0.0.1", 0))
        self._sock.listen(16)
        self._sock.settimeout(0.1)
        self.host = "127.0.0.1"
        self.port = self._sock.getsockname()[1]
        self._thread = threading.Thread(target=self._serve, daemon=True)

    @property
    def active_connections(self) -> int:
        """Number of transports still open on the server side."""
        return sum(1 for transport in self.transports if transport.is_active())

    def wait_until_idle(self, timeout: float = 5.0) -> int:
        """Wait for every server-side transport to close.

        Returns:
            Number of connections still active when the wait ended
        """
        deadline = time.monotonic() + timeout
        while self.active_connections and time.monotonic() < deadline:
            time.sleep(0.02)
        return self.active_connections

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        self._stopped.set()
        self._thread.join(timeout=5)
        for transport in self.transports:
            transport.close()
        self._sock.close()

    def run_command(self, channel: paramiko.Channel, command: str) -> None:
        """Run the handler on the channel and send its results."""
        # let the exec reply go out before the command can close the channel
        time.sleep(EXEC_REPLY_GRACE)
        try:
            stdout, stderr, status = self.handler(command, channel.makefile("rb"))
            if stdout:
                channel.sendall(stdout)
            if stderr:
                channel.sendall_stderr(stderr)
            if status is not None:
                channel.send_exit_status(status)
        except (OSError, EOFError, paramiko.SSHException):
            # client hung up while the command was running
            pass
        finally:
            channel.close()

    def _serve(self) -> None:
        while not self._stopped.is_set():
            try:
                client, _ = self._sock.accept()
            except socket.timeout:
                continue
            except OSError:
                break
            transport = paramiko.Transport(client)
            transport.add_server_key(self.host_key)
            self.transports.append(transport)
            transport.start_server(event=threading.Event(), server=_ServerInterface(self))


@pytest.fixture(scope="session")
def host_key() -> paramiko.PKey:
    """Server host key, generated once per test session."""
    return paramiko.RSAKey.generate(2048)


@pytest.fixture
def ssh_server(host_key: paramiko.PKey) -> Generator[SSHTestServer, None, None]:
    """Running echo server accepting test/password."""
    server = SSHTestServer(host_key)
    server.start()
    yield server
    server.stop()


@pytest.fixture
def free_port() -> int:
    """A localhost port with nothing listening on it."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port
