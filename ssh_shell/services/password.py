"""SSH shell authenticated by login and password.

Each call to exec() opens its own transport, runs exactly one command on
a fresh session channel and tears the transport down again, whatever the
outcome. Nothing is pooled or retried.
"""

import time
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from typing import BinaryIO

import paramiko

from ssh_shell.errors import (
    AuthenticationError,
    ChannelError,
    CommandTimeoutError,
    ConnectivityError,
    ShellError,
)
from ssh_shell.models import SSHTarget
from ssh_shell.services.streams import drain_output, start_pump


class SSHByPassword:
    """Shell that runs commands over SSH using password authentication."""

    def __init__(
        self,
        host: str,
        port: int,
        login: str,
        password: str,
        *,
        connect_timeout: float | None = None,
        timeout: float | None = None,
        known_hosts: str | None = None,
    ) -> None:
        """Initialize the shell.

        Args:
            host: SSH server hostname or IP
            port: SSH server port (1..65535)
            login: User to authenticate as
            password: Password for login
            connect_timeout: Seconds allowed for TCP connect, banner and
                authentication, or None to wait indefinitely
            timeout: Seconds allowed for the command to finish, or None
                to wait indefinitely
            known_hosts: Path to a known_hosts file; when given, servers
                whose key is not listed there are rejected

        Raises:
            ValueError: If the connection descriptor is invalid
        """
        self.target = SSHTarget(host=host, port=port, login=login, password=password)
        self.connect_timeout = connect_timeout
        self.timeout = timeout
        self.known_hosts = known_hosts

    @classmethod
    def from_target(cls, target: SSHTarget, **kwargs: object) -> "SSHByPassword":
        """Create a shell for an existing connection descriptor."""
        return cls(target.host, target.port, target.login, target.password, **kwargs)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"SSHByPassword({self.target.address})"

    def exec(
        self,
        command: str,
        stdin: BinaryIO,
        stdout: BinaryIO,
        stderr: BinaryIO,
    ) -> int:
        """Run command remotely and return its exit status.

        stdin is pumped into the remote process while its stdout and
        stderr are drained into the given sinks, all concurrently. The call
        returns once the command has exited, even if stdin has not reached
        EOF; unread input is dropped.

        Raises:
            ConnectivityError: If the server cannot be reached
            AuthenticationError: If the credentials are rejected
            ChannelError: If the command channel fails or times out
            StreamError: If a local stream cannot be read or written
        """
        client = self._client()
        try:
            transport = self._connect(client)
            channel = self._open_channel(transport, command)
            with channel:
                return self._communicate(transport, channel, stdin, stdout, stderr)
        finally:
            client.close()

    def _client(self) -> paramiko.SSHClient:
        client = paramiko.SSHClient()
        if self.known_hosts is None:
            client.set_missing_host_key_policy(paramiko.AutoAddPolicy())
        else:
            client.load_host_keys(self.known_hosts)
            client.set_missing_host_key_policy(paramiko.RejectPolicy())
        return client

    def _connect(self, client: paramiko.SSHClient) -> paramiko.Transport:
        target = self.target
        try:
            client.connect(
                hostname=target.host,
                port=target.port,
                username=target.login,
                password=target.password,
                timeout=self.connect_timeout,
                banner_timeout=self.connect_timeout,
                auth_timeout=self.connect_timeout,
                look_for_keys=False,
                allow_agent=False,
            )
        except paramiko.AuthenticationException as e:
            raise AuthenticationError(target.login, target.host, e) from e
        except (paramiko.SSHException, OSError, EOFError) as e:
            raise ConnectivityError(target.host, target.port, e) from e

        transport = client.get_transport()
        if transport is None or not transport.is_active():
            raise ConnectivityError(
                target.host, target.port, EOFError("transport closed after login")
            )
        return transport

    def _open_channel(self, transport: paramiko.Transport, command: str) -> paramiko.Channel:
        try:
            channel = transport.open_session(timeout=self.connect_timeout)
        except (paramiko.SSHException, OSError, EOFError) as e:
            raise ChannelError(self.target.host, f"cannot open session: {e}") from e
        try:
            channel.exec_command(command)
        except (paramiko.SSHException, OSError, EOFError) as e:
            channel.close()
            raise ChannelError(self.target.host, f"exec refused: {e}") from e
        return channel

    def _communicate(
        self,
        transport: paramiko.Transport,
        channel: paramiko.Channel,
        stdin: BinaryIO,
        stdout: BinaryIO,
        stderr: BinaryIO,
    ) -> int:
        host = self.target.host
        deadline = None if self.timeout is None else time.monotonic() + self.timeout

        def remaining() -> float | None:
            return None if deadline is None else max(0.0, deadline - time.monotonic())

        def stop_on_failure(flow: Future) -> None:
            # a failed pump never sends EOF; closing the transport ends the drains
            if flow.exception() is not None:
                transport.close()

        pump = start_pump(stdin, channel)
        pump.add_done_callback(stop_on_failure)

        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="ssh-shell") as pool:
            drains = [
                pool.submit(drain_output, channel.recv, stdout, "stdout"),
                pool.submit(drain_output, channel.recv_stderr, stderr, "stderr"),
            ]
            _, pending = wait(drains, timeout=remaining(), return_when=FIRST_EXCEPTION)
            flows = [pump, *drains]
            failures = [
                flow.exception() for flow in flows if flow.done() and flow.exception() is not None
            ]
            if failures or pending:
                # closing the transport unblocks every pending recv/send
                transport.close()
            if failures:
                self._raise_relay_failure(failures[0])
            if pending:
                raise CommandTimeoutError(host, self.timeout)  # type: ignore[arg-type]

        if not channel.status_event.wait(remaining()):
            transport.close()
            raise CommandTimeoutError(host, self.timeout)  # type: ignore[arg-type]

        status = channel.recv_exit_status()
        if status < 0:
            raise ChannelError(host, "channel closed without an exit status")
        return status

    def _raise_relay_failure(self, error: BaseException) -> None:
        if isinstance(error, ShellError):
            raise error
        if isinstance(error, (paramiko.SSHException, OSError, EOFError)):
            raise ChannelError(self.target.host, f"stream relay failed: {error}") from error
        raise error
