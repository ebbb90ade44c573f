"""Byte plumbing between local streams and an SSH channel.

The pump and drain functions run on worker threads while a command
executes. The sinks are small file-like adapters used by the decorators.
"""

import logging
import threading
from concurrent.futures import Future
from typing import BinaryIO, Callable

import paramiko

from ssh_shell.errors import StreamError

CHUNK_SIZE = 32768


def pump_input(source: BinaryIO, channel: paramiko.Channel) -> int:
    """Copy source into the remote stdin, then send EOF.

    If the remote process exits before consuming all of its input the
    rest of source is not read.

    Returns:
        Number of bytes delivered to the channel

    Raises:
        StreamError: If reading source fails
    """
    sent = 0
    while True:
        try:
            chunk = source.read(CHUNK_SIZE)
        except (OSError, ValueError) as e:
            raise StreamError("stdin", e) from e
        if not chunk:
            break
        try:
            channel.sendall(chunk)
        except OSError:
            if channel.closed or channel.exit_status_ready():
                # remote process exited before consuming its input
                return sent
            raise
        sent += len(chunk)
    if not channel.closed:
        channel.shutdown_write()
    return sent


def start_pump(source: BinaryIO, channel: paramiko.Channel) -> Future:
    """Run pump_input on a daemon thread.

    The thread is never joined. A source that never reaches EOF stays
    blocked in read() after the command has finished, and must neither
    delay exec() nor keep the interpreter alive.

    Returns:
        Future resolved with the byte count or the pump's exception
    """
    future: Future = Future()
    future.set_running_or_notify_cancel()

    def run() -> None:
        try:
            future.set_result(pump_input(source, channel))
        except Exception as e:
            future.set_exception(e)

    threading.Thread(target=run, name="ssh-shell-stdin", daemon=True).start()
    return future


def drain_output(
    recv: Callable[[int], bytes],
    sink: BinaryIO,
    stream: str,
) -> int:
    """Copy a channel stream into sink until the channel reports EOF.

    Args:
        recv: ``channel.recv`` or ``channel.recv_stderr``
        sink: Destination for the bytes
        stream: Stream name used in error reports

    Returns:
        Number of bytes copied

    Raises:
        StreamError: If writing to sink fails
    """
    copied = 0
    while True:
        chunk = recv(CHUNK_SIZE)
        if not chunk:
            break
        try:
            sink.write(chunk)
        except (OSError, ValueError) as e:
            raise StreamError(stream, e) from e
        copied += len(chunk)
    try:
        sink.flush()
    except (OSError, ValueError) as e:
        raise StreamError(stream, e) from e
    return copied


class NullSink:
    """Writable sink that discards everything."""

    def write(self, data: bytes) -> int:
        return len(data)

    def flush(self) -> None:
        pass


class TeeSink:
    """Write every chunk to a primary sink and a mirror sink.

    Only the mirror is closed by close(); the primary belongs to the
    caller.
    """

    def __init__(self, primary: BinaryIO, mirror: "LoggingSink | BinaryIO"):
        self.primary = primary
        self.mirror = mirror

    def write(self, data: bytes) -> int:
        written = self.primary.write(data)
        self.mirror.write(data)
        return len(data) if written is None else written

    def flush(self) -> None:
        self.primary.flush()
        self.mirror.flush()

    def close(self) -> None:
        self.mirror.close()


class LoggingSink:
    """Writable sink that emits one log record per line of output.

    Bytes are buffered until a newline arrives. close() emits whatever
    partial line is left, so for text in the sink's encoding the records
    joined with newlines reproduce the bytes written, minus one trailing
    newline. Undecodable bytes are replaced in the log.
    """

    def __init__(self, logger: logging.Logger, level: int, encoding: str = "utf-8"):
        """Initialize logging sink.

        Args:
            logger: Logger receiving the lines
            level: Level of every emitted record
            encoding: Encoding used to decode lines for the log
        """
        self.logger = logger
        self.level = level
        self.encoding = encoding
        self._buffer = bytearray()
        self.closed = False

    def write(self, data: bytes) -> int:
        if self.closed:
            raise ValueError("write to closed LoggingSink")
        self._buffer.extend(data)
        while True:
            newline = self._buffer.find(b"\n")
            if newline < 0:
                break
            line = bytes(self._buffer[:newline])
            del self._buffer[: newline + 1]
            self._emit(line)
        return len(data)

    def flush(self) -> None:
        # Partial lines stay buffered until close()
        pass

    def close(self) -> None:
        if self.closed:
            return
        if self._buffer:
            self._emit(bytes(self._buffer))
            self._buffer.clear()
        self.closed = True

    def _emit(self, line: bytes) -> None:
        self.logger.log(self.level, "%s", line.decode(self.encoding, errors="replace"))
