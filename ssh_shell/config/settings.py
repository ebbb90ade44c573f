"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field

from ssh_shell.models import SSHTarget
from ssh_shell.protocols import Shell

logger = logging.getLogger(__name__)

PREFIX = "SSH_SHELL_"


@dataclass
class Settings:
    """Application settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Connection descriptor
    host: str = field(default="127.0.0.1")
    port: int = field(default=22)
    login: str = field(default="")
    password: str = field(default="", repr=False)

    # Timeouts (None waits indefinitely)
    connect_timeout: float | None = field(default=None)
    command_timeout: float | None = field(default=None)

    # Host key verification (None accepts unknown keys)
    known_hosts: str | None = field(default=None)

    # Logging
    verbose: bool = field(default=False)
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from SSH_SHELL_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            host=os.getenv(f"{PREFIX}HOST", "127.0.0.1"),
            port=cls._get_int(f"{PREFIX}PORT", 22),
            login=os.getenv(f"{PREFIX}LOGIN", ""),
            password=os.getenv(f"{PREFIX}PASSWORD", ""),
            connect_timeout=cls._get_float(f"{PREFIX}CONNECT_TIMEOUT"),
            command_timeout=cls._get_float(f"{PREFIX}COMMAND_TIMEOUT"),
            known_hosts=os.getenv(f"{PREFIX}KNOWN_HOSTS") or None,
            verbose=cls._get_bool(f"{PREFIX}VERBOSE", False),
            log_level=os.getenv(f"{PREFIX}LOG_LEVEL", "INFO").upper(),
            log_colors=cls._get_bool(f"{PREFIX}LOG_COLORS", True),
        )

    def target(self) -> SSHTarget:
        """Build the connection descriptor.

        Raises:
            ValueError: If host, login or port is invalid
        """
        return SSHTarget(
            host=self.host,
            port=self.port,
            login=self.login,
            password=self.password,
        )

    def build_shell(self) -> Shell:
        """Build the password shell described by these settings.

        Returns:
            SSHByPassword, wrapped in Verbose when verbose is on
        """
        from ssh_shell.services import SSHByPassword, Verbose

        shell: Shell = SSHByPassword.from_target(
            self.target(),
            connect_timeout=self.connect_timeout,
            timeout=self.command_timeout,
            known_hosts=self.known_hosts,
        )
        if self.verbose:
            shell = Verbose(shell)
        return shell

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Get integer from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s, using default %d", key, value, default)
            return default

    @staticmethod
    def _get_float(key: str) -> float | None:
        """Get a positive number of seconds from environment.

        Returns:
            Float value, or None if unset, empty or invalid
        """
        value = os.getenv(key, "").strip()
        if not value:
            return None

        try:
            seconds = float(value)
        except ValueError:
            logger.warning("Invalid number for %s: %s, ignoring", key, value)
            return None
        if seconds <= 0:
            logger.warning("%s must be > 0, got %s, ignoring", key, value)
            return None
        return seconds

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")
