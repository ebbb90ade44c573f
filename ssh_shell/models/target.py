"""SSH connection descriptor."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SSHTarget:
    """Where to connect and which credentials to present.

    Immutable once constructed. The password is kept out of repr() so
    that targets can be logged safely.
    """

    host: str
    port: int
    login: str
    password: str = field(repr=False)

    def __post_init__(self) -> None:
        """Validate the descriptor.

        Raises:
            ValueError: If host or login is empty, or port is out of range
        """
        if not self.host:
            raise ValueError("host must not be empty")
        if not self.login:
            raise ValueError("login must not be empty")
        # bool is an int subclass but never a meaningful port
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise ValueError(f"port must be an integer, got {self.port!r}")
        if not 1 <= self.port <= 65535:
            raise ValueError(f"port must be in 1..65535, got {self.port}")

    @property
    def address(self) -> str:
        """Render the target as login@host:port."""
        return f"{self.login}@{self.host}:{self.port}"
