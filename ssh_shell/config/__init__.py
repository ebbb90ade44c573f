"""Configuration module for ssh-shell.

- Settings: Environment variable configuration
"""

from ssh_shell.config.settings import Settings

__all__ = ["Settings"]
