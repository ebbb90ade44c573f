"""Tests for SSHTarget model."""

import dataclasses

import pytest

from ssh_shell.models import CommandResult, SSHTarget


def test_ssh_target_address():
    """SSHTarget renders login@host:port."""
    target = SSHTarget(host="example.com", port=2222, login="deploy", password="x")
    assert target.address == "deploy@example.com:2222"


def test_ssh_target_is_immutable():
    """SSHTarget cannot be changed after construction."""
    target = SSHTarget("example.com", 22, "deploy", "x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        target.port = 23  # type: ignore[misc]


def test_ssh_target_hides_password_in_repr():
    target = SSHTarget("example.com", 22, "deploy", "hunter2")
    assert "hunter2" not in repr(target)
    assert "deploy" in repr(target)


@pytest.mark.parametrize("port", [0, -1, 65536, True, "22"])
def test_ssh_target_rejects_invalid_port(port):
    """Ports outside 1..65535 or of the wrong type are rejected."""
    with pytest.raises(ValueError):
        SSHTarget("example.com", port, "deploy", "x")


@pytest.mark.parametrize("port", [1, 22, 65535])
def test_ssh_target_accepts_port_bounds(port):
    assert SSHTarget("example.com", port, "deploy", "x").port == port


def test_ssh_target_rejects_empty_host_and_login():
    with pytest.raises(ValueError, match="host"):
        SSHTarget("", 22, "deploy", "x")
    with pytest.raises(ValueError, match="login"):
        SSHTarget("example.com", 22, "", "x")


def test_command_result_succeeded():
    assert CommandResult(output="", error="", returncode=0).succeeded
    assert not CommandResult(output="", error="", returncode=1).succeeded
