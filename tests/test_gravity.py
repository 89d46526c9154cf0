import subprocess

import pytest

from adlistctl import gravity
from adlistctl.errors import RefreshError


def test_trigger_reload_returns_stdout(monkeypatch):
    calls = []

    def fake_run(command, **kwargs):
        calls.append((command, kwargs))
        return subprocess.CompletedProcess(command, 0, stdout="  [i] Gravity updated\n")

    monkeypatch.setattr(gravity.subprocess, "run", fake_run)

    assert gravity.trigger_reload(["/usr/local/bin/pihole", "-g"]) == "  [i] Gravity updated\n"
    command, kwargs = calls[0]
    assert command == ["/usr/local/bin/pihole", "-g"]
    assert kwargs["stdout"] == subprocess.PIPE
    assert "stderr" not in kwargs
    assert kwargs["check"] is False


def test_nonzero_exit_is_not_fatal(monkeypatch):
    monkeypatch.setattr(
        gravity.subprocess,
        "run",
        lambda command, **kwargs: subprocess.CompletedProcess(command, 1, stdout="failed\n"),
    )
    assert gravity.trigger_reload(["pihole", "-g"]) == "failed\n"


def test_stderr_reaches_the_terminal(capfd):
    output = gravity.trigger_reload(["sh", "-c", "echo ok; echo 'gravity: DB locked' >&2; exit 1"])
    assert output == "ok\n"
    assert "gravity: DB locked" in capfd.readouterr().err


def test_missing_command_raises(tmp_path):
    with pytest.raises(RefreshError):
        gravity.trigger_reload([str(tmp_path / "no-such-pihole"), "-g"])
