import os

import pytest

from conftest import FakeInstaller, ScriptedPrompter
from ocs01_setup.utils import prober
from ocs01_setup.utils.custom_exceptions import (
    ExternalCommandError,
    MissingPrerequisiteError,
)
from ocs01_setup.utils.toolchain import cargo_bin_dir, ensure_toolchain, refresh_path


@pytest.fixture
def environ(tmp_path):
    return {"PATH": "/usr/bin:/bin", "CARGO_HOME": str(tmp_path / "cargo")}


def test_installed_toolchain_skips_prompt(monkeypatch, environ):
    monkeypatch.setattr(prober, "has_tool", lambda name: True)
    prompter = ScriptedPrompter()
    installer = FakeInstaller()

    ensure_toolchain(prompter, installer, environ)

    assert prompter.questions == []
    assert installer.calls == 0


def test_missing_toolchain_installed_by_default(monkeypatch, environ):
    monkeypatch.setattr(prober, "has_tool", lambda name: False)
    installer = FakeInstaller()

    ensure_toolchain(ScriptedPrompter(answers=[""]), installer, environ)

    assert installer.calls == 1
    assert environ["PATH"].split(os.pathsep)[0] == os.path.join(
        environ["CARGO_HOME"], "bin"
    )


def test_missing_toolchain_declined(monkeypatch, environ):
    monkeypatch.setattr(prober, "has_tool", lambda name: False)
    installer = FakeInstaller()

    with pytest.raises(MissingPrerequisiteError, match="Rust is required") as exc_info:
        ensure_toolchain(ScriptedPrompter(answers=["n"]), installer, environ)

    assert installer.calls == 0
    assert "https://rustup.rs/" in exc_info.value.hints[0]
    assert environ["PATH"] == "/usr/bin:/bin"


def test_failed_installation_is_fatal(monkeypatch, environ):
    monkeypatch.setattr(prober, "has_tool", lambda name: False)

    with pytest.raises(ExternalCommandError, match="Rust installation failed"):
        ensure_toolchain(ScriptedPrompter(answers=["y"]), FakeInstaller(False), environ)

    assert environ["PATH"] == "/usr/bin:/bin"


def test_refresh_path_is_idempotent(environ):
    refresh_path(environ)
    refresh_path(environ)

    entries = environ["PATH"].split(os.pathsep)
    assert entries.count(cargo_bin_dir(environ)) == 1
    assert entries[1:] == ["/usr/bin", "/bin"]


def test_cargo_bin_dir_defaults_to_home(monkeypatch):
    monkeypatch.setenv("HOME", "/home/operator")

    assert cargo_bin_dir({}) == os.path.join("/home/operator", ".cargo", "bin")
