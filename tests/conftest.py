import os

import pytest

from ocs01_setup.utils.commands import (
    BuildSystem,
    CommandResult,
    ToolchainInstaller,
    VcsClient,
)
from ocs01_setup.utils.prompt import Prompter

INTERFACE_CONTENT = '{"contract": "ocs01", "methods": []}\n'


def make_project(directory):
    os.makedirs(os.path.join(directory, "EI"), exist_ok=True)
    with open(os.path.join(directory, "Cargo.toml"), "w") as f:
        f.write('[package]\nname = "ocs01-test"\n')
    with open(os.path.join(directory, "EI", "exec_interface.json"), "w") as f:
        f.write(INTERFACE_CONTENT)


class ScriptedPrompter(Prompter):
    """Answers prompts from fixed lists and remembers every question asked."""

    def __init__(self, answers=(), secrets=()):
        self.answers = list(answers)
        self.secrets = list(secrets)
        self.questions = []
        super().__init__(self._next_answer, self._next_secret)

    def _next_answer(self, question):
        self.questions.append(question)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def _next_secret(self, question):
        self.questions.append(question)
        if not self.secrets:
            raise EOFError
        return self.secrets.pop(0)


class FakeVcs(VcsClient):
    def __init__(self, success=True):
        self.success = success
        self.calls = []

    def clone(self, url, destination):
        self.calls.append((url, destination))
        if not self.success:
            return CommandResult(False, 128, "git exited with code 128")
        make_project(destination)
        return CommandResult(True, 0)


class FakeInstaller(ToolchainInstaller):
    def __init__(self, success=True):
        self.success = success
        self.calls = 0

    def install(self):
        self.calls += 1
        if not self.success:
            return CommandResult(False, 1, "sh exited with code 1")
        return CommandResult(True, 0)


class FakeBuild(BuildSystem):
    def __init__(self, success=True):
        self.success = success
        self.calls = []

    def build(self, project_dir):
        self.calls.append(project_dir)
        if not self.success:
            return CommandResult(False, 101, "cargo exited with code 101")
        return CommandResult(True, 0)


@pytest.fixture(autouse=True)
def no_log_file():
    from ocs01_setup.utils.logger import logger

    logger.set_log_file(None)
    yield
    logger.set_log_file(None)


@pytest.fixture
def project_dir(tmp_path):
    make_project(str(tmp_path))
    return str(tmp_path)
