from typing import List

import pytest

from vclass.persistence import TextRosterRepository
from vclass.service import RosterStore
from vclass.view import ConsoleRosterView


@pytest.fixture
def scripted_input(monkeypatch):
    """Replaces input() with a fixed list of answers and records the prompts."""

    def feed(*answers: str) -> List[str]:
        prompts: List[str] = []
        remaining = iter(answers)

        def fake_input(prompt: str = "") -> str:
            prompts.append(prompt)
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)
        return prompts

    return feed


@pytest.fixture
def repo(tmp_path):
    return TextRosterRepository(
        str(tmp_path / "classes.txt"), str(tmp_path / "students.txt")
    )


@pytest.fixture
def store(repo):
    return RosterStore(repo)


@pytest.fixture
def view():
    return ConsoleRosterView(styling=False, interactive=False)
