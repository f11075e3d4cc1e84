"""Unit tests for lms.cli.shell: the interactive menu."""
from __future__ import annotations

import io
from collections.abc import Callable, Iterable
from pathlib import Path

import click
import pytest
from rich.console import Console

from lms.cli.shell import PatronShell
from lms.core.patron import Patron
from lms.registry import PatronRegistry


class ScriptedPrompt:
    """Feeds canned answers and records the labels it was asked for."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.labels: list[str] = []

    def __call__(self, label: str) -> str:
        self.labels.append(label)
        if not self._answers:
            raise click.Abort()
        return self._answers.pop(0)


def _shell(
    answers: Iterable[str], registry: PatronRegistry | None = None
) -> tuple[PatronShell, PatronRegistry, io.StringIO, ScriptedPrompt]:
    registry = registry if registry is not None else PatronRegistry()
    out = io.StringIO()
    prompt = ScriptedPrompt(answers)
    shell = PatronShell(registry, Console(file=out, width=200), prompt=prompt)
    return shell, registry, out, prompt


class TestRun:
    def test_banner_and_exit(self) -> None:
        shell, _, out, _ = _shell(["", "5"])
        shell.run()
        text = out.getvalue()
        assert "Library Management System (LMS) - CLI" in text
        assert "1) Load patrons from file" in text
        assert text.rstrip().endswith("Exiting LMS. Goodbye!")

    def test_startup_load(self, write_patrons: Callable[[str], Path], sample_text: str) -> None:
        path = write_patrons(sample_text)
        shell, registry, out, _ = _shell([str(path), "5"])
        shell.run()
        assert len(registry) == 2
        assert "File load complete. Added: 2 | Skipped: 0" in out.getvalue()

    def test_initial_path_skips_prompt(
        self, write_patrons: Callable[[str], Path], sample_text: str
    ) -> None:
        shell, registry, _, prompt = _shell(["5"])
        shell.run(initial_path=str(write_patrons(sample_text)))
        assert len(registry) == 2
        assert prompt.labels == ["Choose an option"]

    def test_end_of_input(self) -> None:
        shell, _, out, _ = _shell([""])
        shell.run()
        assert "Exiting LMS. Goodbye!" in out.getvalue()

    def test_invalid_choice(self) -> None:
        shell, _, out, _ = _shell(["9"])
        assert shell.step() is True
        assert "Invalid option. Please choose 1-5." in out.getvalue()

    def test_print_choice(self) -> None:
        shell, _, out, _ = _shell(["4"])
        shell.step()
        assert "(No patrons currently in the system.)" in out.getvalue()


class TestLoad:
    def test_menu_load_reports_skips(self, write_patrons: Callable[[str], Path]) -> None:
        path = write_patrons("12345-Bad-Addr-1\n1234567-Ok-Addr-1\n")
        shell, registry, out, _ = _shell(["1", str(path)])
        shell.step()
        text = out.getvalue()
        assert "Skipping line 1: ID must be exactly 7 digits." in text
        assert "Added: 1 | Skipped: 1" in text
        assert registry.contains_id("1234567")

    def test_unreadable_file(self, tmp_path: Path) -> None:
        shell, registry, out, _ = _shell([])
        assert shell.load(str(tmp_path / "missing.txt")) is None
        assert "Unable to read file" in out.getvalue()
        assert len(registry) == 0


class TestAddPatron:
    def test_happy_path(self) -> None:
        shell, registry, out, _ = _shell(["1234567", "John Smith", "123 Main St", "25"])
        assert shell.add_patron() is True
        patron = registry.get("1234567")
        assert patron is not None
        assert (patron.name, patron.address, patron.fine) == ("John Smith", "123 Main St", 25.0)
        assert "Patron added successfully." in out.getvalue()

    def test_reprompts_each_field(self) -> None:
        answers = ["123", "1234567", "", "John", " ", "1 Main", "abc", "300", "250"]
        shell, registry, out, prompt = _shell(answers)
        assert shell.add_patron() is True
        text = out.getvalue()
        assert "ID must be exactly 7 digits." in text
        assert "Name cannot be empty." in text
        assert "Address cannot be empty." in text
        assert "Fine must be a valid number." in text
        assert "Fine must be between 0 and 250." in text
        assert registry.get("1234567").fine == 250.0  # type: ignore[union-attr]
        assert len(prompt.labels) == len(answers)

    def test_rejects_existing_id_before_other_fields(self) -> None:
        registry = PatronRegistry()
        registry.add(Patron("1234567", "John", "Addr", 0.0))
        shell, _, out, _ = _shell(["1234567", "7654321", "Jane", "Addr", "5"], registry)
        assert shell.add_patron() is True
        assert "A patron with that ID already exists." in out.getvalue()
        assert registry.contains_id("7654321")

    def test_menu_add_prints_listing(self) -> None:
        shell, _, out, _ = _shell(["2", "1234567", "John", "Addr", "5"])
        shell.step()
        assert "ID: 1234567 | Name: John | Address: Addr | Fine: $5.00" in out.getvalue()


class TestRemovePatron:
    @pytest.fixture()
    def populated(self) -> PatronRegistry:
        registry = PatronRegistry()
        registry.load_from_text("1234567-John-Addr-1\n7654321-Jane-Addr-2\n")
        return registry

    def test_remove_existing(self, populated: PatronRegistry) -> None:
        shell, _, out, _ = _shell(["3", "1234567"], populated)
        shell.step()
        assert "Patron removed successfully." in out.getvalue()
        assert not populated.contains_id("1234567")

    def test_remove_missing(self, populated: PatronRegistry) -> None:
        shell, _, out, _ = _shell(["0000000"], populated)
        assert shell.remove_patron() is True
        assert "No patron found with that ID." in out.getvalue()
        assert len(populated) == 2

    def test_remove_malformed_id_skips_listing(self, populated: PatronRegistry) -> None:
        shell, _, out, _ = _shell(["3", "12"], populated)
        shell.step()
        text = out.getvalue()
        assert "ID must be exactly 7 digits." in text
        assert "LMS Patron List" not in text
