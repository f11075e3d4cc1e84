"""Interactive menu shell for the patron registry.

The shell is a thin loop over :class:`PatronRegistry`: it reads a menu
choice, prompts for the fields an action needs, calls the registry and
echoes the result.  All validation and uniqueness logic stays in the
registry.
"""
from __future__ import annotations

from collections.abc import Callable

import click
from rich.console import Console
from rich.markup import escape

from lms.core.errors import DuplicateIdError, LmsError, SourceUnavailableError
from lms.formatter import PatronFormatter
from lms.registry import LoadReport, PatronRegistry

Prompt = Callable[[str], str]

_BANNER_RULE = "=" * 47
_MENU = (
    "",
    "------------- MENU -------------",
    "1) Load patrons from file",
    "2) Add a new patron",
    "3) Remove a patron by ID",
    "4) Print all patrons",
    "5) Exit",
    "--------------------------------",
)


def _click_prompt(text: str) -> str:
    return click.prompt(text, default="", show_default=False, prompt_suffix=": ").strip()


class PatronShell:
    """Menu-driven front end for a registry.

    Parameters
    ----------
    registry:
        The registry the shell operates on.
    console:
        Where output is written.
    prompt:
        Reads one trimmed line of user input for the given label.
        Raises ``click.Abort`` at end of input.
    """

    def __init__(
        self,
        registry: PatronRegistry,
        console: Console,
        prompt: Prompt = _click_prompt,
    ) -> None:
        self._registry = registry
        self._console = console
        self._prompt = prompt
        self._formatter = PatronFormatter()

    # ------------------------------------------------------------------
    # Output helpers
    # ------------------------------------------------------------------

    def _say(self, text: str = "") -> None:
        self._console.print(text, markup=False, highlight=False, soft_wrap=True)

    def _error(self, text: str) -> None:
        self._console.print(f"[red]ERROR:[/red] {escape(text)}", highlight=False, soft_wrap=True)

    def print_listing(self) -> None:
        self._say(self._formatter.format_listing(self._registry.list_sorted_by_id()))

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self, initial_path: str | None = None) -> None:
        """Show the banner, optionally load a file, then loop until Exit."""
        self._say(_BANNER_RULE)
        self._say("   Library Management System (LMS) - CLI")
        self._say(_BANNER_RULE)
        try:
            if initial_path is None:
                initial_path = self._prompt(
                    "Enter path to patron file to load (or press Enter to skip)"
                )
            if initial_path:
                self.load(initial_path)
                self.print_listing()
            while self.step():
                pass
        except click.Abort:
            self._say()
        self._say("Exiting LMS. Goodbye!")

    def step(self) -> bool:
        """Handle one menu choice.  Returns ``False`` once the user exits."""
        for line in _MENU:
            self._say(line)
        choice = self._prompt("Choose an option")
        if choice == "1":
            self.load(self._prompt("Enter path to patron file"))
            self.print_listing()
        elif choice == "2":
            self.add_patron()
            self.print_listing()
        elif choice == "3":
            if self.remove_patron():
                self.print_listing()
        elif choice == "4":
            self.print_listing()
        elif choice == "5":
            return False
        else:
            self._say("Invalid option. Please choose 1-5.")
        return True

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def load(self, path: str) -> LoadReport | None:
        """Load ``path``, echoing each skipped line and the summary."""
        try:
            report = self._registry.load_from_file(path)
        except SourceUnavailableError as exc:
            self._error(f"Unable to read file. Details: {exc.reason}")
            return None
        for diagnostic in report.diagnostics:
            self._say(str(diagnostic))
        self._say()
        self._say(report.summary)
        self._say()
        return report

    def add_patron(self) -> bool:
        """Prompt field by field, re-asking until each field is valid."""
        validator = self._registry.validator
        config = self._registry.config

        while True:
            patron_id = self._prompt(f"Enter {config.id_length}-digit Patron ID")
            try:
                validator.validate_id(patron_id)
            except LmsError as exc:
                self._error(exc.message)
                continue
            if self._registry.contains_id(patron_id):
                self._error("A patron with that ID already exists.")
                continue
            break

        name = self._prompt_field("Enter Patron Name", validator.validate_name)
        address = self._prompt_field("Enter Patron Address", validator.validate_address)

        while True:
            fine_text = self._prompt(
                f"Enter Overdue Fine Amount ({config.fine_min:g} - {config.fine_max:g})"
            )
            error = self._registry.check_fields(patron_id, name, address, fine_text)
            if error is not None:
                self._error(error.message)
                continue
            break

        try:
            self._registry.propose(patron_id, name, address, fine_text)
        except DuplicateIdError:
            self._error("Could not add patron (duplicate ID).")
            return False
        self._say("Patron added successfully.")
        return True

    def remove_patron(self) -> bool:
        """Prompt for an ID and remove it.

        Returns ``False`` only when the ID was malformed, in which case
        no listing follows.
        """
        patron_id = self._prompt(
            f"Enter {self._registry.config.id_length}-digit Patron ID to remove"
        )
        try:
            self._registry.validator.validate_id(patron_id)
        except LmsError as exc:
            self._error(exc.message)
            return False
        if self._registry.remove_by_id(patron_id):
            self._say("Patron removed successfully.")
        else:
            self._say("No patron found with that ID.")
        return True

    def _prompt_field(self, label: str, check: Callable[[str], None]) -> str:
        while True:
            value = self._prompt(label)
            try:
                check(value)
            except LmsError as exc:
                self._error(exc.message)
                continue
            return value
