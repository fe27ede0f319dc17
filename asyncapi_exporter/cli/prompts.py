"""Interactive selection prompts"""

import sys
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, TextIO

from asyncapi_exporter.exceptions import PromptCancelled


@dataclass
class Choice:
    """One selectable entry."""

    title: str
    value: Any
    description: Optional[str] = None


def find_title(choices: Sequence[Choice], value: Any) -> Optional[str]:
    """Return the title of the choice holding value."""
    return next((c.title for c in choices if c.value == value), None)


def filter_choices(choices: Sequence[Choice], query: str) -> List[Choice]:
    """Case-insensitive substring match on the titles."""
    query = query.lower()
    return [c for c in choices if query in (c.title or "").lower()]


class Prompter:
    """
    Numbered selection on a text terminal.

    EOF and Ctrl-C are turned into PromptCancelled.
    """

    def __init__(self, input_func: Callable[[str], str] = input, stream: Optional[TextIO] = None):
        self._input = input_func
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    def _ask(self, prompt: str) -> str:
        try:
            return self._input(prompt).strip()
        except (EOFError, KeyboardInterrupt) as e:
            raise PromptCancelled() from e

    def _render(self, message: str, choices: Sequence[Choice]) -> None:
        print(message, file=self.stream)
        for index, choice in enumerate(choices, start=1):
            line = f"  {index}) {choice.title}"
            if choice.description:
                line += f" - {choice.description}"
            print(line, file=self.stream)

    def select(self, message: str, choices: Sequence[Choice]) -> Any:
        """
        Ask until a valid entry number is given.

        Returns:
            The value of the selected choice
        """
        if not choices:
            raise ValueError("choices must not be empty")

        self._render(message, choices)
        while True:
            answer = self._ask("> ")
            if answer.isdigit() and 1 <= int(answer) <= len(choices):
                return choices[int(answer) - 1].value
            print(f"Enter a number between 1 and {len(choices)}", file=self.stream)

    def autocomplete(self, message: str, choices: Sequence[Choice]) -> Any:
        """
        Narrow choices by a search term, then select.

        An empty search keeps every choice; a term without matches asks again.
        """
        if not choices:
            raise ValueError("choices must not be empty")

        while True:
            query = self._ask(f"{message} (type to filter, enter for all): ")
            matches = filter_choices(choices, query)
            if matches:
                return self.select(message, matches)
            print(f"No match for '{query}'", file=self.stream)
