"""Terminal input and output shared by every screen, and navigation between screens."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass, field
from typing import Collection, Optional, TextIO

from .storage import Database

CLEAR_SCREEN_ANSI = "\x1b[1;1H\x1b[2J"
INVALID_OPTION = "Opcao invalida.\n"


class Screen(enum.Enum):
    """Every screen the program can show."""

    MAIN_MENU = enum.auto()
    SEARCH_PERSONS = enum.auto()
    GENERAL_REPORTS = enum.auto()
    MONTHLY_BIRTHDAYS = enum.auto()
    PERSON_MANAGEMENT = enum.auto()
    PERSON_REPORTS = enum.auto()
    PERSON_DETAIL = enum.auto()
    PERSON_LIST = enum.auto()
    PERSONS_BY_GENDER = enum.auto()
    STUDENTS_BELOW_MINIMUM = enum.auto()
    CREATE_PERSON = enum.auto()
    UPDATE_PERSON = enum.auto()
    DELETE_PERSON = enum.auto()
    COURSE_MANAGEMENT = enum.auto()
    COURSE_REPORTS = enum.auto()
    COURSE_DETAIL = enum.auto()
    COURSE_LIST = enum.auto()
    EXCEEDING_COURSES = enum.auto()
    CREATE_COURSE = enum.auto()
    UPDATE_COURSE = enum.auto()
    DELETE_COURSE = enum.auto()


@dataclass(frozen=True)
class Route:
    """Where to go next: a screen and the arguments it is shown with."""

    screen: Screen
    args: tuple = ()


class Console:
    """Line-based terminal I/O; streams default to standard input and output."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def clear(self) -> None:
        """Move the cursor home and erase the terminal."""
        self.write(CLEAR_SCREEN_ANSI + "\n")

    def write(self, text: str) -> None:
        """Write *text* as is and flush it."""
        self._stdout.write(text)
        self._stdout.flush()

    def _next_line(self) -> str:
        while True:
            line = self._stdin.readline()
            if not line:
                raise EOFError("end of input")
            text = line.rstrip("\r\n").lstrip()
            if text:
                return text

    def read_line(self, prompt: str = "") -> str:
        """Show *prompt* and return the next non-blank line, without leading blanks."""
        if prompt:
            self.write(prompt)
        return self._next_line()

    def read_int(self, prompt: str = "") -> int:
        """Read an integer from the first word of the next non-blank line."""
        text = self.read_line(prompt)
        try:
            return int(text.split()[0])
        except ValueError:
            raise ValueError(f"not an integer: {text!r}") from None

    def choose(self, options: Collection[int]) -> int:
        """Read integers until one of *options* is given, and return it."""
        while True:
            try:
                option = self.read_int()
            except ValueError:
                self.write(INVALID_OPTION)
                continue
            if option in options:
                return option
            self.write(INVALID_OPTION)


@dataclass
class Session:
    """The database and console that the screens work with."""

    db: Database
    console: Console = field(default_factory=Console)