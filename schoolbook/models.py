"""Students, teachers and courses."""

from __future__ import annotations

from dataclasses import dataclass, field

from .dates import Date

MAX_PERSON_REGISTRATION_SIZE = 32
MAX_PERSON_NAME_SIZE = 128
MAX_PERSON_IDENTIFICATION_SIZE = 14

MAX_COURSE_ID_SIZE = 9
MAX_COURSE_NAME_SIZE = 128
MAX_COURSE_STUDENTS = 80

VALID_GENDERS = ("M", "F", "O")


@dataclass
class Person:
    """A student or a teacher; ``identification`` holds the CPF."""

    registration: str = ""
    name: str = ""
    identification: str = ""
    gender: str = ""
    birthday: Date = field(default_factory=Date)


@dataclass
class Course:
    """A course taught by one teacher to a list of enrolled students."""

    id: str = ""
    name: str = ""
    period: int = 0
    teacher_registration: str = ""
    students: list[Person] = field(default_factory=list)

    @property
    def students_amount(self) -> int:
        return len(self.students)


def person_name_key(person: Person) -> str:
    """Sort key ordering persons by name, code point by code point."""
    return person.name


def person_birthday_key(person: Person) -> tuple[int, int, int]:
    """Sort key ordering persons from the oldest birthday to the newest."""
    birthday = person.birthday
    return (birthday.year, birthday.month, birthday.day)