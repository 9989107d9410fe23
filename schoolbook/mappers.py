"""Conversion between records and the lines of the data files."""

from __future__ import annotations

import re
from typing import Callable, Optional

from .dates import Date, format_date, parse_date
from .models import Course, Person

ATTRIBUTE_SEPARATOR = ";"
STUDENT_SEPARATOR = ","

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def strip_newline(text: str) -> str:
    """Remove a single trailing newline, if present."""
    return text[:-1] if text.endswith("\n") else text


def _tokens(text: str, separator: str) -> list[str]:
    # Consecutive separators count as one, and empty fields are dropped.
    return [token for token in text.split(separator) if token]


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def person_from_line(line: str) -> Person:
    """Build a person from a ``registration;name;cpf;gender;DD/MM/YYYY`` line."""
    fields = _tokens(strip_newline(line), ATTRIBUTE_SEPARATOR)
    person = Person()
    for index, token in enumerate(fields[:5]):
        if index == 0:
            person.registration = token
        elif index == 1:
            person.name = token
        elif index == 2:
            person.identification = token
        elif index == 3:
            person.gender = token
        else:
            person.birthday = parse_date(token)
    return person


def person_to_line(person: Person) -> str:
    """Serialize a person to one line, without the line terminator."""
    return ATTRIBUTE_SEPARATOR.join(
        (
            person.registration,
            person.name,
            person.identification,
            person.gender,
            format_date(person.birthday),
        )
    )


def _students_from_field(
    text: str, find_student: Callable[[str], Optional[Person]]
) -> list[Person]:
    students = []
    for registration in _tokens(text, STUDENT_SEPARATOR):
        found = find_student(registration)
        # An unknown registration still takes a slot, left blank.
        students.append(found if found is not None else Person(birthday=Date()))
    return students


def course_from_line(
    line: str, find_student: Callable[[str], Optional[Person]]
) -> Course:
    """Build a course from ``id;name;period;teacher;reg1,reg2,...``.

    *find_student* maps a student registration to the stored person, or None.
    """
    fields = _tokens(strip_newline(line), ATTRIBUTE_SEPARATOR)
    course = Course()
    for index, token in enumerate(fields[:5]):
        if index == 0:
            course.id = token
        elif index == 1:
            course.name = token
        elif index == 2:
            course.period = _leading_int(token)
        elif index == 3:
            course.teacher_registration = token
        else:
            course.students = _students_from_field(token, find_student)
    return course


def course_to_line(course: Course) -> str:
    """Serialize a course to one line, without the line terminator."""
    students = STUDENT_SEPARATOR.join(student.registration for student in course.students)
    return ATTRIBUTE_SEPARATOR.join(
        (
            course.id,
            course.name,
            str(course.period),
            course.teacher_registration,
            students,
        )
    )