"""Queries behind the listing screens."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from .models import VALID_GENDERS, Course, Person
from .storage import Database

MIN_SEARCH_LENGTH = 3
MINIMUM_COURSES = 3
STUDENTS_AMOUNT_TO_BE_CONSIDERED_EXCEEDING = 40


def search_persons(db: Database, text: str) -> tuple[list[Person], list[Person]]:
    """Return the students and the teachers whose name contains *text*."""
    if len(text) < MIN_SEARCH_LENGTH:
        raise ValueError(f"search must have at least {MIN_SEARCH_LENGTH} characters")
    students = [person for person in db.students.all() if text in person.name]
    teachers = [person for person in db.teachers.all() if text in person.name]
    return students, teachers


def birthdays_in_month(db: Database, month: int) -> tuple[list[Person], list[Person]]:
    """Return the students and the teachers born in *month* (1 to 12)."""
    if not 1 <= month <= 12:
        raise ValueError(f"invalid month: {month}")
    students = [person for person in db.students.all() if person.birthday.month == month]
    teachers = [person for person in db.teachers.all() if person.birthday.month == month]
    return students, teachers


def persons_by_gender(persons: Iterable[Person], gender: str) -> list[Person]:
    """Return the persons whose gender is exactly *gender*.

    *gender* must start with one of M, F or O.
    """
    if not gender or gender[0] not in VALID_GENDERS:
        raise ValueError(f"invalid gender: {gender!r}")
    return [person for person in persons if person.gender == gender]


def students_below_minimum(db: Database, minimum: int = MINIMUM_COURSES) -> list[Person]:
    """Return the students enrolled in fewer than *minimum* courses."""
    enrolments = Counter(
        student.registration for course in db.courses.all() for student in course.students
    )
    return [person for person in db.students.all() if enrolments[person.registration] < minimum]


def exceeding_courses(
    courses: Iterable[Course], threshold: int = STUDENTS_AMOUNT_TO_BE_CONSIDERED_EXCEEDING
) -> list[Course]:
    """Return the courses with more than *threshold* students."""
    return [course for course in courses if course.students_amount > threshold]


def summary_line(label: str, teachers_count: int, students_count: int) -> str:
    """Render the totals line, e.g. ``Total de resultados: 3 | 1 professor e 2 alunos``."""
    parts = []
    if teachers_count > 0:
        parts.append(f"{teachers_count} professor" + ("es" if teachers_count > 1 else ""))
    if students_count > 0:
        parts.append(f"{students_count} aluno" + ("s" if students_count > 1 else ""))
    total = teachers_count + students_count
    return f"Total de {label}: {total} | " + " e ".join(parts)