"""Line-oriented data files holding students, teachers and courses."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, Iterator, Optional, TypeVar, Union

from .mappers import (
    course_from_line,
    course_to_line,
    person_from_line,
    person_to_line,
)
from .models import Course, Person

DATA_DIRECTORY = "Data"
STUDENTS_DATABASE_FILE = "students.txt"
TEACHERS_DATABASE_FILE = "teachers.txt"
COURSES_DATABASE_FILE = "courses.txt"

ENTITY_SEPARATOR = "\n"

PathLike = Union[str, "os.PathLike[str]"]
T = TypeVar("T")


class StorageError(Exception):
    """A data file could not be read or written."""


class DuplicateRecordError(StorageError):
    """A record with the same key is already stored."""


class RecordNotFoundError(StorageError, LookupError):
    """No stored record has the requested key."""


class _LineStore(Generic[T]):
    """One record per line of a text file, keyed by its first field."""

    kind = "record"

    def __init__(self, path: PathLike) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"

    # Subclasses supply the record format.
    def _parse(self, line: str) -> T:
        raise NotImplementedError

    def _format(self, record: T) -> str:
        raise NotImplementedError

    def _key(self, record: T) -> str:
        raise NotImplementedError

    def _read_lines(self) -> Optional[list[str]]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as error:
            raise StorageError(f"cannot read {self.path}: {error}") from error
        return text.splitlines(keepends=True)

    @staticmethod
    def _is_blank(line: str) -> bool:
        return not line.rstrip("\r\n")

    def _parse_checked(self, line: str) -> T:
        try:
            return self._parse(line)
        except ValueError as error:
            raise StorageError(f"malformed line in {self.path}: {line!r}") from error

    def _records(self) -> Iterator[T]:
        for line in self._read_lines() or ():
            if not self._is_blank(line):
                yield self._parse_checked(line)

    def _find(self, key: str) -> Optional[T]:
        return next((record for record in self._records() if self._key(record) == key), None)

    def _exists(self, key: str) -> bool:
        return self._find(key) is not None

    def _get(self, key: str) -> T:
        record = self._find(key)
        if record is None:
            raise RecordNotFoundError(f"no {self.kind} with key {key!r} in {self.path}")
        return record

    def _all(self) -> list[T]:
        return list(self._records())

    def _add(self, record: T) -> None:
        key = self._key(record)
        if self._exists(key):
            raise DuplicateRecordError(f"{self.kind} {key!r} already exists in {self.path}")
        try:
            with self.path.open("a", encoding="utf-8") as stream:
                stream.write(self._format(record) + ENTITY_SEPARATOR)
        except OSError as error:
            raise StorageError(f"cannot open {self.path}: {error}") from error

    def _position_of(self, key: str) -> tuple[list[str], int]:
        lines = self._read_lines()
        if lines is not None:
            for position, line in enumerate(lines):
                if self._is_blank(line):
                    continue
                if self._key(self._parse_checked(line)) == key:
                    return lines, position
        raise RecordNotFoundError(f"no {self.kind} with key {key!r} in {self.path}")

    def _rewrite(self, lines: list[str]) -> None:
        directory = self.path.parent
        try:
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=directory, delete=False, suffix=".tmp"
            ) as stream:
                stream.writelines(lines)
                temporary = stream.name
            os.replace(temporary, self.path)
        except OSError as error:
            raise StorageError(f"cannot rewrite {self.path}: {error}") from error

    def _update(self, key: str, record: T) -> None:
        lines, position = self._position_of(key)
        lines[position] = self._format(record) + ENTITY_SEPARATOR
        self._rewrite(lines)

    def _remove(self, key: str) -> None:
        lines, position = self._position_of(key)
        del lines[position]
        self._rewrite(lines)


class PersonStore(_LineStore[Person]):
    """Students or teachers, keyed by registration."""

    kind = "person"

    def _parse(self, line: str) -> Person:
        return person_from_line(line)

    def _format(self, record: Person) -> str:
        return person_to_line(record)

    def _key(self, record: Person) -> str:
        return record.registration

    def exists(self, registration: str) -> bool:
        """Return True if a person with this registration is stored."""
        return self._exists(registration)

    def add(self, person: Person) -> None:
        """Append a person; raise DuplicateRecordError if the registration is taken."""
        self._add(person)

    def update(self, registration: str, person: Person) -> None:
        """Replace the person stored under *registration*."""
        self._update(registration, person)

    def remove(self, registration: str) -> None:
        """Delete the person stored under *registration*."""
        self._remove(registration)

    def get(self, registration: str) -> Person:
        """Return the first person with this registration."""
        return self._get(registration)

    def all(self) -> list[Person]:
        """Return every stored person, in file order."""
        return self._all()


class CourseStore(_LineStore[Course]):
    """Courses keyed by id; enrolled students are resolved through *students*."""

    kind = "course"

    def __init__(self, path: PathLike, students: PersonStore) -> None:
        super().__init__(path)
        self.students = students

    def _records(self) -> Iterator[Course]:
        index: dict[str, Person] = {}
        for person in self.students.all():
            index.setdefault(person.registration, person)
        self._index = index
        try:
            yield from super()._records()
        finally:
            del self._index

    def _parse(self, line: str) -> Course:
        index = getattr(self, "_index", None)
        if index is None:
            known: dict[str, Person] = {}
            for person in self.students.all():
                known.setdefault(person.registration, person)
            index = known
        return course_from_line(line, index.get)

    def _format(self, record: Course) -> str:
        return course_to_line(record)

    def _key(self, record: Course) -> str:
        return record.id

    def exists(self, course_id: str) -> bool:
        """Return True if a course with this id is stored."""
        return self._exists(course_id)

    def add(self, course: Course) -> None:
        """Append a course; raise DuplicateRecordError if the id is taken."""
        self._add(course)

    def update(self, course_id: str, course: Course) -> None:
        """Replace the course stored under *course_id*."""
        self._update(course_id, course)

    def remove(self, course_id: str) -> None:
        """Delete the course stored under *course_id*."""
        self._remove(course_id)

    def get(self, course_id: str) -> Course:
        """Return the first course with this id."""
        return self._get(course_id)

    def all(self) -> list[Course]:
        """Return every stored course, in file order."""
        return self._all()

    def count_courses_of_student(self, registration: str) -> int:
        """Count the enrolments of a stored student across all courses."""
        return sum(
            1
            for course in self._records()
            for student in course.students
            if student.registration == registration
        )


@dataclass(frozen=True)
class Database:
    """The three data files of one school."""

    students: PersonStore
    teachers: PersonStore
    courses: CourseStore


def open_database(root: Optional[PathLike] = None) -> Database:
    """Open the data files under ``<root>/Data``; *root* defaults to the working directory."""
    data = Path(os.getcwd() if root is None else root) / DATA_DIRECTORY
    students = PersonStore(data / STUDENTS_DATABASE_FILE)
    teachers = PersonStore(data / TEACHERS_DATABASE_FILE)
    courses = CourseStore(data / COURSES_DATABASE_FILE, students)
    return Database(students=students, teachers=teachers, courses=courses)