import pytest

from schoolbook.dates import Date
from schoolbook.models import Course, Person
from schoolbook.reports import (
    birthdays_in_month,
    exceeding_courses,
    persons_by_gender,
    search_persons,
    students_below_minimum,
    summary_line,
)
from schoolbook.storage import open_database

ANA = Person("1", "Ana Maria", "111", "F", Date(10, 3, 2000))
BRUNO = Person("2", "Bruno", "222", "M", Date(5, 7, 1999))
MARIANA = Person("T1", "Mariana Souza", "333", "F", Date(1, 3, 1980))


@pytest.fixture
def db(tmp_path):
    (tmp_path / "Data").mkdir()
    database = open_database(tmp_path)
    database.students.add(ANA)
    database.students.add(BRUNO)
    database.teachers.add(MARIANA)
    database.courses.add(Course("MAT1", "Calculo", 1, "T1", [ANA]))
    return database


def test_search_persons_matches_substring_of_name(db):
    students, teachers = search_persons(db, "Mar")
    assert students == [ANA]
    assert teachers == [MARIANA]


def test_search_persons_is_case_sensitive(db):
    students, teachers = search_persons(db, "bru")
    assert (students, teachers) == ([], [])


def test_search_persons_requires_three_characters(db):
    with pytest.raises(ValueError):
        search_persons(db, "Ma")


def test_birthdays_in_month(db):
    students, teachers = birthdays_in_month(db, 3)
    assert students == [ANA]
    assert teachers == [MARIANA]
    assert birthdays_in_month(db, 7) == ([BRUNO], [])


@pytest.mark.parametrize("month", [0, 13, -1])
def test_birthdays_in_month_rejects_invalid_month(db, month):
    with pytest.raises(ValueError):
        birthdays_in_month(db, month)


def test_persons_by_gender_filters_exactly():
    persons = [ANA, BRUNO, MARIANA]
    assert persons_by_gender(persons, "F") == [ANA, MARIANA]
    assert persons_by_gender(persons, "M") == [BRUNO]
    assert persons_by_gender(persons, "Male") == []


@pytest.mark.parametrize("gender", ["", "X", "male"])
def test_persons_by_gender_rejects_invalid(gender):
    with pytest.raises(ValueError):
        persons_by_gender([ANA], gender)


def test_students_below_minimum(db):
    assert students_below_minimum(db) == [ANA, BRUNO]
    assert students_below_minimum(db, 1) == [BRUNO]
    assert students_below_minimum(db, 0) == []


def test_exceeding_courses_uses_strict_threshold():
    def course(identifier, amount):
        return Course(identifier, "x", 1, "T", [Person(str(n)) for n in range(amount)])

    small, edge, big = course("A", 10), course("B", 40), course("C", 41)
    assert exceeding_courses([small, edge, big]) == [big]
    assert exceeding_courses([small, edge, big], 9) == [small, edge, big]


def test_summary_line_worked_example():
    assert summary_line("resultados", 1, 2) == "Total de resultados: 3 | 1 professor e 2 alunos"


def test_summary_line_pluralizes_and_omits_empty_parts():
    line = summary_line("aniversariantes", 2, 0)
    assert line.startswith("Total de aniversariantes: 2 | ")
    assert line.endswith("professores")
    assert "aluno" not in line
    only_students = summary_line("resultados", 0, 1)
    assert only_students.endswith("| 1 aluno")
    assert " e " not in only_students