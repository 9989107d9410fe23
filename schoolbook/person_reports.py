"""Report screens for students and teachers: detail, listings and their menu."""

from __future__ import annotations

import enum
from typing import Optional

from .console import Console, Route, Screen, Session
from .dates import format_date
from .models import VALID_GENDERS, Person, person_birthday_key, person_name_key
from .person_forms import INVALID_GENDER, Role, fetch_person
from .reports import MINIMUM_COURSES, persons_by_gender, students_below_minimum


class Ordering(enum.Enum):
    """The order in which a person listing is shown."""

    CREATION = "creation"
    NAME = "name"
    BIRTHDAY = "birthday"


_PLURAL = {Role.STUDENT: "alunos", Role.TEACHER: "professores"}
_EMPTY_LISTING = {
    Role.STUDENT: "Nao existem estudantes cadastrados.\n",
    Role.TEACHER: "Nao existem professores cadastrados.\n",
}
_DETAIL_TITLE = {
    Role.STUDENT: "Detalhamento de estudante:\n",
    Role.TEACHER: "Detalhamento de docente:\n",
}
_GENDER_INPUT_LENGTH = {Role.STUDENT: 10, Role.TEACHER: 15}


def _reports(role: Role, message: Optional[str] = None) -> Route:
    return Route(Screen.PERSON_REPORTS, (role, message))


def _write_back_option(console: Console) -> None:
    console.write("\n")
    console.write("0 - Voltar\n")


def _write_total(console: Console, role: Role, count: int) -> None:
    console.write("\n")
    console.write(f"Total de {_PLURAL[role]}: {count}\n")


def show_person_detail(session: Session, role: Role, person: Person) -> Route:
    """Show every field of *person* and go back to the reports menu."""
    console = session.console
    console.clear()
    console.write(_DETAIL_TITLE[role])
    console.write("\n")
    console.write(f"Nome: {person.name} ({person.gender})\n")
    console.write(f"Matricula: {person.registration}\n")
    console.write(f"CPF: {person.identification}\n")
    console.write(f"Data de Nascimento: {format_date(person.birthday)}\n")
    _write_back_option(console)
    console.choose({0})
    return _reports(role)


def list_persons(session: Session, role: Role, ordering: Ordering) -> Route:
    """List every person of *role* in the requested order."""
    console = session.console
    persons = role.store(session.db).all()
    plural = _PLURAL[role]
    console.clear()

    if ordering is Ordering.CREATION:
        console.write(f"Listagem de {plural.capitalize()}\n")
        console.write("\n")
    elif ordering is Ordering.NAME:
        persons.sort(key=person_name_key)
        console.write(f"Listagem de {plural} por ordem alfabetica:\n\n")
    else:
        persons.sort(key=person_birthday_key)
        console.write(f"Listagem de {plural} por data de nascimento:\n\n")

    for person in persons:
        if ordering is Ordering.BIRTHDAY:
            console.write(
                f"{person.registration}. {person.name} - {format_date(person.birthday)}\n"
            )
        else:
            console.write(f"{person.registration}. {person.name}\n")

    if persons:
        _write_total(console, role, len(persons))
    else:
        console.write(_EMPTY_LISTING[role])

    _write_back_option(console)
    console.choose({0})
    return _reports(role)


def list_persons_by_gender(session: Session, role: Role) -> Route:
    """Ask for a gender and list the persons of *role* that have it."""
    console = session.console
    console.clear()
    limit = _GENDER_INPUT_LENGTH[role]

    while True:
        gender = console.read_line(
            f"Insira o genero do {role.noun} (M/F/O), ou digite 'cancelar' para voltar: "
        )[:limit]
        if gender == "cancelar":
            return _reports(role)
        if gender[0] in VALID_GENDERS:
            break
        console.write(INVALID_GENDER)

    matches = persons_by_gender(role.store(session.db).all(), gender)

    console.clear()
    console.write(f"Listagem de {_PLURAL[role]} do sexo '{gender}':\n\n")
    for person in matches:
        console.write(f"{person.registration}. {person.name}\n")

    if matches:
        _write_total(console, role, len(matches))
    else:
        console.write(_EMPTY_LISTING[role])

    _write_back_option(console)
    console.choose({0})
    return Route(Screen.PERSONS_BY_GENDER, (role,))


def list_students_below_minimum(session: Session) -> Route:
    """List the students enrolled in fewer than the minimum number of courses."""
    console = session.console
    students = students_below_minimum(session.db, MINIMUM_COURSES)

    console.clear()
    console.write(
        f"Listagem de alunos matriculados em menos de {MINIMUM_COURSES} disciplinas:\n\n"
    )
    for student in students:
        console.write(f"{student.registration}. {student.name}\n")

    if students:
        _write_total(console, Role.STUDENT, len(students))
    else:
        console.write("Nao existem resultados.\n")

    _write_back_option(console)
    console.choose({0})
    return _reports(Role.STUDENT)


def person_reports_menu(session: Session, role: Role, message: Optional[str] = None) -> Route:
    """Show the reports menu of *role* and return the chosen screen."""
    console = session.console
    plural = _PLURAL[role]
    noun = role.noun
    console.clear()
    console.write(f"Instituto Federal da Bahia - Relatorio de {plural.capitalize()}\n")
    console.write("\n")
    console.write(f"1 - Detalhar {noun}\n")
    console.write(f"2 - Listar {plural}\n")
    console.write(f"3 - Listar {plural} por genero\n")
    console.write(f"4 - Listar {plural} por ordem alfabetica\n")
    console.write(f"5 - Listar {plural} por data de nascimento\n")
    options = set(range(6))
    if role is Role.STUDENT:
        console.write(f"6 - Listar alunos com menos de {MINIMUM_COURSES} disciplinas\n")
        options.add(6)
    console.write("\n")

    if message is not None:
        console.write(f"{message}\n\n")

    console.write("0 - Voltar\n")

    option = console.choose(options)
    if option == 0:
        return Route(Screen.PERSON_MANAGEMENT, (role, None))
    if option == 1:
        person = fetch_person(session, role)
        if person is None:
            return _reports(role)
        return Route(Screen.PERSON_DETAIL, (role, person))
    if option == 2:
        return Route(Screen.PERSON_LIST, (role, Ordering.CREATION))
    if option == 3:
        return Route(Screen.PERSONS_BY_GENDER, (role,))
    if option == 4:
        return Route(Screen.PERSON_LIST, (role, Ordering.NAME))
    if option == 5:
        return Route(Screen.PERSON_LIST, (role, Ordering.BIRTHDAY))
    return Route(Screen.STUDENTS_BELOW_MINIMUM)