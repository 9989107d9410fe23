"""Forms that create, look up, update and delete students and teachers."""

from __future__ import annotations

import enum
import re
from dataclasses import replace
from typing import Optional

from .console import Console, Route, Screen, Session
from .dates import Date, format_date, is_date_valid
from .models import VALID_GENDERS, Person
from .storage import (
    Database,
    DuplicateRecordError,
    PersonStore,
    RecordNotFoundError,
    StorageError,
)

MAX_REGISTRATION_INPUT = 32
MAX_LOOKUP_INPUT = 14
MAX_IDENTIFICATION_INPUT = 14
MAX_NAME_INPUT = 49

_BIRTHDAY_INPUT = re.compile(r"\s*([+-]?\d+)/\s*([+-]?\d+)/\s*([+-]?\d+)")

INVALID_GENDER = "O genero fornecido e invalido.\n"
INVALID_BIRTHDAY = "A data de nascimento fornecida e invalida.\n"


class Role(enum.Enum):
    """Whether a form works on students or on teachers."""

    STUDENT = "aluno"
    TEACHER = "professor"

    @property
    def noun(self) -> str:
        return self.value

    @property
    def title(self) -> str:
        return self.value.capitalize()

    def store(self, db: Database) -> PersonStore:
        """Return the data file holding persons of this role."""
        return db.students if self is Role.STUDENT else db.teachers


def _management(role: Role, message: Optional[str]) -> Route:
    return Route(Screen.PERSON_MANAGEMENT, (role, message))


def read_gender(console: Console, prompt: str) -> str:
    """Ask until the first character of the answer is M, F or O, and return it."""
    while True:
        gender = console.read_line(prompt)[:1]
        if gender in VALID_GENDERS:
            return gender
        console.write(INVALID_GENDER)


def _parse_birthday(text: str) -> Optional[Date]:
    match = _BIRTHDAY_INPUT.match(text)
    if match is None:
        return None
    day, month, year = (int(group) for group in match.groups())
    return Date(day=day, month=month, year=year)


def read_birthday(console: Console, prompt: str) -> Date:
    """Ask until a valid ``DD/MM/YYYY`` date is given, and return it."""
    while True:
        date = _parse_birthday(console.read_line(prompt))
        if date is not None and is_date_valid(date):
            return date
        console.write(INVALID_BIRTHDAY)


def fetch_person(session: Session, role: Role) -> Optional[Person]:
    """Ask for a registration until a stored person is found; None if cancelled."""
    console = session.console
    store = role.store(session.db)
    console.clear()

    while True:
        registration = console.read_line(
            f"Insira a matricula do {role.noun}, ou digite 'cancelar' para voltar: "
        )[:MAX_LOOKUP_INPUT]
        if registration == "cancelar":
            return None
        if store.exists(registration):
            return store.get(registration)
        console.write(f"{role.title} nao encontrado.\n")


def create_person(session: Session, role: Role) -> Route:
    """Fill in the registration form and store the new person."""
    console = session.console
    noun = role.noun
    console.clear()
    console.write(f"Formulario de Cadastro de {role.title}\n")
    console.write("\n")

    registration = console.read_line(f"Insira a matricula do {noun}: ")[:MAX_REGISTRATION_INPUT]
    identification = console.read_line(f"Insira o CPF do {noun}: ")[:MAX_IDENTIFICATION_INPUT]
    name = console.read_line(f"Insira o nome do {noun}: ")[:MAX_NAME_INPUT]
    gender = read_gender(console, f"Insira o genero do {noun} (M/F/O): ")
    birthday = read_birthday(console, f"Insira a data de nascimento do {noun} (DD/MM/AAAA): ")

    person = Person(
        registration=registration,
        name=name,
        identification=identification,
        gender=gender,
        birthday=birthday,
    )

    try:
        role.store(session.db).add(person)
    except DuplicateRecordError:
        return _management(
            role,
            f"Erro ao criar {noun}: Ja existe um {noun} cadastrado com a matricula fornecida.",
        )
    except StorageError:
        return _management(
            role,
            f"Erro ao criar {noun}: Nao foi possivel abrir o arquivo de dados. "
            "O usuario nao foi salvo no Banco de Dados.",
        )
    return _management(role, f"{role.title} cadastrado com sucesso!")


def _write_update_header(console: Console, role: Role, person: Person, field: str) -> None:
    console.clear()
    console.write(
        f"Voce esta atualizando {field} do(a) {role.noun} "
        f"'{person.registration} - {person.name}'.\n"
    )
    console.write("\n")


def _write_current_value(console: Console, value: str) -> None:
    console.write(f"Valor atual: {value}\n")
    console.write("\n")


def _write_update_menu(console: Console, role: Role, person: Person) -> None:
    console.clear()
    console.write(
        f"Escolha o dado para atualizar do {role.noun} "
        f"'{person.registration} - {person.name}', digite:\n"
    )
    console.write("\n")
    console.write("1 - Nome\n")
    console.write("2 - CPF\n")
    console.write("3 - Genero\n")
    console.write("4 - Data de Nascimento\n")
    console.write("\n")
    console.write("9 - Salvar alteracoes\n")
    console.write("0 - Voltar\n")


def update_person(session: Session, role: Role, person: Person) -> Route:
    """Edit the fields of *person* one at a time, then save or discard the changes."""
    console = session.console
    noun = role.noun
    edited = replace(person)

    while True:
        _write_update_menu(console, role, edited)
        option = console.choose({0, 1, 2, 3, 4, 9})

        if option == 0:
            return _management(role, "Alteracoes descartadas.")

        if option == 9:
            try:
                role.store(session.db).update(edited.registration, edited)
            except RecordNotFoundError:
                pass
            return _management(role, f"{role.title} atualizado com sucesso.")

        if option == 1:
            _write_update_header(console, role, edited, "o nome")
            _write_current_value(console, edited.name)
            edited.name = console.read_line(f"Insira o novo nome do {noun}: ")[:MAX_NAME_INPUT]
        elif option == 2:
            _write_update_header(console, role, edited, "o CPF")
            _write_current_value(console, edited.identification)
            edited.identification = console.read_line(f"Insira o novo CPF do {noun}: ")[
                :MAX_IDENTIFICATION_INPUT
            ]
        elif option == 3:
            _write_update_header(console, role, edited, "o genero")
            _write_current_value(console, edited.gender)
            edited.gender = read_gender(console, f"Insira o novo genero do {noun} (M/F/O): ")
        else:
            _write_update_header(console, role, edited, "a data de nascimento")
            _write_current_value(console, format_date(edited.birthday))
            edited.birthday = read_birthday(
                console, f"Insira a nova data de nascimento do {noun} (DD/MM/AAAA): "
            )


def delete_person(session: Session, role: Role, person: Person) -> Route:
    """Ask for confirmation and delete *person*."""
    console = session.console
    console.clear()
    console.write(
        f"Prestes a excluir o {role.noun} '{person.registration} - {person.name}', digite:\n"
    )
    console.write("\n")
    console.write("1 - Para confirmar\n")
    console.write("0 - Para cancelar\n")

    if console.choose({0, 1}) == 0:
        return _management(role, "Operacao cancelada.")

    try:
        role.store(session.db).remove(person.registration)
    except RecordNotFoundError:
        pass
    return _management(role, "Estudante excluido com sucesso.")