"""Person search, monthly birthdays and the general reports menu."""

from __future__ import annotations

from typing import Optional

from .console import Console, Route, Screen, Session
from .models import Person
from .reports import MIN_SEARCH_LENGTH, birthdays_in_month, search_persons, summary_line

MAX_SEARCH_LENGTH = 15


def _write_persons(console: Console, students: list[Person], teachers: list[Person]) -> None:
    for student in students:
        console.write(f"Aluno | {student.registration}. {student.name}\n")
    for teacher in teachers:
        console.write(f"Professor | {teacher.registration}. {teacher.name}\n")


def _write_back_option(console: Console) -> None:
    console.write("\n")
    console.write("0 - Voltar\n")


def search_persons_screen(session: Session) -> Optional[Route]:
    """Ask for a name fragment and list every student and teacher containing it."""
    console = session.console
    console.clear()

    while True:
        search = console.read_line(
            "Insira o conteudo que voce deseja buscar, ou digite 'cancelar' para voltar: "
        )[:MAX_SEARCH_LENGTH]
        if search == "cancelar":
            return Route(Screen.MAIN_MENU)
        if len(search) >= MIN_SEARCH_LENGTH:
            break
        console.write(f"A busca deve conter no minimo {MIN_SEARCH_LENGTH} caracteres.\n")

    students, teachers = search_persons(session.db, search)

    console.clear()
    console.write(f"Listagem de pessoas contendo '{search}' no nome:\n\n")
    _write_persons(console, students, teachers)

    if students or teachers:
        console.write("\n")
        console.write(summary_line("resultados", len(teachers), len(students)) + "\n")
    else:
        console.write("Nao foram encontradas pessoas que atendam as buscas.\n")

    _write_back_option(console)
    console.choose({0})
    return Route(Screen.MAIN_MENU)


def monthly_birthdays_screen(session: Session) -> Optional[Route]:
    """Ask for a month and list every student and teacher born in it."""
    console = session.console
    console.clear()

    while True:
        try:
            month = console.read_int("Insira o mes desejado, ou digite '0' para voltar: ")
        except ValueError:
            month = -1
        if month == 0:
            return Route(Screen.GENERAL_REPORTS)
        if 1 <= month <= 12:
            break
        console.write("O mes fornecido e invalido.\n")

    students, teachers = birthdays_in_month(session.db, month)

    console.clear()
    console.write(f"Listagem de aniversariantes do mes {month}:\n\n")
    _write_persons(console, students, teachers)

    if students or teachers:
        console.write("\n")
        console.write(summary_line("aniversariantes", len(teachers), len(students)) + "\n")
    else:
        console.write("Nao foram encontrados aniversariantes para esse mes.\n")

    _write_back_option(console)
    console.choose({0})
    return Route(Screen.GENERAL_REPORTS)


def general_reports_menu(session: Session) -> Optional[Route]:
    """Show the general reports menu and return the chosen screen."""
    console = session.console
    console.clear()
    console.write("Instituto Federal da Bahia - Relatorios gerais\n")
    console.write("\n")
    console.write("1 - Exibir aniversariantes do mes\n")
    console.write("\n")
    console.write("0 - Voltar\n")

    option = console.choose({0, 1})
    if option == 1:
        return Route(Screen.MONTHLY_BIRTHDAYS)
    return Route(Screen.MAIN_MENU)