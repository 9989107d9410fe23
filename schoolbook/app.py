"""Main menu, screen dispatch and the command-line entry point."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Callable, Optional

from .console import Route, Screen, Session
from .course_forms import course_management_menu, create_course, delete_course, update_course
from .course_reports import (
    course_reports_menu,
    list_courses,
    list_exceeding_courses,
    show_course_detail,
)
from .general_views import general_reports_menu, monthly_birthdays_screen, search_persons_screen
from .person_forms import Role, create_person, delete_person, update_person
from .person_menu import person_management_menu
from .person_reports import (
    list_persons,
    list_persons_by_gender,
    list_students_below_minimum,
    person_reports_menu,
    show_person_detail,
)
from .storage import open_database

Handler = Callable[..., Optional[Route]]


def main_menu(session: Session) -> Optional[Route]:
    """Show the main menu; return the chosen screen, or None to quit."""
    console = session.console
    console.clear()
    console.write("Instituto Federal da Bahia\n")
    console.write("\n")
    console.write(f"Current Work Directory: {os.getcwd()}\n")
    console.write("\n")
    console.write("1 - Buscar Pessoas\n")
    console.write("2 - Exibir Relatorios\n")
    console.write("3 - Gerenciamento de Alunos\n")
    console.write("4 - Gerenciamento de Professores\n")
    console.write("5 - Gerenciamento de Disciplinas\n")
    console.write("\n")
    console.write("0 - Sair do Programa\n")

    option = console.choose(set(range(6)))
    if option == 0:
        console.write("Saindo do programa...\n")
        return None
    if option == 1:
        return Route(Screen.SEARCH_PERSONS)
    if option == 2:
        return Route(Screen.GENERAL_REPORTS)
    if option == 3:
        return Route(Screen.PERSON_MANAGEMENT, (Role.STUDENT, None))
    if option == 4:
        return Route(Screen.PERSON_MANAGEMENT, (Role.TEACHER, None))
    return Route(Screen.COURSE_MANAGEMENT, (None,))


_HANDLERS: dict[Screen, Handler] = {
    Screen.MAIN_MENU: main_menu,
    Screen.SEARCH_PERSONS: search_persons_screen,
    Screen.GENERAL_REPORTS: general_reports_menu,
    Screen.MONTHLY_BIRTHDAYS: monthly_birthdays_screen,
    Screen.PERSON_MANAGEMENT: person_management_menu,
    Screen.PERSON_REPORTS: person_reports_menu,
    Screen.PERSON_DETAIL: show_person_detail,
    Screen.PERSON_LIST: list_persons,
    Screen.PERSONS_BY_GENDER: list_persons_by_gender,
    Screen.STUDENTS_BELOW_MINIMUM: list_students_below_minimum,
    Screen.CREATE_PERSON: create_person,
    Screen.UPDATE_PERSON: update_person,
    Screen.DELETE_PERSON: delete_person,
    Screen.COURSE_MANAGEMENT: course_management_menu,
    Screen.COURSE_REPORTS: course_reports_menu,
    Screen.COURSE_DETAIL: show_course_detail,
    Screen.COURSE_LIST: list_courses,
    Screen.EXCEEDING_COURSES: list_exceeding_courses,
    Screen.CREATE_COURSE: create_course,
    Screen.UPDATE_COURSE: update_course,
    Screen.DELETE_COURSE: delete_course,
}


def run(session: Session) -> None:
    """Show screens, starting at the main menu, until the user quits."""
    route: Optional[Route] = Route(Screen.MAIN_MENU)
    while route is not None:
        route = _HANDLERS[route.screen](session, *route.args)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive school records program."""
    parser = argparse.ArgumentParser(
        prog="schoolbook", description="Manage students, teachers and courses."
    )
    parser.add_argument(
        "--root",
        default=None,
        help="directory holding the Data folder (default: the working directory)",
    )
    args = parser.parse_args(argv)

    session = Session(open_database(args.root))
    try:
        run(session)
    except (EOFError, KeyboardInterrupt):
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())