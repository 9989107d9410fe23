"""Management menu for students and teachers."""

from __future__ import annotations

from typing import Optional

from .console import Route, Screen, Session
from .person_forms import Role, fetch_person


def person_management_menu(session: Session, role: Role, message: Optional[str] = None) -> Route:
    """Show the management menu of *role* and return the chosen screen."""
    console = session.console
    title = role.title
    plural = "Alunos" if role is Role.STUDENT else "Professores"
    console.clear()
    console.write(f"Instituto Federal da Bahia - {plural}\n")
    console.write("\n")
    console.write("1 - Relatorios\n")
    console.write(f"2 - Cadastrar {title}\n")
    console.write(f"3 - Atualizar {title}\n")
    console.write(f"4 - Excluir {title}\n")
    console.write("\n")

    if message is not None:
        console.write(f"{message}\n\n")

    console.write("0 - Voltar\n")

    option = console.choose({0, 1, 2, 3, 4})
    if option == 0:
        return Route(Screen.MAIN_MENU)
    if option == 1:
        return Route(Screen.PERSON_REPORTS, (role, None))
    if option == 2:
        return Route(Screen.CREATE_PERSON, (role,))

    person = fetch_person(session, role)
    if person is None:
        return Route(Screen.PERSON_MANAGEMENT, (role, None))
    screen = Screen.UPDATE_PERSON if option == 3 else Screen.DELETE_PERSON
    return Route(screen, (role, person))