"""Course management menu and the forms that create, look up, update and delete courses."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from .console import Console, Route, Screen, Session
from .models import Course
from .storage import DuplicateRecordError, RecordNotFoundError, StorageError

MAX_ID_INPUT = 32
MAX_NAME_INPUT = 49
MAX_REGISTRATION_INPUT = 32
MAX_LOOKUP_INPUT = 14
MAX_OPERATION_INPUT = 8

TEACHER_NOT_FOUND = "Professor nao encontrado.\n"
STUDENT_NOT_FOUND = "Aluno nao encontrado.\n"


def _management(message: Optional[str] = None) -> Route:
    return Route(Screen.COURSE_MANAGEMENT, (message,))


def _read_teacher(session: Session, prompt: str, limit: int) -> Optional[str]:
    """Ask until a stored teacher's registration is given; None if cancelled."""
    console = session.console
    while True:
        registration = console.read_line(prompt)[:limit]
        if registration == "cancelar":
            return None
        if session.db.teachers.exists(registration):
            return session.db.teachers.get(registration).registration
        console.write(TEACHER_NOT_FOUND)


def fetch_course(session: Session) -> Optional[Course]:
    """Ask for a course id until a stored course is found; None if cancelled."""
    console = session.console
    courses = session.db.courses
    console.clear()

    while True:
        course_id = console.read_line(
            "Insira o codigo da disciplina, ou digite 'cancelar' para voltar: "
        )[:MAX_LOOKUP_INPUT]
        if course_id == "cancelar":
            return None
        if courses.exists(course_id):
            return courses.get(course_id)
        console.write("Disciplina nao encontrada.\n")


def create_course(session: Session) -> Route:
    """Fill in the course registration form and store the new course."""
    console = session.console
    console.clear()
    console.write("Formulario de Cadastro de Disciplina\n")
    console.write("\n")

    course_id = console.read_line("Insira o codigo da disciplina: ")[:MAX_ID_INPUT]
    name = console.read_line("Insira o nome da disciplina: ")[:MAX_NAME_INPUT]
    try:
        period = console.read_int("Insira o periodo da disciplina: ")
    except ValueError:
        period = 0

    teacher = _read_teacher(
        session,
        "Insira a matricula do professor, ou digite 'cancelar' para voltar: ",
        MAX_REGISTRATION_INPUT,
    )
    if teacher is None:
        return _management()

    course = Course(id=course_id, name=name, period=period, teacher_registration=teacher)

    try:
        session.db.courses.add(course)
    except DuplicateRecordError:
        return _management(
            "Erro ao criar disciplina: Ja existe uma disciplina cadastrada com o codigo fornecido."
        )
    except StorageError:
        return _management(
            "Erro ao criar disciplina: Nao foi possivel abrir o arquivo de dados. "
            "A disciplina nao foi salva no Banco de Dados."
        )
    return _management("Disciplina cadastrada com sucesso!")


def _write_update_header(console: Console, course: Course, field: str) -> None:
    console.clear()
    console.write(
        f"Voce esta atualizando {field} da disciplina '{course.id} - {course.name}'.\n"
    )
    console.write("\n")


def _write_update_menu(console: Console, course: Course) -> None:
    console.clear()
    console.write(
        f"Escolha o dado para atualizar da disciplina '{course.id} - {course.name}', digite:\n"
    )
    console.write("\n")
    console.write("1 - Nome\n")
    console.write("2 - Semestre\n")
    console.write("3 - Professor\n")
    console.write("4 - Alunos\n")
    console.write("\n")
    console.write("9 - Salvar alteracoes\n")
    console.write("0 - Voltar\n")


def _edit_students(session: Session, course: Course) -> None:
    console = session.console
    _write_update_header(console, course, "os alunos")
    console.write("Alunos matriculados:\n")
    for student in course.students:
        console.write(f" - {student.name} ({student.registration})\n")
    console.write("\n")

    operation = console.read_line(
        "Insira '+' para adicionar um aluno, '-' para remover um aluno, "
        "ou 'cancelar' para voltar: "
    )[:MAX_OPERATION_INPUT]

    if operation == "cancelar":
        return

    if operation == "+":
        students = session.db.students
        while True:
            registration = console.read_line(
                "Insira a matricula do aluno, ou digite 'cancelar' para voltar: "
            )[:MAX_LOOKUP_INPUT]
            if registration == "cancelar":
                return
            if students.exists(registration):
                course.students.append(students.get(registration))
                return
            console.write(STUDENT_NOT_FOUND)

    if operation == "-":
        registration = console.read_line("Insira a matricula do aluno a ser removido: ")[
            :MAX_LOOKUP_INPUT
        ]
        course.students = [s for s in course.students if s.registration != registration]
        return

    console.write("Operacao invalida.\n")


def update_course(session: Session, course: Course) -> Route:
    """Edit the fields of *course* one at a time, then save or discard the changes."""
    console = session.console
    edited = replace(course, students=list(course.students))

    while True:
        _write_update_menu(console, edited)
        option = console.choose({0, 1, 2, 3, 4, 9})

        if option == 0:
            return _management("Alteracoes descartadas.")

        if option == 9:
            try:
                session.db.courses.update(edited.id, edited)
            except RecordNotFoundError:
                pass
            return _management("Disciplina atualizado com sucesso.")

        if option == 1:
            _write_update_header(console, edited, "o nome")
            console.write(f"Valor atual: {edited.name}\n")
            console.write("\n")
            edited.name = console.read_line("Insira o novo nome da disciplina: ")[
                :MAX_NAME_INPUT
            ]
        elif option == 2:
            _write_update_header(console, edited, "o semestre")
            console.write(f"Valor atual: {edited.period}\n")
            console.write("\n")
            try:
                edited.period = console.read_int("Insira o novo semestre da disciplina: ")
            except ValueError:
                pass
        elif option == 3:
            teacher = _read_teacher(
                session,
                "Insira a matricula do novo professor, ou digite 'cancelar' para voltar: ",
                MAX_LOOKUP_INPUT,
            )
            if teacher is not None:
                edited.teacher_registration = teacher
        else:
            _edit_students(session, edited)


def delete_course(session: Session, course: Course) -> Route:
    """Ask for confirmation and delete *course*."""
    console = session.console
    console.clear()
    console.write(f"Prestes a excluir a disciplina '{course.id} - {course.name}', digite:\n")
    console.write("\n")
    console.write("1 - Para confirmar\n")
    console.write("0 - Para cancelar\n")

    if console.choose({0, 1}) == 0:
        return _management("Operacao cancelada.")

    try:
        session.db.courses.remove(course.id)
    except RecordNotFoundError:
        pass
    return _management("Disciplina excluida com sucesso.")


def course_management_menu(session: Session, message: Optional[str] = None) -> Route:
    """Show the course management menu and return the chosen screen."""
    console = session.console
    console.clear()
    console.write("Instituto Federal da Bahia - Disciplinas\n")
    console.write("\n")
    console.write("1 - Relatorios\n")
    console.write("2 - Cadastrar Disciplina\n")
    console.write("3 - Atualizar Disciplina\n")
    console.write("4 - Excluir Disciplina\n")
    console.write("\n")

    if message is not None:
        console.write(f"{message}\n\n")

    console.write("0 - Voltar\n")

    option = console.choose({0, 1, 2, 3, 4})
    if option == 0:
        return Route(Screen.MAIN_MENU)
    if option == 1:
        return Route(Screen.COURSE_REPORTS, (None,))
    if option == 2:
        return Route(Screen.CREATE_COURSE)

    course = fetch_course(session)
    if course is None:
        return _management()
    screen = Screen.UPDATE_COURSE if option == 3 else Screen.DELETE_COURSE
    return Route(screen, (course,))