"""Report screens for courses: detail, listings and their menu."""

from __future__ import annotations

from typing import Optional

from .console import Console, Route, Screen, Session
from .course_forms import fetch_course
from .models import Course
from .reports import STUDENTS_AMOUNT_TO_BE_CONSIDERED_EXCEEDING, exceeding_courses


def _reports(message: Optional[str] = None) -> Route:
    return Route(Screen.COURSE_REPORTS, (message,))


def _write_back_option(console: Console) -> None:
    console.write("\n")
    console.write("0 - Voltar\n")


def _course_line(course: Course) -> str:
    amount = course.students_amount
    suffix = "" if amount == 1 else "s"
    return f"{course.id}. {course.name} ({amount} aluno{suffix})\n"


def show_course_detail(session: Session, course: Course) -> Route:
    """Show a course with its teacher and enrolled students."""
    console = session.console
    db = session.db
    console.clear()
    console.write("Detalhamento de Disciplina:\n")
    console.write("\n")
    console.write(f"Nome: {course.name} ({course.id})\n")
    console.write(f"Semestre: {course.period}\n")
    console.write("\n")
    console.write("Informacoes do Professor:\n")

    if db.teachers.exists(course.teacher_registration):
        teacher = db.teachers.get(course.teacher_registration)
        birthday = teacher.birthday
        console.write(f" - Matricula: {teacher.registration}\n")
        console.write(f" - Nome: {teacher.name} ({teacher.gender})\n")
        console.write(f" - CPF: {teacher.identification}\n")
        console.write(
            f" - Data de Nascimento: {birthday.day:02d}/{birthday.month:02d}/{birthday.year}\n"
        )
    else:
        console.write(" - Nao ha professor vinculado a esta disciplina.\n")

    console.write("\n")
    console.write(f"Alunos Matriculados ({course.students_amount}):\n")

    if course.students:
        for enrolled in course.students:
            if db.students.exists(enrolled.registration):
                student = db.students.get(enrolled.registration)
                console.write(f" - {student.name} ({student.registration})\n")
    else:
        console.write(" - Nao ha alunos matriculados nesta disciplina.\n")

    _write_back_option(console)
    console.choose({0})
    return _reports()


def list_courses(session: Session) -> Route:
    """List every course in the order it was registered."""
    console = session.console
    courses = session.db.courses.all()
    console.clear()
    console.write("Listagem de Disciplinas\n")
    console.write("\n")

    if courses:
        for course in courses:
            console.write(_course_line(course))
        console.write("\n")
        console.write(f"Total de disciplinas: {len(courses)}\n")
    else:
        console.write("Nao existem disciplinas cadastrados.\n")

    _write_back_option(console)
    console.choose({0})
    return _reports()


def list_exceeding_courses(session: Session) -> Route:
    """List the courses with more students than the exceeding threshold."""
    console = session.console
    courses = exceeding_courses(
        session.db.courses.all(), STUDENTS_AMOUNT_TO_BE_CONSIDERED_EXCEEDING
    )
    console.clear()
    console.write("Listagem de Disciplinas Excedentes\n")
    console.write("\n")

    if courses:
        for course in courses:
            console.write(_course_line(course))
        console.write("\n")
        console.write(f"Total de disciplinas excedentes: {len(courses)}\n")
    else:
        console.write("Nao existem disciplinas excedentes.\n")

    _write_back_option(console)
    console.choose({0})
    return _reports()


def course_reports_menu(session: Session, message: Optional[str] = None) -> Route:
    """Show the course reports menu and return the chosen screen."""
    console = session.console
    console.clear()
    console.write("Instituto Federal da Bahia - Relatorio de Disciplinas\n")
    console.write("\n")
    console.write("1 - Detalhar disciplina\n")
    console.write("2 - Listar disciplinas\n")
    console.write("3 - Listar disciplinas excedentes\n")
    console.write("\n")

    if message is not None:
        console.write(f"{message}\n\n")

    console.write("0 - Voltar\n")

    option = console.choose({0, 1, 2, 3})
    if option == 0:
        return Route(Screen.COURSE_MANAGEMENT, (None,))
    if option == 1:
        course = fetch_course(session)
        if course is None:
            return _reports()
        return Route(Screen.COURSE_DETAIL, (course,))
    if option == 2:
        return Route(Screen.COURSE_LIST)
    return Route(Screen.EXCEEDING_COURSES)