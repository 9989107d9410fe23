import io

import pytest

from schoolbook.console import Console, Route, Screen, Session
from schoolbook.course_forms import (
    course_management_menu,
    create_course,
    delete_course,
    fetch_course,
    update_course,
)
from schoolbook.dates import Date
from schoolbook.models import Course, Person
from schoolbook.storage import open_database


@pytest.fixture
def db(tmp_path):
    (tmp_path / "Data").mkdir()
    database = open_database(tmp_path)
    database.teachers.add(Person("T1", "Ana", "11122233344", "F", Date(5, 3, 1980)))
    database.teachers.add(Person("T2", "Bruno", "55566677788", "M", Date(1, 1, 1975)))
    database.students.add(Person("S1", "Carla", "99988877766", "F", Date(2, 2, 2000)))
    database.students.add(Person("S2", "Davi", "44433322211", "M", Date(3, 3, 2001)))
    return database


def make_session(db, text):
    out = io.StringIO()
    return Session(db, Console(io.StringIO(text), out)), out


def add_course(db, students=()):
    course = Course("MAT01", "Calculo", 1, "T1", [db.students.get(r) for r in students])
    db.courses.add(course)
    return db.courses.get("MAT01")


def test_create_course_stores_it(db):
    session, _ = make_session(db, "MAT01\nCalculo\n2\nT1\n")
    route = create_course(session)
    assert route == Route(Screen.COURSE_MANAGEMENT, ("Disciplina cadastrada com sucesso!",))
    stored = db.courses.get("MAT01")
    assert stored.name == "Calculo"
    assert stored.period == 2
    assert stored.teacher_registration == "T1"
    assert stored.students == []


def test_create_duplicate_course_reports_error(db):
    add_course(db)
    session, _ = make_session(db, "MAT01\nOutro\n3\nT2\n")
    route = create_course(session)
    assert route.args == (
        "Erro ao criar disciplina: Ja existe uma disciplina cadastrada com o codigo fornecido.",
    )
    assert db.courses.get("MAT01").name == "Calculo"


def test_create_course_unknown_teacher_then_cancel(db):
    session, out = make_session(db, "MAT01\nCalculo\n2\nX9\ncancelar\n")
    route = create_course(session)
    assert route == Route(Screen.COURSE_MANAGEMENT, (None,))
    assert "Professor nao encontrado." in out.getvalue()
    assert not db.courses.exists("MAT01")


def test_fetch_course_cancel_returns_none(db):
    session, _ = make_session(db, "cancelar\n")
    assert fetch_course(session) is None


def test_fetch_course_retries_until_found(db):
    stored = add_course(db)
    session, out = make_session(db, "NADA\nMAT01\n")
    assert fetch_course(session) == stored
    assert "Disciplina nao encontrada." in out.getvalue()


def test_update_course_name_and_save(db):
    course = add_course(db)
    session, _ = make_session(db, "1\nAlgebra\n9\n")
    route = update_course(session, course)
    assert route.args == ("Disciplina atualizado com sucesso.",)
    assert db.courses.get("MAT01").name == "Algebra"


def test_update_course_period(db):
    course = add_course(db)
    session, _ = make_session(db, "2\n4\n9\n")
    update_course(session, course)
    assert db.courses.get("MAT01").period == 4


def test_update_course_discard_keeps_stored(db):
    course = add_course(db)
    session, _ = make_session(db, "1\nAlgebra\n0\n")
    route = update_course(session, course)
    assert route.args == ("Alteracoes descartadas.",)
    assert db.courses.get("MAT01").name == "Calculo"
    assert course.name == "Calculo"


def test_update_course_teacher(db):
    course = add_course(db)
    session, out = make_session(db, "3\nZZ\nT2\n9\n")
    update_course(session, course)
    assert db.courses.get("MAT01").teacher_registration == "T2"
    assert "Professor nao encontrado." in out.getvalue()


def test_update_course_add_student(db):
    course = add_course(db)
    session, _ = make_session(db, "4\n+\nS1\n9\n")
    update_course(session, course)
    assert [s.registration for s in db.courses.get("MAT01").students] == ["S1"]


def test_update_course_remove_student(db):
    course = add_course(db, ("S1", "S2"))
    session, _ = make_session(db, "4\n-\nS1\n9\n")
    update_course(session, course)
    assert [s.registration for s in db.courses.get("MAT01").students] == ["S2"]


def test_update_course_invalid_operation(db):
    course = add_course(db, ("S1",))
    session, out = make_session(db, "4\n*\n9\n")
    update_course(session, course)
    assert "Operacao invalida." in out.getvalue()
    assert [s.registration for s in db.courses.get("MAT01").students] == ["S1"]


def test_delete_course_confirm(db):
    course = add_course(db)
    session, _ = make_session(db, "1\n")
    route = delete_course(session, course)
    assert route.args == ("Disciplina excluida com sucesso.",)
    assert not db.courses.exists("MAT01")


def test_delete_course_cancel(db):
    course = add_course(db)
    session, _ = make_session(db, "0\n")
    route = delete_course(session, course)
    assert route.args == ("Operacao cancelada.",)
    assert db.courses.exists("MAT01")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0\n", Route(Screen.MAIN_MENU)),
        ("1\n", Route(Screen.COURSE_REPORTS, (None,))),
        ("2\n", Route(Screen.CREATE_COURSE)),
        ("3\ncancelar\n", Route(Screen.COURSE_MANAGEMENT, (None,))),
    ],
)
def test_management_menu_routes(db, text, expected):
    session, _ = make_session(db, text)
    assert course_management_menu(session) == expected


def test_management_menu_fetches_course_to_delete(db):
    stored = add_course(db)
    session, out = make_session(db, "4\nMAT01\n")
    route = course_management_menu(session, "Aviso")
    assert route == Route(Screen.DELETE_COURSE, (stored,))
    assert "Aviso\n\n" in out.getvalue()