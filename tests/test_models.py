from schoolbook.dates import Date
from schoolbook.models import Course, Person, person_birthday_key, person_name_key


def _person(name, birthday=Date()):
    return Person(registration=name.lower(), name=name, birthday=birthday)


def test_default_person_is_blank():
    person = Person()
    assert (person.registration, person.name, person.identification, person.gender) == (
        "",
        "",
        "",
        "",
    )
    assert person.birthday == Date(0, 0, 0)


def test_sort_by_name():
    people = [_person("Carla"), _person("Ana"), _person("Bruno")]
    ordered = sorted(people, key=person_name_key)
    assert [p.name for p in ordered] == ["Ana", "Bruno", "Carla"]


def test_name_order_is_case_sensitive():
    people = [_person("ana"), _person("Zeca")]
    ordered = sorted(people, key=person_name_key)
    assert [p.name for p in ordered] == ["Zeca", "ana"]


def test_sort_by_birthday_year_month_day():
    people = [
        _person("A", Date(10, 5, 2001)),
        _person("B", Date(1, 1, 2002)),
        _person("C", Date(9, 5, 2001)),
        _person("D", Date(30, 4, 2001)),
    ]
    ordered = sorted(people, key=person_birthday_key)
    assert [p.name for p in ordered] == ["D", "C", "A", "B"]


def test_birthday_key_equal_for_same_date():
    first = _person("A", Date(3, 3, 2003))
    second = _person("B", Date(3, 3, 2003))
    assert person_birthday_key(first) == person_birthday_key(second)


def test_course_students_amount_follows_list():
    course = Course(id="MAT1", name="Calculo")
    assert course.students_amount == 0
    course.students.append(_person("Ana"))
    course.students.append(_person("Bia"))
    assert course.students_amount == 2


def test_courses_do_not_share_student_lists():
    first = Course(id="A")
    second = Course(id="B")
    first.students.append(_person("Ana"))
    assert second.students == []