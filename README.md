# schoolbook

A small terminal application for keeping a school's records: students,
teachers and courses. It is driven by numbered menus, with prompts and
messages in Portuguese, and it keeps its data in plain text files.
It has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running

```
schoolbook
schoolbook --root /path/to/school
```

`--root` names the directory that holds the `Data` folder. Without it,
the working directory is used.

The main menu offers:

1. Search people by name (at least 3 characters, case-sensitive)
2. General reports: birthdays of a given month
3. Student management: reports, register, update, delete
4. Teacher management: reports, register, update, delete
5. Course management: reports, register, update, delete

Enter `0` in a menu to go back; `0` in the main menu quits. Where a prompt
says so, typing `cancelar` goes back without saving. The program also stops
quietly at end of input or on Ctrl-C.

Edits in the update screens are kept in memory until `9 - Salvar alteracoes`
is chosen; `0` discards them.

## Where the data lives

Records are kept in three files under `<root>/Data`:

- `Data/students.txt`
- `Data/teachers.txt`
- `Data/courses.txt`

Each line is one record, with fields separated by `;`:

- a person: `registration;name;identification;gender;DD/MM/YYYY`
- a course: `id;name;period;teacher_registration;student,student,...`

A missing file reads as empty. The `Data` directory is not created for you:
create it before the first run, or registering a record fails with an error
message. Updates and deletions rewrite the file through a temporary file in
the same directory.

Registrations and course ids must be unique. Genders are `M`, `F` or `O`;
birthdays must be real dates between the years 1900 and 2100. The CPF field
is stored as typed, without validation.

## Reports

- students and teachers listed in order of registration, by name or by
  birthday, or filtered by gender
- students enrolled in fewer than 3 courses
- courses with more than 40 enrolled students
- full details of one person or one course, with the course's teacher and
  students

## Using it as a library

The storage layer and the queries can be used without the menus:

```python
from schoolbook.storage import open_database, DuplicateRecordError
from schoolbook.models import Person
from schoolbook.dates import parse_date
from schoolbook.reports import birthdays_in_month

db = open_database(".")          # reads ./Data/*.txt

try:
    db.students.add(Person("2024001", "Ana Souza", "00000000000", "F",
                           parse_date("05/03/2001")))
except DuplicateRecordError:
    pass

for student in db.students.all():
    print(student.registration, student.name)

students, teachers = birthdays_in_month(db, 3)
print(db.courses.count_courses_of_student("2024001"))
```

`PersonStore` and `CourseStore` offer `exists`, `add`, `get`, `all`,
`update` and `remove`. `get`, `update` and `remove` raise
`RecordNotFoundError` for an unknown key, `add` raises `DuplicateRecordError`,
and both derive from `StorageError`, which is also raised when a file cannot
be read or written.

`schoolbook.reports` holds `search_persons`, `birthdays_in_month`,
`persons_by_gender`, `students_below_minimum`, `exceeding_courses` and
`summary_line`. `schoolbook.mappers` converts records to and from file
lines, and `schoolbook.dates` parses, formats and validates dates.