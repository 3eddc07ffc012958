"""Unit tests for the Student entity."""

from datetime import date

import pytest

from roster.students import Student


@pytest.mark.unit
class TestFullName:
    """Tests for Student.full_name."""

    def test_first_name_only_when_last_name_empty(self) -> None:
        student = Student(id="S1", first_name="Ana", last_name="")

        assert student.full_name == "Ana"

    def test_first_name_only_when_last_name_none(self) -> None:
        student = Student(id="S1", first_name="Ana", last_name=None)

        assert student.full_name == "Ana"

    def test_first_name_only_when_last_name_whitespace(self) -> None:
        student = Student(id="S1", first_name="Ana", last_name="   ")

        assert student.full_name == "Ana"

    def test_joins_with_single_space(self) -> None:
        student = Student(id="S1", first_name="Ana", last_name="Putri")

        assert student.full_name == "Ana Putri"

    def test_names_containing_spaces(self) -> None:
        student = Student(id="S1", first_name="Maria Clara", last_name="de Souza")

        assert student.full_name == "Maria Clara de Souza"

    def test_reflects_field_changes(self) -> None:
        """full_name is computed on read, not cached."""
        student = Student(id="S1", first_name="Ana")
        student.last_name = "Putri"

        assert student.full_name == "Ana Putri"


@pytest.mark.unit
class TestAgeYears:
    """Tests for Student.age_years."""

    def test_day_before_birthday(self) -> None:
        student = Student(id="S1", first_name="Ana", birth_date=date(2000, 6, 15))

        assert student.age_years(date(2024, 6, 14)) == 23

    def test_on_birthday(self) -> None:
        student = Student(id="S1", first_name="Ana", birth_date=date(2000, 6, 15))

        assert student.age_years(date(2024, 6, 15)) == 24

    def test_later_in_year(self) -> None:
        student = Student(id="S1", first_name="Ana", birth_date=date(2000, 6, 15))

        assert student.age_years(date(2024, 12, 31)) == 24

    def test_earlier_month_same_year(self) -> None:
        student = Student(id="S1", first_name="Ana", birth_date=date(2000, 6, 15))

        assert student.age_years(date(2024, 1, 20)) == 23

    def test_born_today_is_zero(self) -> None:
        student = Student(id="S1", first_name="Ana", birth_date=date(2024, 6, 15))

        assert student.age_years(date(2024, 6, 15)) == 0

    def test_leap_day_birthday_in_common_year(self) -> None:
        student = Student(id="S1", first_name="Ana", birth_date=date(2000, 2, 29))

        assert student.age_years(date(2023, 2, 28)) == 22
        assert student.age_years(date(2023, 3, 1)) == 23
        assert student.age_years(date(2024, 2, 29)) == 24

    def test_defaults_to_current_date(self) -> None:
        today = date.today()
        student = Student(id="S1", first_name="Ana", birth_date=date(today.year - 10, 1, 1))

        assert student.age_years() == 10

    def test_missing_birth_date_raises(self) -> None:
        student = Student(id="S1", first_name="Ana")

        with pytest.raises(ValueError, match="S1"):
            student.age_years(date(2024, 1, 1))


@pytest.mark.unit
class TestStudentFields:
    """The entity accepts any values assigned to it."""

    def test_no_validation_on_construction(self) -> None:
        student = Student(id="", first_name="")

        assert student.id == ""
        assert student.full_name == ""

    def test_repr(self) -> None:
        student = Student(id="S1", first_name="Ana", last_name="Putri")

        assert repr(student) == "<Student(id='S1', full_name='Ana Putri')>"
