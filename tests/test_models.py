import pytest

from errors import ConfigurationError, ScheduleWriteError
from models import FREE, Assignment, Break, Catalog, Empty, Schedule, SlotKey, is_break_period


def test_catalog_normalizes_to_read_only_values():
    cat = Catalog(
        classes=["A"],
        days=["Mon"],
        period_layout=[1, "Lunch", 2],
        subjects=["Math"],
        teachers_by_subject={"Math": ["T1", "T2"]},
    )
    assert cat.classes == ("A",)
    assert cat.teachers_by_subject["Math"] == ("T1", "T2")
    with pytest.raises(TypeError):
        cat.teachers_by_subject["Art"] = ("T3",)


def test_bare_string_teacher_list_is_rejected():
    with pytest.raises(ConfigurationError, match="Teachers for Math must be a list"):
        Catalog(
            classes=["A"],
            days=["Mon"],
            period_layout=[1],
            subjects=["Math"],
            teachers_by_subject={"Math": "Mr. Smith"},
        )


def test_bare_string_class_list_is_rejected():
    with pytest.raises(ConfigurationError, match="classes must be a list"):
        Catalog(classes="Grade 10-A", days=["Mon"], period_layout=[1], subjects=["Math"])


def test_teaching_periods_are_sorted_and_breaks_kept_in_order():
    cat = Catalog(
        classes=["A"],
        days=["Mon"],
        period_layout=[3, 1, "Recess", 2, "Lunch"],
        subjects=["Math"],
        teachers_by_subject={"Math": ["T1"]},
    )
    assert cat.teaching_periods == [1, 2, 3]
    assert cat.break_periods == ["Recess", "Lunch"]


def test_is_break_period():
    assert is_break_period("Recess")
    assert not is_break_period(4)


def test_free_is_the_empty_variant():
    assert isinstance(FREE, Empty)
    assert FREE == Empty()
    assert repr(FREE) == "FREE"


def test_new_schedule_has_every_cell(school):
    schedule = Schedule(school)
    expected = len(school.classes) * len(school.days) * len(school.period_layout)
    assert len(schedule) == expected
    for class_name in school.classes:
        for day in school.days:
            for period in school.period_layout:
                assert (class_name, day, period) in schedule


def test_new_schedule_breaks_hold_markers_and_lessons_start_free(school):
    schedule = Schedule(school)
    assert schedule.get("Grade 10-A", "Monday", "Recess") == Break("Recess")
    assert schedule.get("Grade 10-A", "Friday", "Lunch") == Break("Lunch")
    assert schedule.get("Grade 10-B", "Tuesday", 3) is FREE
    assert len(schedule.free_slots()) == len(school.classes) * len(school.days) * 6


def test_place_writes_a_lesson(two_subject_day):
    schedule = Schedule(two_subject_day)
    schedule.place("A", "Monday", 1, Assignment("Math", "T1"))
    assert schedule[("A", "Monday", 1)] == Assignment("Math", "T1")
    assert schedule.teacher_at("A", "Monday", 1) == "T1"
    assert schedule.teacher_at("A", "Monday", 2) is None
    assert list(schedule.assignments()) == [(SlotKey("A", "Monday", 1), Assignment("Math", "T1"))]


def test_place_refuses_break_cells(school):
    schedule = Schedule(school)
    with pytest.raises(ScheduleWriteError):
        schedule.place("Grade 10-A", "Monday", "Lunch", Assignment("Math", "Mr. Smith"))
    assert schedule.get("Grade 10-A", "Monday", "Lunch") == Break("Lunch")


def test_place_refuses_unknown_cells(two_subject_day):
    schedule = Schedule(two_subject_day)
    with pytest.raises(ScheduleWriteError):
        schedule.place("A", "Tuesday", 1, Assignment("Math", "T1"))
    with pytest.raises(ScheduleWriteError):
        schedule.place("A", "Monday", 7, Assignment("Math", "T1"))
    assert len(schedule) == 2


def test_place_refuses_break_values_in_teaching_cells(two_subject_day):
    schedule = Schedule(two_subject_day)
    with pytest.raises(ScheduleWriteError):
        schedule.place("A", "Monday", 1, Break("Recess"))


def test_sealed_schedule_is_read_only(two_subject_day):
    schedule = Schedule(two_subject_day)
    schedule.seal()
    assert schedule.sealed
    with pytest.raises(ScheduleWriteError):
        schedule.place("A", "Monday", 1, FREE)


def test_day_of_follows_layout_order(school):
    schedule = Schedule(school)
    periods = [p for p, _ in schedule.day_of("Grade 11-A", "Wednesday")]
    assert periods == [1, 2, "Recess", 3, 4, "Lunch", 5, 6]
