"""
🔥 GRID VIEWS
=============
Turns a Schedule into pandas tables for display:
- one grid per class (rows = periods incl. breaks, columns = days)
- one grid per teacher
- free-period counts and a double-booking check
"""

from typing import Dict, List, Tuple

import pandas as pd

from models import Assignment, Break, Period, Schedule, SlotValue, is_break_period

FREE_LABEL = "Free Period"
INDEX_NAME = "Time / Day"


def period_label(period: Period) -> str:
    """1 -> 'Period 1', 'Lunch' -> 'Lunch'."""
    return period if is_break_period(period) else f"Period {period}"


def cell_label(value: SlotValue) -> str:
    if isinstance(value, Assignment):
        return f"{value.subject} ({value.teacher})"
    if isinstance(value, Break):
        return f"{value.kind} Break"
    return FREE_LABEL


def class_grid(schedule: Schedule, class_name: str) -> pd.DataFrame:
    """Rows = every period of the day (breaks too), cols = days."""
    catalog = schedule.catalog
    data = {
        day: [cell_label(value) for _, value in schedule.day_of(class_name, day)]
        for day in catalog.days
    }
    index = pd.Index([period_label(p) for p in catalog.period_layout], name=INDEX_NAME)
    return pd.DataFrame(data, index=index, columns=list(catalog.days))


def invert_to_teacher_timetable(
    schedule: Schedule,
) -> Dict[str, Dict[Tuple[str, Period], Tuple[str, str]]]:
    """
    "Inverts" the class timetable: for each teacher, (day, period) -> (class, subject).
    Teachers with no lessons at all don't appear.
    """
    teacher_schedules: Dict[str, Dict[Tuple[str, Period], Tuple[str, str]]] = {}
    for key, lesson in schedule.assignments():
        teacher_schedules.setdefault(lesson.teacher, {})[(key.day, key.period)] = (
            key.class_name,
            lesson.subject,
        )
    return teacher_schedules


def teacher_grid(
    teacher_timetable: Dict[Tuple[str, Period], Tuple[str, str]],
    schedule: Schedule,
) -> pd.DataFrame:
    """Same shape as class_grid, cells say which class the teacher is with."""
    catalog = schedule.catalog
    data = {}
    for day in catalog.days:
        column = []
        for period in catalog.period_layout:
            if is_break_period(period):
                column.append(f"{period} Break")
            elif (day, period) in teacher_timetable:
                class_name, subject = teacher_timetable[(day, period)]
                column.append(f"{class_name}: {subject}")
            else:
                column.append(FREE_LABEL)
        data[day] = column
    index = pd.Index([period_label(p) for p in catalog.period_layout], name=INDEX_NAME)
    return pd.DataFrame(data, index=index, columns=list(catalog.days))


def free_period_summary(schedule: Schedule) -> pd.DataFrame:
    """Rows = classes, cols = days, value = how many teaching periods stayed free."""
    catalog = schedule.catalog
    counts = pd.DataFrame(0, index=list(catalog.classes), columns=list(catalog.days))
    for key in schedule.free_slots():
        counts.loc[key.class_name, key.day] += 1
    return counts


def find_double_bookings(schedule: Schedule) -> List[dict]:
    """Every (day, period, teacher) that shows up in more than one class. Should be empty."""
    seen: Dict[Tuple[str, Period, str], List[str]] = {}
    for key, lesson in schedule.assignments():
        seen.setdefault((key.day, key.period, lesson.teacher), []).append(key.class_name)
    return [
        {"day": day, "period": period, "teacher": teacher, "classes": classes}
        for (day, period, teacher), classes in seen.items()
        if len(classes) > 1
    ]


def cell_style(label: str) -> str:
    """Amber for breaks, grey italics for free periods, nothing for lessons."""
    if label.endswith(" Break"):
        return "background-color: #fef3c7; color: #b45309; font-style: italic;"
    if label == FREE_LABEL:
        return "color: #a3a3a3; font-style: italic;"
    return ""


def style_grid(df: pd.DataFrame):
    return df.style.map(cell_style)
