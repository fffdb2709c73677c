"""
🧠 TIMETABLE SOLVER — Baby-level explanation
============================================
A greedy filler that walks the weekly grid once and puts a subject + teacher
into every teaching period it can.
Rules:
1. A teacher can't be in two classes at the same time.
2. Breaks stay breaks.
3. If nobody is free for a period, the period stays free. We don't go back
   and shuffle earlier choices around.

For each class and each day we shuffle the subject list (the "rotation") so
days don't all look the same, then hand out subjects in rotation order.
"""

import random
from collections import Counter
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from errors import ConfigurationError
from log_config import get_logger
from models import FREE, Assignment, Catalog, Period, Schedule, SlotValue, is_break_period

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# CATALOG CHECKS
# ---------------------------------------------------------------------------


def _duplicates(names: Sequence) -> List:
    # Non-name entries are reported separately; they may not be hashable.
    names = [n for n in names if isinstance(n, (str, int))]
    return [name for name, count in Counter(names).items() if count > 1]


def validate_catalog(catalog: Catalog) -> None:
    """
    Raise ConfigurationError if the catalog can't produce a timetable.
    Runs before a single slot is assigned.
    """
    problems = _catalog_problems(catalog)
    if problems:
        logger.warning("catalog_invalid", problems=problems)
        raise ConfigurationError("; ".join(problems))


def _catalog_problems(catalog: Catalog) -> List[str]:
    problems = []
    for label, names in (("classes", catalog.classes), ("days", catalog.days), ("subjects", catalog.subjects)):
        if not names:
            problems.append(f"Catalog has no {label}")
        if any(not isinstance(n, str) or not n.strip() for n in names):
            problems.append(f"Catalog {label} must be non-empty names")
        dupes = _duplicates(names)
        if dupes:
            problems.append(f"Duplicate {label}: {', '.join(map(str, dupes))}")

    for period in catalog.period_layout:
        if is_break_period(period):
            if not period.strip():
                problems.append("Break periods need a name")
        elif isinstance(period, bool) or not isinstance(period, int) or period < 1:
            problems.append(f"Invalid period {period!r}: use a positive number or a break name")
    dupes = _duplicates(catalog.period_layout)
    if dupes:
        problems.append(f"Duplicate periods in layout: {', '.join(map(str, dupes))}")
    if not any(isinstance(p, int) and not isinstance(p, bool) for p in catalog.period_layout):
        problems.append("Period layout has no teaching periods")

    teacher_owner: Dict[str, str] = {}
    for subject in (s for s in catalog.subjects if isinstance(s, str)):
        teachers = catalog.teachers_by_subject.get(subject, ())
        if not teachers:
            problems.append(f"Subject {subject} has no qualified teachers")
        for teacher in teachers:
            if not isinstance(teacher, str) or not teacher.strip():
                problems.append(f"Subject {subject} lists a blank teacher name")
                continue
            owner = teacher_owner.setdefault(teacher, subject)
            if owner != subject:
                problems.append(f"Teacher {teacher} is listed for both {owner} and {subject}")
    unknown = [s for s in catalog.teachers_by_subject if s not in catalog.subjects]
    if unknown:
        problems.append(f"Teachers listed for unknown subjects: {', '.join(map(str, unknown))}")
    return problems


# ---------------------------------------------------------------------------
# AVAILABILITY TRACKER
# ---------------------------------------------------------------------------


def is_teacher_free(teacher: str, day: str, period: Period, schedule: Schedule) -> bool:
    """
    Is `teacher` still free at (day, period)?
    Looks at every class's cell for that time. Read-only.
    """
    for class_name in schedule.catalog.classes:
        if schedule.teacher_at(class_name, day, period) == teacher:
            return False
    return True


# ---------------------------------------------------------------------------
# ROTATION
# ---------------------------------------------------------------------------


def make_rotation(subjects: Sequence[str], rng: random.Random) -> List[str]:
    """
    A uniformly random ordering of all subjects (Fisher-Yates via rng.shuffle).
    The input sequence is left untouched.
    """
    rotation = list(subjects)
    rng.shuffle(rotation)
    return rotation


# ---------------------------------------------------------------------------
# SLOT ASSIGNER
# ---------------------------------------------------------------------------


def assign_slot(
    class_name: str,
    day: str,
    period: Period,
    rotation: Sequence[str],
    start_index: int,
    schedule: Schedule,
    teachers_by_subject: Mapping[str, Sequence[str]],
) -> Tuple[SlotValue, int]:
    """
    Fill one (class, day, period).

    Tries every subject once, starting at rotation[start_index] and wrapping
    around. For each subject the teachers are asked in catalog order; the
    first free one gets the lesson.

    Returns (Assignment, 1) on success, (FREE, 0) when nobody fits. The second
    value is how far the caller should move its rotation pointer.
    """
    n = len(rotation)
    for k in range(n):
        subject = rotation[(start_index + k) % n]
        for teacher in teachers_by_subject[subject]:
            if is_teacher_free(teacher, day, period, schedule):
                return Assignment(subject, teacher), 1

    logger.debug("slot_unfilled", class_name=class_name, day=day, period=period)
    return FREE, 0


# ---------------------------------------------------------------------------
# SCHEDULE BUILDER
# ---------------------------------------------------------------------------


def build_schedule(catalog: Catalog, rng: Optional[random.Random] = None) -> Schedule:
    """
    Build the whole week in one greedy pass.

    Classes and days are walked in catalog order, teaching periods in
    ascending order. Each (class, day) gets its own fresh rotation drawn from
    `rng`; pass a seeded random.Random for a reproducible timetable.
    """
    validate_catalog(catalog)
    if rng is None:
        rng = random.Random()

    schedule = Schedule(catalog)
    teaching_periods = catalog.teaching_periods

    for class_name in catalog.classes:
        for day in catalog.days:
            rotation = make_rotation(catalog.subjects, rng)
            pointer = 0
            for period in teaching_periods:
                slot, delta = assign_slot(
                    class_name, day, period, rotation, pointer, schedule, catalog.teachers_by_subject
                )
                schedule.place(class_name, day, period, slot)
                pointer += delta

    schedule.seal()
    return schedule


def generate(catalog: Catalog, rng: Optional[random.Random] = None) -> Schedule:
    """
    The one entry point for callers: catalog in, finished timetable out.
    Raises ConfigurationError if the catalog is broken.
    """
    schedule = build_schedule(catalog, rng)
    free = len(schedule.free_slots())
    assigned = sum(1 for _ in schedule.assignments())
    logger.info(
        "schedule_generated",
        classes=len(catalog.classes),
        days=len(catalog.days),
        assigned=assigned,
        free=free,
    )
    return schedule
