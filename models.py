"""
🧠 DATA MODELS — Baby-level explanation
========================================
These are the little boxes the generator works with:
- Catalog: who the classes are, what the subjects are, who teaches what, and
  what a school day looks like (periods and breaks).
- Slot values: what one cell of the timetable holds: a lesson, a break, or nothing.
- Schedule: the whole weekly grid, one cell per (class, day, period).
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, NamedTuple, Optional, Tuple, Union

from errors import ConfigurationError, ScheduleWriteError


# A teaching period is its number (1, 2, ...); a break is its name ("Recess", "Lunch").
Period = Union[int, str]


def is_break_period(period: Period) -> bool:
    """Breaks are written as names in the period layout, lessons as numbers."""
    return isinstance(period, str)


# ---------------------------------------------------------------------------
# CATALOG
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Catalog:
    """
    Static school setup. Loaded once, never changed.
    - classes: e.g. ["Grade 10-A", "Grade 10-B"]
    - days: e.g. ["Monday", ..., "Friday"]
    - period_layout: lessons and breaks in daily order, e.g. [1, 2, "Recess", 3, 4, "Lunch", 5, 6]
    - subjects: e.g. ["Math", "Science"]
    - teachers_by_subject: subject -> teachers qualified for it, in preference order
    """

    classes: Tuple[str, ...]
    days: Tuple[str, ...]
    period_layout: Tuple[Period, ...]
    subjects: Tuple[str, ...]
    teachers_by_subject: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self):
        # Accept lists and dicts from callers, store read-only copies.
        for label in ("classes", "days", "period_layout", "subjects"):
            if isinstance(getattr(self, label), str):
                raise ConfigurationError(f"{label} must be a list, not a single name")
        bare = [s for s, t in self.teachers_by_subject.items() if isinstance(t, str)]
        if bare:
            names = ", ".join(map(str, bare))
            raise ConfigurationError(f"Teachers for {names} must be a list, not a single name")
        object.__setattr__(self, "classes", tuple(self.classes))
        object.__setattr__(self, "days", tuple(self.days))
        object.__setattr__(self, "period_layout", tuple(self.period_layout))
        object.__setattr__(self, "subjects", tuple(self.subjects))
        object.__setattr__(
            self,
            "teachers_by_subject",
            MappingProxyType({s: tuple(t) for s, t in self.teachers_by_subject.items()}),
        )

    @property
    def teaching_periods(self) -> List[int]:
        """Teaching periods in ascending order, the order they get filled."""
        return sorted(p for p in self.period_layout if not is_break_period(p))

    @property
    def break_periods(self) -> List[str]:
        return [p for p in self.period_layout if is_break_period(p)]


# ---------------------------------------------------------------------------
# SLOT VALUES: exactly one of these lives in every cell
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Assignment:
    """This class has `subject`, taught by `teacher`, in this cell."""

    subject: str
    teacher: str


@dataclass(frozen=True)
class Break:
    """A structural break (Recess, Lunch). Never holds a lesson."""

    kind: str


@dataclass(frozen=True)
class Empty:
    """A teaching period nobody could be found for."""

    def __repr__(self) -> str:
        return "FREE"


FREE = Empty()

SlotValue = Union[Assignment, Break, Empty]


class SlotKey(NamedTuple):
    class_name: str
    day: str
    period: Period


# ---------------------------------------------------------------------------
# SCHEDULE — the flat (class, day, period) table
# ---------------------------------------------------------------------------


class Schedule:
    """
    The weekly grid for every class.

    Every (class, day, period) cell of the catalog exists from the moment the
    schedule is created: breaks hold Break(kind), teaching periods start FREE.
    Cells are never added or removed, break cells are never overwritten, and
    once sealed nothing can be written at all.
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog
        self._cells: Dict[SlotKey, SlotValue] = {}
        self._sealed = False
        for class_name in catalog.classes:
            for day in catalog.days:
                for period in catalog.period_layout:
                    key = SlotKey(class_name, day, period)
                    self._cells[key] = Break(period) if is_break_period(period) else FREE

    def __getitem__(self, key: Tuple[str, str, Period]) -> SlotValue:
        return self._cells[SlotKey(*key)]

    def __contains__(self, key) -> bool:
        return SlotKey(*key) in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[SlotKey]:
        return iter(self._cells)

    def get(self, class_name: str, day: str, period: Period) -> SlotValue:
        return self._cells[SlotKey(class_name, day, period)]

    def items(self) -> Iterator[Tuple[SlotKey, SlotValue]]:
        return iter(self._cells.items())

    @property
    def sealed(self) -> bool:
        return self._sealed

    def place(self, class_name: str, day: str, period: Period, value: SlotValue) -> None:
        """Write a lesson (or FREE) into a teaching cell."""
        if self._sealed:
            raise ScheduleWriteError("Schedule is sealed and can no longer be changed")
        key = SlotKey(class_name, day, period)
        if key not in self._cells:
            raise ScheduleWriteError(f"No such slot: {class_name} / {day} / {period}")
        if is_break_period(period):
            raise ScheduleWriteError(f"{period} is a break and cannot hold a lesson")
        if not isinstance(value, (Assignment, Empty)):
            raise ScheduleWriteError(f"Teaching slots hold a lesson or FREE, not {value!r}")
        self._cells[key] = value

    def seal(self) -> None:
        self._sealed = True

    def assignments(self) -> Iterator[Tuple[SlotKey, Assignment]]:
        """Only the cells that actually hold a lesson."""
        for key, value in self._cells.items():
            if isinstance(value, Assignment):
                yield key, value

    def free_slots(self) -> List[SlotKey]:
        return [key for key, value in self._cells.items() if isinstance(value, Empty)]

    def day_of(self, class_name: str, day: str) -> List[Tuple[Period, SlotValue]]:
        """One class's day in layout order, breaks included."""
        return [
            (period, self._cells[SlotKey(class_name, day, period)])
            for period in self.catalog.period_layout
        ]

    def teacher_at(self, class_name: str, day: str, period: Period) -> Optional[str]:
        value = self._cells[SlotKey(class_name, day, period)]
        return value.teacher if isinstance(value, Assignment) else None
