"""
📚 DEFAULT CATALOG
==================
The built-in school: three classes, six subjects, five days,
six lessons a day with Recess after period 2 and Lunch after period 4.
Used when no catalog file has been saved yet.
"""

from typing import Dict, List

from models import Catalog, Period


RECESS = "Recess"
LUNCH = "Lunch"

DEFAULT_DAYS: List[str] = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
DEFAULT_PERIOD_LAYOUT: List[Period] = [1, 2, RECESS, 3, 4, LUNCH, 5, 6]

DEFAULT_SUBJECTS: List[str] = ["Math", "Science", "English", "History", "Art", "PE"]
DEFAULT_TEACHERS: Dict[str, List[str]] = {
    "Math": ["Mr. Smith", "Ms. Davis"],
    "Science": ["Dr. Jones", "Mr. Wilson"],
    "English": ["Ms. Taylor", "Mr. Brown"],
    "History": ["Mrs. White", "Mr. Green"],
    "Art": ["Ms. Black"],
    "PE": ["Coach Carter"],
}
DEFAULT_CLASSES: List[str] = ["Grade 10-A", "Grade 10-B", "Grade 11-A"]


def default_catalog() -> Catalog:
    """A fresh copy of the built-in catalog."""
    return Catalog(
        classes=DEFAULT_CLASSES,
        days=DEFAULT_DAYS,
        period_layout=DEFAULT_PERIOD_LAYOUT,
        subjects=DEFAULT_SUBJECTS,
        teachers_by_subject=DEFAULT_TEACHERS,
    )
