import random

import pytest

from catalog import default_catalog
from models import Catalog
from settings import reset_settings


@pytest.fixture
def school():
    """The built-in three-class catalog."""
    return default_catalog()


@pytest.fixture
def two_subject_day():
    """One class, one day, Math/Science with one teacher each, two periods."""
    return Catalog(
        classes=["A"],
        days=["Monday"],
        period_layout=[1, 2],
        subjects=["Math", "Science"],
        teachers_by_subject={"Math": ["T1"], "Science": ["T2"]},
    )


@pytest.fixture
def one_teacher_two_classes():
    """Two classes competing for a single Math teacher in a single period."""
    return Catalog(
        classes=["A", "B"],
        days=["Monday"],
        period_layout=[1],
        subjects=["Math"],
        teachers_by_subject={"Math": ["T1"]},
    )


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch, tmp_path):
    """Every test gets its own data dir and re-reads settings."""
    monkeypatch.setenv("SCHEDULER_DATA_DIR", str(tmp_path / "data"))
    reset_settings()
    yield
    reset_settings()
