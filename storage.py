"""
🧠 STORAGE — File-based catalog
===============================
The school catalog (classes, days, periods, subjects, teachers) is kept in one
JSON file so edits survive a refresh. Generated timetables are never saved;
every generation starts from scratch.
"""

import json
from pathlib import Path
from typing import Optional

from catalog import default_catalog
from errors import ConfigurationError
from log_config import get_logger
from models import Catalog
from settings import get_settings

logger = get_logger(__name__)

CATALOG_FIELDS = ("classes", "days", "period_layout", "subjects", "teachers_by_subject")


def _catalog_path(path: Optional[Path]) -> Path:
    return Path(path) if path is not None else get_settings().catalog_path


def catalog_to_dict(catalog: Catalog) -> dict:
    """Convert Catalog to JSON-serializable dict."""
    return {
        "classes": list(catalog.classes),
        "days": list(catalog.days),
        "period_layout": list(catalog.period_layout),
        "subjects": list(catalog.subjects),
        "teachers_by_subject": {s: list(t) for s, t in catalog.teachers_by_subject.items()},
    }


def _check_names(field_name: str, values: list) -> None:
    bad = [v for v in values if not isinstance(v, str)]
    if bad:
        raise ConfigurationError(f"{field_name} must contain only names, got {bad[0]!r}")


def catalog_from_dict(d: dict) -> Catalog:
    """Convert dict from JSON back to Catalog. Any malformed part is a ConfigurationError."""
    if not isinstance(d, dict):
        raise ConfigurationError("Catalog must be a JSON object")
    missing = [f for f in CATALOG_FIELDS if f not in d]
    if missing:
        raise ConfigurationError(f"Catalog is missing fields: {', '.join(missing)}")
    if not isinstance(d["teachers_by_subject"], dict):
        raise ConfigurationError("teachers_by_subject must map subject names to teacher lists")
    bad = [s for s, t in d["teachers_by_subject"].items() if not isinstance(t, list)]
    if bad:
        raise ConfigurationError(f"Teachers for {', '.join(bad)} must be a list")
    for field_name in ("classes", "days", "period_layout", "subjects"):
        if not isinstance(d[field_name], list):
            raise ConfigurationError(f"{field_name} must be a list")

    for field_name in ("classes", "days", "subjects"):
        _check_names(field_name, d[field_name])
    for subject, teachers in d["teachers_by_subject"].items():
        _check_names(f"Teachers for {subject}", teachers)
    for period in d["period_layout"]:
        if isinstance(period, bool) or not isinstance(period, (int, str)):
            raise ConfigurationError(
                f"period_layout entries must be period numbers or break names, got {period!r}"
            )

    return Catalog(
        classes=d["classes"],
        days=d["days"],
        period_layout=d["period_layout"],
        subjects=d["subjects"],
        teachers_by_subject={s: list(t) for s, t in d["teachers_by_subject"].items()},
    )


def load_catalog(path: Optional[Path] = None) -> Catalog:
    """Load the catalog from disk. Returns the built-in catalog if no file exists yet."""
    catalog_path = _catalog_path(path)
    if not catalog_path.exists():
        logger.info("catalog_loaded", source="default", path=str(catalog_path))
        return default_catalog()
    try:
        with open(catalog_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Catalog file {catalog_path} is not valid JSON: {e}") from e
    catalog = catalog_from_dict(data)
    logger.info("catalog_loaded", source="file", path=str(catalog_path), classes=len(catalog.classes))
    return catalog


def save_catalog(catalog: Catalog, path: Optional[Path] = None) -> None:
    """Save the catalog to disk. Overwrites existing file."""
    catalog_path = _catalog_path(path)
    catalog_path.parent.mkdir(parents=True, exist_ok=True)
    with open(catalog_path, "w", encoding="utf-8") as f:
        json.dump(catalog_to_dict(catalog), f, indent=2, ensure_ascii=False)
    logger.info("catalog_saved", path=str(catalog_path))


def clear_catalog(path: Optional[Path] = None) -> None:
    """Remove the saved catalog so the built-in one is used again."""
    catalog_path = _catalog_path(path)
    if catalog_path.exists():
        catalog_path.unlink()
