"""
🧠 UI FORMS — st.form() to prevent screen jump while typing
==========================================================
One form edits the whole catalog. Nothing reruns until Save.
Uses an edit buffer (plain strings) for prefilled values, never widget keys.
"""

from typing import Callable, Dict, List

import streamlit as st

from models import Catalog, Period


def parse_names(text: str) -> List[str]:
    """'A, B,,C' -> ['A', 'B', 'C']"""
    return [s.strip() for s in text.split(",") if s.strip()]


def parse_layout(text: str) -> List[Period]:
    """'1, 2, Recess, 3' -> [1, 2, 'Recess', 3]. Numbers are lessons, words are breaks."""
    layout: List[Period] = []
    for token in parse_names(text):
        layout.append(int(token) if token.isdigit() else token)
    return layout


def parse_teacher_lines(text: str) -> Dict[str, List[str]]:
    """
    One subject per line: 'Math: Mr. Smith, Ms. Davis'.
    A subject with nothing after the colon keeps an empty list, so the
    generator can report it instead of silently dropping it.
    """
    result: Dict[str, List[str]] = {}
    for line in text.strip().split("\n"):
        if not line.strip():
            continue
        subject, _, teachers = line.partition(":")
        subject = subject.strip()
        if subject:
            result[subject] = parse_names(teachers)
    return result


def get_edit_buffer_catalog(catalog: Catalog) -> dict:
    """Build edit buffer for the catalog form."""
    return {
        "classes": ", ".join(catalog.classes),
        "days": ", ".join(catalog.days),
        "layout": ", ".join(str(p) for p in catalog.period_layout),
        "teachers": "\n".join(
            f"{s}: {', '.join(catalog.teachers_by_subject.get(s, ()))}" for s in catalog.subjects
        ),
    }


def catalog_from_buffer(form_data: dict) -> Catalog:
    teachers = parse_teacher_lines(form_data["teachers"])
    return Catalog(
        classes=parse_names(form_data["classes"]),
        days=parse_names(form_data["days"]),
        period_layout=parse_layout(form_data["layout"]),
        subjects=list(teachers),
        teachers_by_subject=teachers,
    )


def render_catalog_form(
    form_data: dict,
    on_save: Callable[[Catalog], None],
    on_reset: Callable[[], None],
) -> None:
    """Catalog form inside st.form(). No reruns while typing."""
    with st.form("catalog_form", clear_on_submit=False):
        classes = st.text_input(
            "Classes (comma-separated)",
            value=form_data["classes"],
            key="cat_classes",
            placeholder="Grade 10-A, Grade 10-B",
        )
        days = st.text_input(
            "Days (comma-separated)",
            value=form_data["days"],
            key="cat_days",
        )
        layout = st.text_input(
            "Day layout (numbers = lessons, names = breaks)",
            value=form_data["layout"],
            key="cat_layout",
            placeholder="1, 2, Recess, 3, 4, Lunch, 5, 6",
        )
        st.markdown("**Subjects** (one per line: subject: teacher, teacher)")
        teachers = st.text_area(
            "Subjects",
            value=form_data["teachers"],
            key="cat_teachers",
            placeholder="Math: Mr. Smith, Ms. Davis\nArt: Ms. Black",
            height=160,
        )

        col_save, col_reset = st.columns(2)
        with col_save:
            submitted = st.form_submit_button("Save Catalog")
        with col_reset:
            reset_clicked = st.form_submit_button("Reset to default")

    if reset_clicked:
        on_reset()
        return
    if submitted:
        on_save(
            catalog_from_buffer(
                {"classes": classes, "days": days, "layout": layout, "teachers": teachers}
            )
        )
