"""
📅 SCHOOL SCHEDULER — Streamlit front end
=========================================
- Generate a fresh weekly timetable with one click
- One table per class, breaks included
- Teacher view, free-period insights, PDF export
- Catalog (classes, subjects, teachers, day layout) editable in the sidebar
"""

import random
from typing import Optional

import streamlit as st

from catalog import DEFAULT_PERIOD_LAYOUT
from errors import ConfigurationError
from grids import (
    class_grid,
    find_double_bookings,
    free_period_summary,
    invert_to_teacher_timetable,
    style_grid,
    teacher_grid,
)
from log_config import get_logger, setup_logging
from models import Catalog, is_break_period
from pdf_export import export_class_timetables_pdf, export_teacher_timetables_pdf
from settings import get_settings
from solver import generate
from storage import clear_catalog, load_catalog, save_catalog
from ui_forms import get_edit_buffer_catalog, render_catalog_form


# ---------------------------------------------------------------------------
# PAGE CONFIG
# ---------------------------------------------------------------------------

st.set_page_config(page_title="School Scheduler", page_icon="📅", layout="wide")

settings = get_settings()
setup_logging(settings)
logger = get_logger(__name__)

CSS = """
<style>
    .constraints-box {
        background: #eef2ff;
        border: 1px solid #e0e7ff;
        border-radius: 16px;
        padding: 1.25rem 1.5rem;
        margin-bottom: 1.5rem;
        color: #312e81;
    }
    .constraints-box h4 { color: #312e81 !important; margin-top: 0; }
    .constraints-box li { margin-bottom: 0.35rem; }
</style>
"""
st.markdown(CSS, unsafe_allow_html=True)


# ---------------------------------------------------------------------------
# SESSION STATE
# ---------------------------------------------------------------------------


def _init_session():
    if "catalog" not in st.session_state:
        try:
            st.session_state.catalog = load_catalog()
            st.session_state.catalog_error = None
        except ConfigurationError as e:
            logger.warning("catalog_load_failed", error=str(e))
            st.session_state.catalog = None
            st.session_state.catalog_error = str(e)
    if "schedule" not in st.session_state:
        st.session_state.schedule = None
    if "error" not in st.session_state:
        st.session_state.error = None


_init_session()


def _make_rng() -> random.Random:
    """Seeded from settings when a seed is configured, otherwise fresh every time."""
    seed: Optional[int] = settings.random_seed
    return random.Random(seed) if seed is not None else random.Random()


def _generate_schedule():
    st.session_state.error = None
    catalog: Optional[Catalog] = st.session_state.catalog
    if catalog is None:
        st.session_state.error = st.session_state.catalog_error or "No catalog loaded"
        return
    try:
        with st.spinner("Generating..."):
            st.session_state.schedule = generate(catalog, _make_rng())
    except ConfigurationError as e:
        st.session_state.schedule = None
        st.session_state.error = str(e)


# ---------------------------------------------------------------------------
# SIDEBAR — Catalog editor
# ---------------------------------------------------------------------------

st.sidebar.title("⚙️ School Setup")

if st.session_state.catalog_error:
    st.sidebar.error(st.session_state.catalog_error)


def _on_catalog_save(catalog: Catalog):
    save_catalog(catalog)
    st.session_state.catalog = catalog
    st.session_state.catalog_error = None
    st.session_state.schedule = None
    st.rerun()


def _on_catalog_reset():
    clear_catalog()
    del st.session_state["catalog"]
    st.session_state.schedule = None
    st.rerun()


if st.session_state.catalog is not None:
    with st.sidebar:
        render_catalog_form(
            get_edit_buffer_catalog(st.session_state.catalog), _on_catalog_save, _on_catalog_reset
        )
elif st.sidebar.button("Reset to default catalog"):
    _on_catalog_reset()


# ---------------------------------------------------------------------------
# MAIN
# ---------------------------------------------------------------------------

def _describe_breaks(catalog: Optional[Catalog]) -> str:
    """'Recess after Period 2, Lunch after Period 4' for the current layout."""
    layout = catalog.period_layout if catalog is not None else DEFAULT_PERIOD_LAYOUT
    parts = []
    last_lesson = None
    for period in layout:
        if not is_break_period(period):
            last_lesson = period
        elif last_lesson is None:
            parts.append(f"{period} before the first period")
        else:
            parts.append(f"{period} after Period {last_lesson}")
    return ", ".join(parts) or "none"


col_title, col_button = st.columns([4, 1])
with col_title:
    st.title("📅 School Scheduler")
with col_button:
    if st.button("Generate Schedule", type="primary", key="gen_schedule"):
        _generate_schedule()

st.markdown(
    f"""
<div class="constraints-box">
<h4>Scheduling Constraints Applied</h4>
<ul>
<li>🕓 <b>Built-in Breaks:</b> {_describe_breaks(st.session_state.catalog)}.</li>
<li>👥 <b>No 3 Consecutive Subjects:</b> The default day structure (2 periods → break → 2 periods → break → 2 periods)
keeps students and teachers from sitting through 3 periods in a row.</li>
<li>👤 <b>Teacher Availability:</b> No teacher is ever booked into two classes at the same time.</li>
</ul>
</div>
""",
    unsafe_allow_html=True,
)

if st.session_state.error:
    st.error(f"⚠️ {st.session_state.error}")

schedule = st.session_state.schedule

if schedule is None:
    st.info(
        "**No Schedule Generated**. Click the \"Generate Schedule\" button above "
        "to create a new timetable with the specified constraints."
    )
else:
    tab_classes, tab_teachers, tab_insights, tab_pdf = st.tabs([
        "📋 Class Timetables",
        "👨‍🏫 Teacher Timetables",
        "🔥 Insights",
        "📄 PDF Export",
    ])

    with tab_classes:
        for class_name in schedule.catalog.classes:
            st.subheader(f"👥 {class_name}")
            st.dataframe(style_grid(class_grid(schedule, class_name)), use_container_width=True)

    with tab_teachers:
        teacher_timetables = invert_to_teacher_timetable(schedule)
        for teacher in sorted(teacher_timetables):
            with st.expander(f"👤 {teacher}"):
                st.dataframe(
                    style_grid(teacher_grid(teacher_timetables[teacher], schedule)),
                    use_container_width=True,
                )

    with tab_insights:
        st.subheader("Free periods per class and day")
        st.caption("Periods where every qualified teacher was already teaching another class.")
        st.dataframe(free_period_summary(schedule), use_container_width=True)
        clashes = find_double_bookings(schedule)
        if clashes:
            st.error(f"{len(clashes)} double-booked teacher slots found")
            st.json(clashes)
        else:
            st.success("No teacher is double-booked.")

    with tab_pdf:
        st.download_button(
            "📥 Class timetables (PDF)",
            data=export_class_timetables_pdf(schedule),
            file_name="class_timetables.pdf",
            mime="application/pdf",
        )
        st.download_button(
            "📥 Teacher timetables (PDF)",
            data=export_teacher_timetables_pdf(schedule),
            file_name="teacher_timetables.pdf",
            mime="application/pdf",
        )
