"""
🧠 PDF EXPORT — Baby-level explanation
======================================
Turns the generated timetable into a clean, printable PDF.
- One table per class (or per teacher)
- Rows = periods including breaks, columns = days
- Light theme, A4 landscape
"""

from io import BytesIO
from typing import List

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from grids import INDEX_NAME, class_grid, invert_to_teacher_timetable, teacher_grid
from models import Schedule, is_break_period


def _light_theme_table_style(break_rows: List[int]) -> TableStyle:
    """Light theme: white/gray grid, black text, amber break rows."""
    commands = [
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#f0f0f0")),
        ("TEXTCOLOR", (0, 0), (-1, -1), colors.black),
        ("ALIGN", (0, 0), (-1, -1), "CENTER"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTNAME", (0, 1), (0, -1), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, 0), 10),
        ("FONTSIZE", (0, 1), (-1, -1), 8),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#cccccc")),
    ]
    for row in break_rows:
        commands.append(("BACKGROUND", (0, row), (-1, row), colors.HexColor("#fef3c7")))
        commands.append(("TEXTCOLOR", (0, row), (-1, row), colors.HexColor("#b45309")))
    return TableStyle(commands)


def _grid_table(df: pd.DataFrame, schedule: Schedule) -> Table:
    rows = [[INDEX_NAME] + list(df.columns)]
    for label, values in df.iterrows():
        rows.append([label] + list(values))
    # header is row 0, so layout position i sits in table row i + 1
    break_rows = [
        i + 1 for i, p in enumerate(schedule.catalog.period_layout) if is_break_period(p)
    ]
    day_width = min(4.5 * cm, 22 * cm / max(1, len(df.columns)))
    t = Table(rows, colWidths=[2.5 * cm] + [day_width] * len(df.columns))
    t.setStyle(_light_theme_table_style(break_rows))
    return t


def _build(story: list) -> bytes:
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer, pagesize=landscape(A4), leftMargin=1.5 * cm, rightMargin=1.5 * cm
    )
    doc.build(story)
    return buffer.getvalue()


def export_class_timetables_pdf(schedule: Schedule) -> bytes:
    """Creates a PDF with one table per class, in catalog order."""
    styles = getSampleStyleSheet()
    story = []
    for class_name in schedule.catalog.classes:
        story.append(Paragraph(f"<b>Class: {class_name}</b>", styles["Heading2"]))
        story.append(Spacer(1, 0.3 * cm))
        story.append(_grid_table(class_grid(schedule, class_name), schedule))
        story.append(Spacer(1, 0.8 * cm))
    return _build(story)


def export_teacher_timetables_pdf(schedule: Schedule) -> bytes:
    """Creates a PDF with one table per teacher who has at least one lesson."""
    styles = getSampleStyleSheet()
    story = []
    teacher_timetables = invert_to_teacher_timetable(schedule)
    for teacher in sorted(teacher_timetables):
        story.append(Paragraph(f"<b>Teacher: {teacher}</b>", styles["Heading2"]))
        story.append(Spacer(1, 0.3 * cm))
        story.append(_grid_table(teacher_grid(teacher_timetables[teacher], schedule), schedule))
        story.append(Spacer(1, 0.8 * cm))
    if not story:
        story.append(Paragraph("No lessons scheduled.", styles["Normal"]))
    return _build(story)
