import io
from xml.sax.saxutils import escape
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from lesson.logic.schedule.projector import project_week
from lesson.logic.schedule.time_utils import format_time
from lesson.utilities.constants import WEEKDAYS


def generate_pdf_for_week(subjects, title: str = "Weekly Schedule"):
    """Generate a PDF table with one column per weekday, subjects listed by start time."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(title, styles["Title"]),
        Spacer(1, 16),
    ]

    week = project_week(subjects)
    depth = max((len(occ) for occ in week.values()), default=0)
    data = [[day.capitalize() for day in WEEKDAYS]]
    for i in range(depth):
        row = []
        for day in WEEKDAYS:
            occurrences = week[day]
            if i < len(occurrences):
                occ = occurrences[i]
                when = format_time(occ.start_time)
                if occ.end_time != occ.start_time:
                    when = f"{when} - {format_time(occ.end_time)}"
                row.append(Paragraph(f"<b>{when}</b><br/>{escape(occ.name)}", styles["BodyText"]))
            else:
                row.append("")
        data.append(row)
    if depth == 0:
        data.append(["No subjects scheduled"] + [""] * (len(WEEKDAYS) - 1))

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#6366f1")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (-1,0), "CENTER"),
        ("VALIGN", (0,1), (-1,-1), "TOP"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
