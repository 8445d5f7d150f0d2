from fastapi import (
    FastAPI,
    Request,
    HTTPException,
    Response
)
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from datetime import datetime
import logging

from lesson.infra.pdf_utils import generate_pdf_for_week
from lesson.logic.schedule.grid import layout_week
from lesson.logic.schedule.projector import project, project_week
from lesson.logic.theme.styles import style_declarations
from lesson.utilities.config import TEMPLATES_DIR
from lesson.utilities.constants import WEEKDAYS
from lesson.utilities.export_import import schedule_to_csv

# Routers
from lesson.api.routes import subjects
from lesson.api.routes import theme
from lesson.api.routes.subjects import get_repository

# Logging
logger = logging.getLogger("lesson_app")

# Initialize FastAPI app
app = FastAPI(title="Lesson Planner API")

# Include routers
app.include_router(subjects.router)
app.include_router(theme.router)

# Templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def _ts() -> int:
    """Cache-busting timestamp for the page."""
    return int(datetime.now().timestamp())


# -------------------- UI PAGES --------------------
@app.get("/", response_class=HTMLResponse)
def schedule_page(request: Request):
    subject_list = get_repository().list_subjects()
    grid = layout_week(subject_list)
    styles = style_declarations(theme.load_theme())
    return templates.TemplateResponse(
        request,
        "schedule.html",
        {
            "grid": grid,
            "days": WEEKDAYS,
            "styles": styles,
            "subject_count": len(subject_list),
            "time": _ts(),
        }
    )


# -------------------- API: health --------------------
@app.get("/api/health")
def health():
    return {"status": "ok", "subjects": len(get_repository().list_subjects())}


# -------------------- API: schedule --------------------
@app.get("/api/schedule")
def api_schedule():
    """Week projection: every weekday with its occurrences ordered by start time."""
    week = project_week(get_repository().list_subjects())
    return {
        "days": {day: [occ.to_dict() for occ in occurrences] for day, occurrences in week.items()},
        "counts": {day: len(occurrences) for day, occurrences in week.items()},
    }


@app.get("/api/schedule/{day}")
def api_schedule_day(day: str):
    day = day.lower()
    if day not in WEEKDAYS:
        raise HTTPException(status_code=404, detail="Unknown day")
    occurrences = project(get_repository().list_subjects(), day)
    return {"day": day, "count": len(occurrences), "occurrences": [occ.to_dict() for occ in occurrences]}


# -------------------- Exports --------------------
@app.get("/export_pdf")
def export_pdf():
    pdf_bytes = generate_pdf_for_week(get_repository().list_subjects())
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": "attachment; filename=weekly_schedule.pdf"},
    )


@app.get("/export_csv")
def export_csv():
    return Response(
        content=schedule_to_csv(get_repository().list_subjects()),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=weekly_schedule.csv"},
    )
