import logging
from typing import List

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from lesson.domain.Subject import Subject
from lesson.infra.Subject_Repository import SubjectRepository
from lesson.infra.paths import SUBJECTS_FILE
from lesson.logic.importing.csv_importer import CsvImportError, preview_csv
from lesson.logic.quick_add.batch_builder import QuickAddValidationError, build_subjects
from lesson.logic.schedule.time_utils import format_time
from lesson.utilities.constants import COMMON_SUBJECTS, COMMON_TIMES, WEEKDAYS
from lesson.utilities.validators import CsvImportInput, QuickAddInput, SubjectBatchInput, SubjectInput

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


def get_repository() -> SubjectRepository:
    return SubjectRepository(SUBJECTS_FILE)


def _to_subject(payload: SubjectInput) -> Subject:
    subject = Subject.from_dict(payload.model_dump())
    errors = subject.validate()
    if errors:
        raise HTTPException(status_code=422, detail={"errors": errors})
    return subject


# === CRUD ===
@router.get("/subjects")
def list_subjects():
    return [s.to_dict() for s in get_repository().list_subjects()]


@router.post("/subjects", status_code=201)
def create_subject(payload: SubjectInput):
    subject = _to_subject(payload)
    try:
        get_repository().add(subject)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info("Created subject %s (%s)", subject.name, subject.id)
    return subject.to_dict()


@router.put("/subjects/{subject_id}")
def update_subject(subject_id: str, payload: SubjectInput):
    if payload.id and payload.id != subject_id:
        raise HTTPException(status_code=400, detail="Subject id in body does not match the URL")
    payload.id = subject_id
    subject = _to_subject(payload)
    if not get_repository().replace(subject):
        raise HTTPException(status_code=404, detail="Subject not found")
    logger.info("Updated subject %s (%s)", subject.name, subject.id)
    return subject.to_dict()


@router.delete("/subjects/{subject_id}")
def delete_subject(subject_id: str):
    if not get_repository().delete(subject_id):
        raise HTTPException(status_code=404, detail="Subject not found")
    logger.info("Deleted subject %s", subject_id)
    return {"deleted": subject_id}


# === Bulk import ===
@router.post("/subjects/import/preview")
def import_preview(payload: CsvImportInput):
    """Parse pasted CSV; nothing is stored until /subjects/import is called."""
    try:
        preview = preview_csv(payload.csv)
    except CsvImportError as e:
        logger.warning("CSV import rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "count": len(preview.subjects),
        "subjects": [s.to_dict() for s in preview.subjects],
        "warnings": preview.warnings,
    }


@router.post("/subjects/import", status_code=201)
def import_commit(payload: SubjectBatchInput):
    subjects: List[Subject] = [Subject.from_dict(item.model_dump()) for item in payload.subjects]
    try:
        get_repository().add_many(subjects)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"count": len(subjects), "subjects": [s.to_dict() for s in subjects]}


# === Quick add ===
@router.get("/quick-add/options")
def quick_add_options():
    return {
        "subjects": list(COMMON_SUBJECTS),
        "times": [{"value": t, "label": format_time(t)} for t in COMMON_TIMES],
        "days": list(WEEKDAYS),
    }


@router.post("/subjects/quick-add", status_code=201)
def quick_add(payload: QuickAddInput):
    time = payload.time.model_dump() if hasattr(payload.time, "model_dump") else payload.time
    try:
        subjects = build_subjects(payload.subjects, payload.days, time)
    except QuickAddValidationError as e:
        return JSONResponse(status_code=422, content={"errors": e.errors})
    get_repository().add_many(subjects)
    return {"count": len(subjects), "subjects": [s.to_dict() for s in subjects]}
