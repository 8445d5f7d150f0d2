"""Subject repository: ordered subject list persisted as one JSON file."""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional, Union

from lesson.domain.Subject import Subject
from lesson.infra.paths import SUBJECTS_FILE

logger = logging.getLogger(__name__)


class SubjectRepository:
    def __init__(self, path: Union[str, Path, None] = None):
        self.path = Path(path) if path else SUBJECTS_FILE

    # --- file helpers ---------------------------------------------------
    def _load_raw(self) -> list:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            return []
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in subjects file {self.path}: {e}")
            return []
        if not isinstance(data, list):
            logger.error(f"Subjects file {self.path} does not hold a list; ignoring it")
            return []
        return data

    def _atomic_write(self, subjects: List[Subject]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".subjects_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump([s.to_dict() for s in subjects], tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    # --- queries --------------------------------------------------------
    def list_subjects(self) -> List[Subject]:
        return [Subject.from_dict(entry) for entry in self._load_raw() if isinstance(entry, dict)]

    def get(self, subject_id: str) -> Optional[Subject]:
        return next((s for s in self.list_subjects() if s.id == subject_id), None)

    # --- commands -------------------------------------------------------
    def add(self, subject: Subject) -> Subject:
        self.add_many([subject])
        return subject

    def add_many(self, new_subjects: Iterable[Subject]) -> List[Subject]:
        '''Append subjects in order; the whole batch is rejected on a duplicate id.'''
        new_subjects = list(new_subjects)
        subjects = self.list_subjects()
        known = {s.id for s in subjects}
        for subject in new_subjects:
            if subject.id in known:
                raise ValueError(f"Subject with id {subject.id} already exists")
            known.add(subject.id)
        subjects.extend(new_subjects)
        self._atomic_write(subjects)
        logger.info("Stored %d new subject(s) in %s", len(new_subjects), self.path)
        return new_subjects

    def replace(self, subject: Subject) -> bool:
        '''Full replace by id, keeping the position in the list.'''
        subjects = self.list_subjects()
        for i, existing in enumerate(subjects):
            if existing.id == subject.id:
                subjects[i] = subject
                self._atomic_write(subjects)
                return True
        return False

    def delete(self, subject_id: str) -> bool:
        subjects = self.list_subjects()
        remaining = [s for s in subjects if s.id != subject_id]
        if len(remaining) == len(subjects):
            return False
        self._atomic_write(remaining)
        return True

    def save_all(self, subjects: Iterable[Subject]):
        self._atomic_write(list(subjects))
