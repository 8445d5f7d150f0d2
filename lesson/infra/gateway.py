"""Persistence gateway: remote subjects API with a local JSON fallback.

``RemoteSubjectApi`` talks to ``{API_URL}/subjects`` and raises
``GatewayError`` on failure. ``SubjectGateway`` wraps it for callers that only
want a yes/no answer: when the API is unreachable it reads and writes the
local file instead.
"""
from __future__ import annotations
import logging
from typing import Any, Iterable, List, Optional

import httpx

from lesson.domain.Subject import Subject
from lesson.infra.Subject_Repository import SubjectRepository
from lesson.infra.paths import LOCAL_SUBJECTS_FILE
from lesson.utilities.config import API_RETRIES, API_TIMEOUT, API_URL

logger = logging.getLogger(__name__)

__all__ = ["GatewayError", "RemoteSubjectApi", "SubjectGateway"]


class GatewayError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RemoteSubjectApi:
    def __init__(self, base_url: str = API_URL, *, timeout: float = API_TIMEOUT, retries: int = API_RETRIES,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.retries = max(0, retries)
        self._transport = transport

    async def _request(self, method: str, endpoint: str, payload: Any = None) -> Any:
        url = f"{self.base_url}{endpoint}"
        logger.debug("API call: %s %s", method, url)
        if payload is not None:
            logger.debug("Request data: %s", payload)
        last_error: Optional[Exception] = None
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            for attempt in range(self.retries + 1):
                try:
                    response = await client.request(method, url, json=payload)
                    break
                except httpx.TransportError as e:
                    last_error = e
                    logger.warning("API %s %s failed (attempt %d/%d): %s", method, endpoint,
                                   attempt + 1, self.retries + 1, e)
            else:
                logger.error("API error: %s %s unreachable at %s", method, endpoint, self.base_url)
                raise GatewayError(f"{method} {endpoint} failed: {last_error}") from last_error
        logger.debug("API response: %s %s - status %s", method, endpoint, response.status_code)
        if response.status_code >= 400:
            logger.error("API error: %s %s - status %s: %s", method, endpoint, response.status_code, response.text)
            raise GatewayError(f"HTTP error! status: {response.status_code}", response.status_code, response.text)
        if not response.content:
            return None
        return response.json()

    async def check_health(self) -> bool:
        try:
            await self._request("GET", "/health")
            return True
        except GatewayError:
            return False

    async def get_subjects(self) -> List[Subject]:
        data = await self._request("GET", "/subjects") or []
        return [Subject.from_dict(entry) for entry in data]

    async def create_subject(self, subject: Subject):
        await self._request("POST", "/subjects", subject.to_dict())

    async def update_subject(self, subject: Subject):
        await self._request("PUT", f"/subjects/{subject.id}", subject.to_dict())

    async def delete_subject(self, subject_id: str):
        await self._request("DELETE", f"/subjects/{subject_id}")


class SubjectGateway:
    """Read/write contract used by clients: every write answers True/False."""

    def __init__(self, remote: Optional[RemoteSubjectApi] = None, local: Optional[SubjectRepository] = None):
        self.remote = remote or RemoteSubjectApi()
        self.local = local or SubjectRepository(LOCAL_SUBJECTS_FILE)
        self.api_connected = False

    async def connect(self) -> bool:
        self.api_connected = await self.remote.check_health()
        if self.api_connected:
            logger.info("Connected to subjects API at %s", self.remote.base_url)
        else:
            logger.warning("Subjects API unavailable, using local storage at %s", self.local.path)
        return self.api_connected

    async def load(self) -> List[Subject]:
        if self.api_connected:
            try:
                subjects = await self.remote.get_subjects()
                logger.info("Loaded %d subject(s) from API", len(subjects))
                return subjects
            except GatewayError as e:
                logger.error("Loading from API failed, falling back to local storage: %s", e)
                self.api_connected = False
        subjects = self.local.list_subjects()
        logger.info("Loaded %d subject(s) from local storage", len(subjects))
        return subjects

    async def save(self, subject: Subject) -> bool:
        return await self.save_many([subject])

    async def save_many(self, subjects: Iterable[Subject]) -> bool:
        subjects = list(subjects)
        stored = 0
        try:
            if self.api_connected:
                for subject in subjects:
                    await self.remote.create_subject(subject)
                    stored += 1
            else:
                self.local.add_many(subjects)
            return True
        except (GatewayError, ValueError, OSError) as e:
            if stored:
                logger.error("Partial save: %d of %d subject(s) were stored remotely before the failure",
                             stored, len(subjects))
            logger.error("Failed to save %d subject(s): %s", len(subjects) - stored, e)
            return False

    async def update(self, subject: Subject) -> bool:
        try:
            if self.api_connected:
                await self.remote.update_subject(subject)
                return True
            return self.local.replace(subject)
        except (GatewayError, OSError) as e:
            logger.error("Failed to update subject %s: %s", subject.id, e)
            return False

    async def delete(self, subject_id: str) -> bool:
        try:
            if self.api_connected:
                await self.remote.delete_subject(subject_id)
                return True
            return self.local.delete(subject_id)
        except (GatewayError, OSError) as e:
            logger.error("Failed to delete subject %s: %s", subject_id, e)
            return False
