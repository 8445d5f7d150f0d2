"""Occurrence: one subject placed on one weekday with resolved start/end."""
from lesson.domain.Subject import Subject
from lesson.logic.schedule.time_utils import format_time


class Occurrence:
    def __init__(self, subject: Subject, day: str, start_time: str, end_time: str, color_tag: str):
        self.subject = subject
        self.day = day
        self.start_time = start_time
        self.end_time = end_time
        self.color_tag = color_tag

    def __str__(self) -> str:
        return f"{self.day} {self.start_time}-{self.end_time} {self.subject.name} [{self.color_tag}]"

    __repr__ = __str__

    @property
    def name(self) -> str:
        return self.subject.name

    def to_dict(self):
        return {
            "subjectId": self.subject.id,
            "name": self.subject.name,
            "day": self.day,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "displayStart": format_time(self.start_time),
            "displayEnd": format_time(self.end_time),
            "colorTag": self.color_tag,
            "resources": dict(self.subject.resources),
        }
