"""
Input validation schemas using Pydantic for the subjects API.
"""
import re
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Dict, List, Optional, Union

from lesson.utilities.constants import WEEKDAYS

TIME_PATTERN = r'^([01]?\d|2[0-3]):[0-5]\d$'
OPTIONAL_TIME_PATTERN = r'^(([01]?\d|2[0-3]):[0-5]\d)?$'
LINK_PATTERN = r'^https?://\S+$'


class ResourcesInput(BaseModel):
    """Schema for subject resource links."""
    bookLink: str = ""
    googleDocLink: str = ""

    @field_validator('bookLink', 'googleDocLink')
    @classmethod
    def validate_link(cls, v):
        """Empty, or an http(s) URL."""
        v = v.strip() if isinstance(v, str) else v
        if v and not re.match(LINK_PATTERN, v, re.IGNORECASE):
            raise ValueError('Link must start with http:// or https://')
        return v


class FrequencyInput(BaseModel):
    daysPerWeek: int = Field(0, ge=0, le=5)
    selectedDays: List[str] = Field(default_factory=list)

    @field_validator('selectedDays')
    @classmethod
    def validate_days(cls, v):
        """Lower-case, reject unknown weekdays and duplicates."""
        days = [d.strip().lower() for d in v]
        unknown = [d for d in days if d not in WEEKDAYS]
        if unknown:
            raise ValueError(f"Unknown day(s): {', '.join(unknown)}")
        if len(set(days)) != len(days):
            raise ValueError('Duplicate days are not allowed')
        return days

    @model_validator(mode='after')
    def check_count(self):
        if self.daysPerWeek and self.daysPerWeek != len(self.selectedDays):
            raise ValueError(f'Please select {self.daysPerWeek} day(s)')
        return self


class SubjectInput(BaseModel):
    """Schema for a subject as sent by the client (JSON wire shape)."""
    id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=200)
    times: Dict[str, str] = Field(default_factory=dict)
    startTime: str = Field("", pattern=OPTIONAL_TIME_PATTERN)
    endTime: str = Field("", pattern=OPTIONAL_TIME_PATTERN)
    resources: ResourcesInput = Field(default_factory=ResourcesInput)
    frequency: FrequencyInput = Field(default_factory=FrequencyInput)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Subject name is required')
        return v.strip()

    @field_validator('times')
    @classmethod
    def validate_times(cls, v):
        """Only weekday keys; values empty or H:MM."""
        cleaned = {}
        for day, time in v.items():
            key = day.strip().lower()
            if key not in WEEKDAYS:
                raise ValueError(f'Unknown day: {day}')
            time = (time or '').strip()
            if time and not re.match(TIME_PATTERN, time):
                raise ValueError(f'Invalid time for {key}: {time}')
            cleaned[key] = time
        return cleaned

    @model_validator(mode='after')
    def check_time_range(self):
        if self.startTime and self.endTime and self.startTime.zfill(5) >= self.endTime.zfill(5):
            raise ValueError('End time must be after start time')
        return self


class CsvImportInput(BaseModel):
    """Schema for a pasted spreadsheet."""
    csv: str = Field(..., min_length=1)


class SubjectBatchInput(BaseModel):
    subjects: List[SubjectInput] = Field(default_factory=list)


class TimeRangeInput(BaseModel):
    start: str = ""
    end: str = ""


class QuickAddInput(BaseModel):
    """Schema for quick-add; field-level checks happen in the batch builder."""
    subjects: List[str] = Field(default_factory=list)
    days: List[str] = Field(default_factory=list)
    time: Optional[Union[str, TimeRangeInput]] = None


class ThemeInput(BaseModel):
    currentPreset: str = Field('indigo-purple', min_length=1)
    customColors: Dict[str, str] = Field(default_factory=dict)
    isDarkMode: bool = False

    @field_validator('customColors')
    @classmethod
    def validate_colors(cls, v):
        """Keep only #rrggbb values."""
        return {k: c for k, c in v.items() if isinstance(c, str) and re.match(r'^#[0-9a-fA-F]{6}$', c)}
