"""Form state models for the subject entry workflow"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel


class FormStatus(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    INVALID = "invalid"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


class ValidationResult(BaseModel):
    errors: List[str] = []

    @property
    def valid(self) -> bool:
        return all(not error for error in self.errors)


class SubjectFormState(BaseModel):
    selected_class: str = ""
    modal_open: bool = False
    entries: List[str] = [""]
    errors: List[str] = [""]
    status: FormStatus = FormStatus.IDLE
    message: Optional[str] = None  # Confirmation or failure banner
    failure: Optional[str] = None  # server, network or request

    @property
    def is_loading(self) -> bool:
        return self.status == FormStatus.SUBMITTING
