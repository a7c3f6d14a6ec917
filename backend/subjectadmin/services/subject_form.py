"""
Subject form workflow - entries, validation, submission and reset.

The form's state lives in a SubjectFormState passed in (or created) at
construction and mutated only through the operations below:

    idle -> validating -> invalid
                       -> submitting -> success -> idle (after a delay)
                                     -> failed
"""

import asyncio
from typing import Callable, List, Optional

from subjectadmin.config import logger, SCHOOL_CLASSES, SUCCESS_RESET_DELAY
from subjectadmin.errors import SubmissionError
from subjectadmin.models.form import FormStatus, SubjectFormState
from subjectadmin.services.subjects_api import SubjectsApiClient
from subjectadmin.utils.validation import validate_subjects, clean_subjects

SUCCESS_MESSAGE = "Subjects saved successfully!"
CLASS_REQUIRED_MESSAGE = "Choose a class"

StateListener = Callable[[SubjectFormState], None]


class SubjectFormWorkflow:
    def __init__(
        self,
        api_client: SubjectsApiClient,
        state: Optional[SubjectFormState] = None,
        reset_delay: float = SUCCESS_RESET_DELAY,
        classes: List[str] = SCHOOL_CLASSES,
    ):
        self.api_client = api_client
        self.state = state if state is not None else SubjectFormState()
        self.reset_delay = reset_delay
        self.classes = classes
        self._listeners: List[StateListener] = []

    def subscribe(self, listener: StateListener):
        """Call `listener` with the state after every status change."""
        self._listeners.append(listener)

    def select_class(self, class_name: str):
        if class_name and class_name not in self.classes:
            raise ValueError(f"Unknown class: {class_name}")
        self.state.selected_class = class_name

    def open_modal(self) -> bool:
        """Open the entry modal. Needs a selected class."""
        if not self.state.selected_class:
            return False
        self.state.modal_open = True
        return True

    def close_modal(self):
        self.state.modal_open = False
        self.state.entries = [""]
        self.state.errors = [""]
        if self.state.status != FormStatus.SUBMITTING:
            self._transition(FormStatus.IDLE, message=None, failure=None)

    def add_entry(self):
        self.state.entries.append("")
        self.state.errors.append("")

    def remove_entry(self, index: int):
        if len(self.state.entries) == 1 or not 0 <= index < len(self.state.entries):
            return
        self.state.entries.pop(index)
        if index < len(self.state.errors):
            self.state.errors.pop(index)

    def update_entry(self, index: int, value: str):
        self.state.entries[index] = value

    async def submit(self) -> bool:
        """Validate and send the entries. Returns True once the form has been saved and reset."""
        if self.state.status == FormStatus.SUBMITTING:
            logger.warning("Submission already in flight, ignoring submit")
            return False

        self._transition(FormStatus.VALIDATING, message=None, failure=None)
        result = validate_subjects(self.state.entries)
        self.state.errors = result.errors
        if not self.state.selected_class:
            self._transition(FormStatus.INVALID, message=CLASS_REQUIRED_MESSAGE)
            return False
        if not result.valid:
            self._transition(FormStatus.INVALID)
            return False

        class_name = self.state.selected_class
        subjects = clean_subjects(self.state.entries)
        self._transition(FormStatus.SUBMITTING)

        try:
            await self.api_client.create_subjects(class_name, subjects)
        except SubmissionError as e:
            logger.error(f"❌ Saving subjects for {class_name} failed ({e.kind}): {e.message}")
            self._transition(FormStatus.FAILED, message=e.message, failure=e.kind)
            return False

        logger.info(f"✅ Saved {len(subjects)} subjects for {class_name}")
        self._transition(FormStatus.SUCCESS, message=SUCCESS_MESSAGE)

        await asyncio.sleep(self.reset_delay)
        self._reset()
        return True

    def _reset(self):
        self.state.modal_open = False
        self.state.entries = [""]
        self.state.errors = [""]
        self._transition(FormStatus.IDLE, message=None, failure=None)

    def _transition(self, status: FormStatus, **changes):
        for field, value in changes.items():
            setattr(self.state, field, value)
        self.state.status = status
        for listener in self._listeners:
            listener(self.state)
