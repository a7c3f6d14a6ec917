"""Pydantic models for the subject admin application"""

from .subject import SubjectsRecord, SubjectsCreate, SubjectsSaved
from .form import FormStatus, ValidationResult, SubjectFormState
