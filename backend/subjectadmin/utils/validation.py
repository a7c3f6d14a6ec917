"""Validation utilities for subject entries."""

from typing import List

from subjectadmin.models.form import ValidationResult

MIN_SUBJECT_LENGTH = 2


def validate_subjects(subjects: List[str]) -> ValidationResult:
    """
    Validate subject names for one submission.
    Returns one error message per entry ("" when the entry is fine).
    """
    errors = []
    seen_subjects = set()

    for subject in subjects:
        trimmed = subject.strip()
        key = trimmed.lower()

        if not trimmed:
            errors.append("Subject name is required")
        elif len(trimmed) < MIN_SUBJECT_LENGTH:
            errors.append("Minimum 2 characters required")
        elif key in seen_subjects:
            errors.append("Duplicate subject")
        else:
            errors.append("")
            seen_subjects.add(key)

    return ValidationResult(errors=errors)


def clean_subjects(subjects: List[str]) -> List[str]:
    """Trimmed, non-empty subject names in entry order."""
    return [s.strip() for s in subjects if s.strip()]
