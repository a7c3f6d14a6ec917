"""
Subjects store - repository interface + in-memory implementation.
"""

from abc import ABC, abstractmethod
from typing import List

from subjectadmin.models.subject import SubjectsRecord


class SubjectsRepository(ABC):
    """Append-only store of submitted subject lists."""

    @abstractmethod
    async def append(self, record: SubjectsRecord) -> None:
        ...

    @abstractmethod
    async def list(self) -> List[SubjectsRecord]:
        ...


class InMemorySubjectsRepository(SubjectsRepository):
    """Keeps records in process memory; lost on restart."""

    def __init__(self):
        self._records: List[SubjectsRecord] = []

    async def append(self, record: SubjectsRecord) -> None:
        self._records.append(record)

    async def list(self) -> List[SubjectsRecord]:
        return list(self._records)

    def __len__(self):
        return len(self._records)
