"""Subject-related Pydantic models"""

from pydantic import BaseModel, Field, ConfigDict
from typing import List


class SubjectsRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    class_name: str = Field("", alias="className")
    subjects: List[str] = []


class SubjectsCreate(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    class_name: str = Field("", alias="class")
    subjects: List[str] = []


class SubjectsSaved(BaseModel):
    success: bool = True
    message: str = "Subjects saved!"
