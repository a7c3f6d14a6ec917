"""Subject routes."""

from typing import List, Optional
from fastapi import APIRouter, Depends

from subjectadmin.config import logger
from subjectadmin.database import SubjectsRepository
from subjectadmin.deps import get_subjects_repository, get_bearer_token
from subjectadmin.models.subject import SubjectsCreate, SubjectsRecord, SubjectsSaved

router = APIRouter(tags=["subjects"])


@router.post("/subjects", response_model=SubjectsSaved)
async def create_subjects(
    payload: SubjectsCreate,
    repository: SubjectsRepository = Depends(get_subjects_repository),
    token: Optional[str] = Depends(get_bearer_token),
):
    """Append a class's subject list to the store"""
    logger.info(
        "Received: %s (bearer token %s)",
        {"className": payload.class_name, "subjects": payload.subjects},
        "present" if token else "absent",
    )

    # Duplicate classes are stored as separate records
    await repository.append(SubjectsRecord(class_name=payload.class_name, subjects=payload.subjects))
    return SubjectsSaved()


@router.get("/subjects", response_model=List[SubjectsRecord])
async def get_subjects(repository: SubjectsRepository = Depends(get_subjects_repository)):
    """Get all submitted subject lists, oldest first"""
    return await repository.list()
