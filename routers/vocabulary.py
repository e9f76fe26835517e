from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from core.database import get_db
from core.security import current_user_id
from schemas.fields import PathId
from schemas.vocabulary import PageQuery, VocabularyCreateIn, VocabularyOut, VocabularyPageOut, VocabularyUpdateIn
from services.vocabulary_service import VocabularyService

router = APIRouter(prefix="/vocabularies", tags=["vocabularies"])


@router.post("", response_model=VocabularyOut, status_code=201)
async def create_vocabulary(
    data: VocabularyCreateIn,
    user_id: UUID = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    svc = VocabularyService(db)
    return VocabularyOut.model_validate(svc.create(user_id=user_id, data=data.model_dump()))


@router.get("", response_model=VocabularyPageOut)
async def list_vocabularies(
    query: Annotated[PageQuery, Query()],
    user_id: UUID = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    svc = VocabularyService(db)
    items, total = svc.list(user_id=user_id, page=query.page, limit=query.limit, search=query.search)
    return {
        "items": [VocabularyOut.model_validate(item) for item in items],
        "total": total,
        "page": query.page,
        "limit": query.limit,
    }


@router.get("/{id}", response_model=VocabularyOut)
async def get_vocabulary(
    id: PathId,
    user_id: UUID = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    svc = VocabularyService(db)
    return VocabularyOut.model_validate(svc.get(user_id=user_id, vocabulary_id=id))


@router.put("/{id}", response_model=VocabularyOut)
async def update_vocabulary(
    id: PathId,
    data: VocabularyUpdateIn,
    user_id: UUID = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    svc = VocabularyService(db)
    entity = svc.update(user_id=user_id, vocabulary_id=id, data=data.model_dump(exclude_unset=True))
    return VocabularyOut.model_validate(entity)


@router.delete("/{id}", status_code=204)
async def delete_vocabulary(
    id: PathId,
    user_id: UUID = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    VocabularyService(db).delete(user_id=user_id, vocabulary_id=id)
    return Response(status_code=204)
