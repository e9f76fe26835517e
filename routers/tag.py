from uuid import UUID

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from core.database import get_db
from core.security import current_user_id
from schemas.fields import PathId
from schemas.tag import TagCreateIn, TagOut, TagUpdateIn
from services.tag_service import TagService

router = APIRouter(prefix="/tags", tags=["tags"])


@router.post("", response_model=TagOut, status_code=201)
async def create_tag(
    data: TagCreateIn,
    user_id: UUID = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    tag = TagService(db).create(user_id=user_id, name=data.name, color=data.color)
    return TagOut.model_validate(tag)


@router.get("", response_model=list[TagOut])
async def list_tags(
    user_id: UUID = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    return [TagOut.model_validate(tag) for tag in TagService(db).list(user_id)]


@router.put("/{id}", response_model=TagOut)
async def update_tag(
    id: PathId,
    data: TagUpdateIn,
    user_id: UUID = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    tag = TagService(db).update(user_id=user_id, tag_id=id, data=data.model_dump(exclude_unset=True))
    return TagOut.model_validate(tag)


@router.delete("/{id}", status_code=204)
async def delete_tag(
    id: PathId,
    user_id: UUID = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    TagService(db).delete(user_id=user_id, tag_id=id)
    return Response(status_code=204)
