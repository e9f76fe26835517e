from uuid import UUID

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from core.database import get_db
from core.security import current_user_id
from schemas.user import RegisterIn, UserOut, UserSettingsIn, UserSettingsOut
from services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserOut, status_code=201)
async def register(
    data: RegisterIn,
    db: Session = Depends(get_db),
):
    svc = UserService(db)
    user = svc.register(email=data.email, password=data.password, name=data.name)
    return UserOut.model_validate(user)


@router.get("/me", response_model=UserOut)
async def me(
    user_id: UUID = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    return UserOut.model_validate(UserService(db).get(user_id))


@router.get("/me/settings", response_model=UserSettingsOut)
async def get_settings(
    user_id: UUID = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    return {"settings": UserService(db).get_settings(user_id)}


@router.put("/me/settings", response_model=UserSettingsOut)
async def update_settings(
    data: UserSettingsIn,
    user_id: UUID = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    changes = data.model_dump(by_alias=True, exclude_none=True)
    return {"settings": UserService(db).update_settings(user_id, changes)}


@router.delete("/me", status_code=204)
async def delete_me(
    user_id: UUID = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    UserService(db).delete(user_id)
    return Response(status_code=204)
