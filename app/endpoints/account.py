from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models.user import User
from app.schemas.response import APIResponse
from app.schemas.user import User as UserSchema, LineManagerUpdate
from app.services.user import user_service
from app.utils import deps

router = APIRouter()

@router.get("/me", response_model=APIResponse[UserSchema])
def read_users_me(current_user: User = Depends(deps.get_current_user)):
    return APIResponse(message="User profile fetched successfully", data=UserSchema.model_validate(current_user))

@router.put("/line-manager", response_model=APIResponse[UserSchema])
def update_line_manager(
    *,
    db: Session = Depends(get_db),
    manager_in: LineManagerUpdate,
    current_user: User = Depends(deps.get_current_user)
):
    updated_user = user_service.set_line_manager(db, user=current_user, manager_id=manager_in.line_manager_id)
    return APIResponse(message="Line manager updated successfully", data=UserSchema.model_validate(updated_user))
