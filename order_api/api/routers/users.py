from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from order_api.api.deps import get_current_user_id
from order_api.data.database import get_db
from order_api.services.user_service import UserService
from order_api.domain.schemas import UserRead

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("/me", response_model=UserRead)
def read_me(
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return UserService(db).get_user(user_id)
