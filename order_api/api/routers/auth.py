# order_api/api/routers/auth.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from order_api.data.database import get_db
from order_api.domain.schemas import UserRegister, UserLogin, TokenOut
from order_api.services.user_service import UserService

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/register", response_model=TokenOut)
def register(payload: UserRegister, db: Session = Depends(get_db)):
    return TokenOut(token=UserService(db).register(payload))


@router.post("/login", response_model=TokenOut)
def login(payload: UserLogin, db: Session = Depends(get_db)):
    return TokenOut(token=UserService(db).login(payload))
