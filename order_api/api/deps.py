# order_api/api/deps.py
from uuid import UUID

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from order_api.data.database import get_db
from order_api.services.auth_service import AuthService
from order_api.utils.settings import TOKEN_HEADER


def extract_token(request: Request) -> str | None:
    """Custom header ma pierwszeństwo, potem standardowy Authorization: Bearer."""
    token = request.headers.get(TOKEN_HEADER)
    if token is not None:
        return token

    authorization = request.headers.get("authorization")
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer":
            return credentials
    return None


def get_current_user_id(request: Request, db: Session = Depends(get_db)) -> UUID:
    return AuthService(db).authenticate(extract_token(request))
