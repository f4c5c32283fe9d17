from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from order_api.data.models.user import UserModel


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, user_id: UUID) -> UserModel | None:
        return self.db.get(UserModel, user_id)

    def find_by_email(self, email: str) -> UserModel | None:
        return self.db.execute(
            select(UserModel).where(UserModel.email == email)
        ).scalar_one_or_none()

    def insert(self, first_name: str, last_name: str, email: str, password_hash: str) -> UserModel:
        user = UserModel(
            first_name=first_name,
            last_name=last_name,
            email=email,
            password=password_hash,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user
