import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, Uuid

from order_api.data.database import Base


class UserModel(Base):
    __tablename__ = "users"

    user_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True, index=True)
    # hash hasla (passlib), nigdy plaintext
    password = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
