import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, ForeignKey, String, DateTime, Uuid

from order_api.data.database import Base


class OrderModel(Base):
    __tablename__ = "orders"

    order_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.user_id"), nullable=False, index=True)

    note = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
