import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, ForeignKey, String, DateTime, Uuid, UniqueConstraint

from order_api.data.database import Base

class OrderItemModel(Base):
    __tablename__ = "order_items"

    item_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    order_id = Column(Uuid, ForeignKey("orders.order_id"), nullable=False, index=True)
    line_no = Column(Integer, nullable=False)

    description = Column(String, nullable=False)
    qty = Column(Integer, nullable=False)
    # cena w groszach (minor units), bez zaokraglen
    price = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    __table_args__ = (UniqueConstraint("order_id", "line_no", name="u_order_line"),)
