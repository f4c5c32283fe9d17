# order_api/repos/order_repo.py
from datetime import datetime, timezone
from typing import Iterable, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from order_api.data.models.order import OrderModel
from order_api.data.models.order_item import OrderItemModel
from order_api.domain.errors import InvalidOrder


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    # =====================================================
    # READ - zawsze filtrowane po wlascicielu
    # =====================================================
    def fetch_order_rows(self, user_id: UUID, order_id: UUID | None = None) -> Sequence[tuple[OrderModel, OrderItemModel]]:
        """
        Płaski inner join orders x order_items dla jednego użytkownika.
        user_id jest obowiązkowy - nie da się odpytać cudzych zamówień.
        """
        stmt = (
            select(OrderModel, OrderItemModel)
            .join(OrderItemModel, OrderItemModel.order_id == OrderModel.order_id)
            .where(OrderModel.user_id == user_id)
        )
        if order_id is not None:
            stmt = stmt.where(OrderModel.order_id == order_id)

        stmt = stmt.order_by(OrderModel.created_at.desc(), OrderModel.order_id, OrderItemModel.line_no)
        return self.db.execute(stmt).all()

    # =====================================================
    # WRITE
    # =====================================================
    def create_order(self, user_id: UUID, note: str | None) -> OrderModel:
        order = OrderModel(
            user_id=user_id,
            note=note,
            created_at=datetime.now(timezone.utc),
        )
        self.db.add(order)
        self.db.flush()
        return order

    def create_order_items(self, order_id: UUID, items: Iterable[dict]) -> bool:
        now = datetime.now(timezone.utc)
        self.db.add_all(
            [
                OrderItemModel(
                    order_id=order_id,
                    line_no=line_no,
                    description=item["description"],
                    qty=item["qty"],
                    price=item["price"],
                    created_at=now,
                )
                for line_no, item in enumerate(items)
            ]
        )
        self.db.flush()
        return True

    def create_order_with_items(self, user_id: UUID, note: str | None, items: Sequence[dict]) -> OrderModel:
        """
        Zamówienie + pozycje w jednej transakcji.
        Błąd przy pozycjach wycofuje też wiersz zamówienia.
        """
        if not items:
            raise InvalidOrder()

        try:
            order = self.create_order(user_id, note)
            self.create_order_items(order.order_id, items)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(order)
        return order
