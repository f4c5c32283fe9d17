# order_api/services/order_service.py
from typing import Iterable, Sequence
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from order_api.data.models.order import OrderModel
from order_api.data.models.order_item import OrderItemModel
from order_api.domain.errors import NotFound, InternalError
from order_api.repos.order_repo import OrderRepo
from order_api.services.notification_service import NotificationService
from order_api.utils.logging import get_logger

logger = get_logger(__name__)

ORDER_NOT_FOUND = "Order id not correct(or not present) for the user in access_token."


def _order_header(order: OrderModel) -> dict:
    return {
        "order_id": order.order_id,
        "user_id": order.user_id,
        "note": order.note,
        "order_total": 0,
        "order_at": order.created_at,
    }


def _item_details(item: OrderItemModel) -> dict:
    return {
        "item_id": item.item_id,
        "description": item.description,
        "qty": item.qty,
        "price": item.price,
    }


def build_order_details(rows: Sequence[tuple[OrderModel, OrderItemModel]]) -> dict | None:
    """
    Składa jedno zamówienie z wierszy joina.
    Wszystkie wiersze mają ten sam order_id, nagłówek brany z pierwszego.
    """
    if not rows:
        return None

    details = _order_header(rows[0][0])
    items = []
    for _, item in rows:
        details["order_total"] += item.qty * item.price
        items.append(_item_details(item))
    details["items"] = items
    return details


def group_order_rows(rows: Iterable[tuple[OrderModel, OrderItemModel]]) -> list[dict]:
    """
    Grupowanie wierszy joina po order_id, jedno OrderDetails na zamówienie.
    Kolejność zamówień = kolejność pierwszego wystąpienia. Bez pozycji (brak klucza items).
    """
    grouped: dict[UUID, dict] = {}
    for order, item in rows:
        details = grouped.get(order.order_id)
        if details is None:
            details = _order_header(order)
            grouped[order.order_id] = details
        details["order_total"] += item.qty * item.price
    return list(grouped.values())


class OrderService:
    """
    Serwis odpowiedzialny za domenę zamówień.
    Każda operacja wymaga user_id właściciela.
    """

    def __init__(self, db: Session, notification_service: NotificationService | None = None):
        self.repo = OrderRepo(db)
        self.notification_service = notification_service or NotificationService()

    # =====================================================
    # QUERY
    # =====================================================
    def get_order(self, user_id: UUID, order_id: UUID) -> dict:
        """
        Use Case: Pobranie zamówienia z pozycjami (Query).
        Nie istnieje albo należy do kogoś innego -> ten sam NotFound.
        """
        try:
            rows = self.repo.fetch_order_rows(user_id, order_id)
        except SQLAlchemyError as e:
            logger.error(f"Order {order_id} lookup failed: {e}")
            raise InternalError()

        details = build_order_details(rows)
        if details is None:
            raise NotFound(ORDER_NOT_FOUND)
        return details

    def list_orders(self, user_id: UUID) -> list[dict]:
        """
        Use Case: Lista zamówień użytkownika (Query).
        """
        try:
            rows = self.repo.fetch_order_rows(user_id)
        except SQLAlchemyError as e:
            logger.error(f"Order list for user {user_id} failed: {e}")
            raise InternalError()

        return group_order_rows(rows)

    # =====================================================
    # COMMANDS
    # =====================================================
    def create_order(self, user_id: UUID, note: str | None, items: Sequence[dict]) -> dict:
        """
        Use Case: Tworzenie zamówienia z pozycjami (Command).

        1. Zamówienie + pozycje w jednej transakcji
        2. Wysyła powiadomienie (async)
        """
        try:
            order = self.repo.create_order_with_items(user_id, note, items)
        except SQLAlchemyError as e:
            logger.error(f"Order creation for user {user_id} failed: {e}")
            raise InternalError()

        logger.info(f"Order {order.order_id} created for user {user_id} with {len(items)} items")

        self.notification_service.send_order_notification(user_id, order.order_id)

        return {
            "order_id": order.order_id,
            "user_id": order.user_id,
            "note": order.note,
            "created_at": order.created_at,
        }
