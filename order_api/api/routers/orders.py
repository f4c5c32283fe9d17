# order_api/api/routers/orders.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from order_api.api.deps import get_current_user_id
from order_api.data.database import get_db
from order_api.domain.errors import NotFound
from order_api.domain.schemas import OrderCreate, OrderOut, OrderDetails
from order_api.services.order_service import OrderService, ORDER_NOT_FOUND

router = APIRouter(prefix="/api/v1/orders", tags=["orders"])


def get_service(db: Session):
    return OrderService(db)


@router.post("", response_model=OrderOut)
def create_order(
    payload: OrderCreate,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Tworzy zamówienie z pozycjami w jednej transakcji.
    Wysyła powiadomienie asynchronicznie.
    """
    svc = get_service(db)
    items = [item.model_dump() for item in payload.items]
    return svc.create_order(user_id, payload.note, items)


@router.get("", response_model=List[OrderDetails], response_model_exclude_unset=True)
def list_orders(
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Zamówienia zalogowanego użytkownika, bez pozycji.
    """
    return get_service(db).list_orders(user_id)


@router.get("/{order_id}", response_model=OrderDetails)
def get_order(
    order_id: str,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Pobiera szczegóły zamówienia.
    """
    try:
        parsed_id = UUID(order_id)
    except ValueError:
        raise NotFound(ORDER_NOT_FOUND)
    return get_service(db).get_order(user_id, parsed_id)
