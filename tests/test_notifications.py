import uuid

from sqlalchemy import func, select

from order_api.celery_worker import celery_app
from order_api.data.models.order import OrderModel
from order_api.services import notification_service
from order_api.services.notification_service import NotificationService, notify_order_placed

ITEMS = [{"description": "A", "qty": 2, "price": 500}]
UNREACHABLE = "redis://127.0.0.1:1/0"


def test_task_does_not_store_results():
    assert notify_order_placed.ignore_result is True


def test_eager_notification_is_sent():
    assert NotificationService().send_order_notification(uuid.uuid4(), uuid.uuid4()) is True


def test_enqueue_failure_is_swallowed(monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("Retry limit exceeded while trying to reconnect")

    monkeypatch.setattr(notification_service.notify_order_placed, "delay", boom)
    assert NotificationService().send_order_notification("u", "o") is False


def test_order_is_created_when_broker_is_down(client, auth_headers, db, monkeypatch):
    headers = auth_headers()
    monkeypatch.setitem(celery_app.conf, "task_always_eager", False)
    monkeypatch.setitem(celery_app.conf, "broker_url", UNREACHABLE)
    monkeypatch.setitem(celery_app.conf, "result_backend", UNREACHABLE)

    resp = client.post("/api/v1/orders", json={"items": ITEMS}, headers=headers)

    assert resp.status_code == 200
    count = db.execute(select(func.count()).select_from(OrderModel)).scalar_one()
    assert count == 1
