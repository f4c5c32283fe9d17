# order_api/services/notification_service.py
from uuid import UUID

from order_api.celery_worker import celery_app
from order_api.utils.logging import get_logger

logger = get_logger(__name__)


@celery_app.task(name="orders.notify_order_placed", ignore_result=True)
def notify_order_placed(user_id: str, order_id: str):
    logger.info(f"[NOTIFICATION] User {user_id}: order {order_id} placed")


class NotificationService:
    """Powiadomienia o złożonych zamówieniach, wysyłane przez Celery (fire-and-forget)."""

    def send_order_notification(self, user_id: UUID, order_id: UUID) -> bool:
        # zamowienie jest juz zacommitowane - zaden blad kolejki nie moze zepsuc requestu
        try:
            notify_order_placed.delay(str(user_id), str(order_id))
        except Exception as e:
            logger.warning(f"Could not enqueue notification for order {order_id}: {e!r}")
            return False
        return True
