# order_api/celery_worker.py
from celery import Celery

from order_api.utils.settings import (
    CELERY_BROKER_URL,
    CELERY_RESULT_BACKEND,
    CELERY_TASK_ALWAYS_EAGER,
)

celery_app = Celery("orders")
celery_app.conf.update(
    broker_url=CELERY_BROKER_URL,
    result_backend=CELERY_RESULT_BACKEND,
    task_always_eager=CELERY_TASK_ALWAYS_EAGER,
    # worker musi znac taski powiadomien
    imports=("order_api.services.notification_service",),
    timezone="UTC",
)
