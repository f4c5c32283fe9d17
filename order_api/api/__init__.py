# order_api/api/__init__.py
from order_api.api.routers import auth, users, orders, health

ROUTERS = (health.router, auth.router, users.router, orders.router)
