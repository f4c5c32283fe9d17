#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from order_api.data.models.user import UserModel
from order_api.data.models.order import OrderModel
from order_api.data.models.order_item import OrderItemModel

__all__ = ["UserModel", "OrderModel", "OrderItemModel"]
