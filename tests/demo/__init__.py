"""Sample order/user domain used to exercise domain-specific assertions."""

from tests.demo.models import Order, OrderStatus, User
from tests.demo.repository import OrderRepository
from tests.demo.service import OrderService

__all__ = ["Order", "OrderRepository", "OrderService", "OrderStatus", "User"]
