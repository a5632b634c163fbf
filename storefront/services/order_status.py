from storefront.models.enums import OrderStatus

# current status -> statuses it may move to
ORDER_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.PAID, OrderStatus.CANCELED},
    OrderStatus.PAID: {OrderStatus.SHIPPED, OrderStatus.CANCELED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: {OrderStatus.RETURN_REQUESTED},
    OrderStatus.RETURN_REQUESTED: {OrderStatus.RETURN_COMPLETED, OrderStatus.DELIVERED},
    OrderStatus.CANCELED: set(),
    OrderStatus.RETURN_COMPLETED: set(),
}


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    return target in ORDER_TRANSITIONS.get(current, set())


def is_terminal(status: OrderStatus) -> bool:
    return not ORDER_TRANSITIONS.get(status)
