import enum


class Role(str, enum.Enum):
    USER = "USER"
    ADMIN = "ADMIN"


class Gender(str, enum.Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


class OrderStatus(str, enum.Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELED = "CANCELED"
    RETURN_REQUESTED = "RETURN_REQUESTED"
    RETURN_COMPLETED = "RETURN_COMPLETED"


class PaymentStatus(str, enum.Enum):
    PAID = "PAID"
    CANCELED = "CANCELED"


class InquiryType(str, enum.Enum):
    DELIVERY = "DELIVERY"
    PRODUCT = "PRODUCT"
    EXCHANGE_RETURN = "EXCHANGE_RETURN"
    MEMBER = "MEMBER"
    OTHER = "OTHER"


class InquiryStatus(str, enum.Enum):
    PENDING = "PENDING"
    ANSWERED = "ANSWERED"
