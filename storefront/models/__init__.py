from storefront.models.enums import Role, Gender, OrderStatus, PaymentStatus, InquiryType, InquiryStatus
from storefront.models.user import User
from storefront.models.category import Category
from storefront.models.product import Product, ProductImage
from storefront.models.cart import Cart, CartItem
from storefront.models.order import Order, OrderItem, Payment
from storefront.models.review import Review, ReviewImage
from storefront.models.inquiry import Inquiry, InquiryImage
from storefront.models.bookmark import Bookmark
