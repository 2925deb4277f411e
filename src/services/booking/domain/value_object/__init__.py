from .booking_id import BookingId as BookingId
from .total_price import TotalPrice as TotalPrice
