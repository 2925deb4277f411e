from .booking_factory import BookingDetails as BookingDetails
from .booking_factory import BookingFactory as BookingFactory
