from .entity import Booking as Booking
from .enum import BookingStatus as BookingStatus
from .event import BookingStatusChanged as BookingStatusChanged
from .factory import BookingDetails as BookingDetails
from .factory import BookingFactory as BookingFactory
from .repository import BookingRepository as BookingRepository
from .service import NamingLookup as NamingLookup
from .value_object import BookingId as BookingId
from .value_object import TotalPrice as TotalPrice
