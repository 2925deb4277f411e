from .booking_status_changed import BookingStatusChanged as BookingStatusChanged
