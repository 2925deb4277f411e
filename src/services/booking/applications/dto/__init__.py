from .booking_response import BookingResponse as BookingResponse
