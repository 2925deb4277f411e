from aws_lambda_powertools import Logger

from services.booking.domain.entity import Booking
from services.booking.domain.event import BookingStatusChanged


def log_status_changes(booking: Booking, logger: Logger) -> None:
    """蓄積されたステータス変更イベントを取り出してログに出力する"""
    for event in booking.flush_domain_events():
        if isinstance(event, BookingStatusChanged):
            logger.info(
                "Booking status changed",
                extra={
                    "booking_id": str(event.booking_id),
                    "previous_status": event.previous_status.value,
                    "new_status": event.new_status.value,
                },
            )
