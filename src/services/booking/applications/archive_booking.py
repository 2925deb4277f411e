from aws_lambda_powertools import Logger

from services.booking.applications.status_change_logging import log_status_changes
from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId
from services.shared.domain.exception import ResourceNotFoundException
from services.shared.utils import get_logger


class ArchiveBookingService:
    """予約アーカイブサービス（古い予約に対してスケジューラから呼ばれる）"""

    def __init__(
        self, repository: BookingRepository, logger: Logger | None = None
    ) -> None:
        self._repository = repository
        self._logger = logger if logger is not None else get_logger()

    def archive(self, booking_id: BookingId) -> Booking:
        """予約をアーカイブする

        アーカイブ済みの予約に対しても失敗せず、そのまま更新する。
        """
        booking = self._repository.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")

        booking.archive()
        updated = self._repository.update(booking)

        log_status_changes(booking, self._logger)
        return updated
