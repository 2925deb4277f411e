from aws_lambda_powertools import Logger

from services.booking.domain.entity import Booking
from services.booking.domain.factory import BookingDetails, BookingFactory
from services.booking.domain.repository import BookingRepository
from services.shared.utils import get_logger


class CreateBookingService:
    """予約作成のユースケース"""

    def __init__(
        self,
        repository: BookingRepository,
        factory: BookingFactory,
        logger: Logger | None = None,
    ) -> None:
        self._repository = repository
        self._factory = factory
        self._logger = logger if logger is not None else get_logger()

    def create(self, details: BookingDetails) -> Booking:
        """予約を PENDING 状態で作成し、保存後の予約を返す

        検証に失敗した場合は保存しない。
        """
        booking = self._factory.create(self._repository.next_id(), details)
        saved = self._repository.save(booking)
        self._logger.info(
            "Booking created",
            extra={"booking_id": str(saved.id), "user_id": saved.user_id},
        )
        return saved
