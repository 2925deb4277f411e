from aws_lambda_powertools import Logger

from services.booking.applications.dto import BookingResponse
from services.booking.domain.entity import Booking
from services.booking.domain.service import NamingLookup
from services.shared.utils import get_logger

UNKNOWN_VEHICLE = "Unknown Vehicle"
UNKNOWN_SERVICES = "Unknown Services"


class BookingEnricher:
    """Booking に表示名を付与して BookingResponse に変換する

    表示名の解決に失敗しても一覧全体は失敗させず、"Unknown" 表記で返す。
    """

    def __init__(self, naming_lookup: NamingLookup, logger: Logger | None = None) -> None:
        self._naming_lookup = naming_lookup
        self._logger = logger if logger is not None else get_logger()

    def enrich(self, booking: Booking) -> BookingResponse:
        return BookingResponse.from_booking(
            booking,
            vehicle_description=self._describe_vehicle(booking),
            service_names=self._describe_services(booking),
        )

    def enrich_all(self, bookings: list[Booking]) -> list[BookingResponse]:
        return [self.enrich(booking) for booking in bookings]

    def _describe_vehicle(self, booking: Booking) -> str:
        try:
            return self._naming_lookup.describe_vehicle(booking.vehicle_id)
        except Exception:
            self._logger.exception(
                "Failed to resolve vehicle description",
                extra={"booking_id": str(booking.id), "vehicle_id": booking.vehicle_id},
            )
            return UNKNOWN_VEHICLE

    def _describe_services(self, booking: Booking) -> str:
        try:
            return self._naming_lookup.describe_services(booking.service_ids)
        except Exception:
            self._logger.exception(
                "Failed to resolve service names",
                extra={"booking_id": str(booking.id)},
            )
            return UNKNOWN_SERVICES
