import pytest

from services.booking.applications.archive_booking import ArchiveBookingService
from services.booking.domain.enum import BookingStatus
from services.shared.domain.exception import ResourceNotFoundException


class TestArchiveBookingService:
    @pytest.fixture
    def service(self, mock_repository, mock_logger):
        mock_repository.update.side_effect = lambda booking: booking
        return ArchiveBookingService(repository=mock_repository, logger=mock_logger)

    @pytest.mark.parametrize("status", list(BookingStatus))
    def test_archive_existing_booking(
        self, service, mock_repository, create_booking, booking_id, status
    ):
        mock_repository.find_by_id.return_value = create_booking(status=status)

        booking = service.archive(booking_id)

        assert booking.status == BookingStatus.ARCHIVED
        mock_repository.update.assert_called_once()

    def test_archive_already_archived_booking_is_not_an_error(
        self, service, mock_repository, mock_logger, create_booking, booking_id
    ):
        """アーカイブ済みでもエラーにならず、ステータス変更のログは出ない"""
        mock_repository.find_by_id.return_value = create_booking(
            status=BookingStatus.ARCHIVED
        )

        booking = service.archive(booking_id)

        assert booking.status == BookingStatus.ARCHIVED
        mock_repository.update.assert_called_once()
        mock_logger.info.assert_not_called()

    def test_archive_not_found(self, service, mock_repository, booking_id):
        mock_repository.find_by_id.return_value = None

        with pytest.raises(ResourceNotFoundException):
            service.archive(booking_id)

        mock_repository.update.assert_not_called()
