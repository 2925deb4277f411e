from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.archive_booking import ArchiveBookingService
from services.booking.domain.value_object import BookingId
from services.booking.handlers.errors import domain_error_response
from services.booking.handlers.response_models import to_response
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.shared.domain.exception import DomainException
from services.shared.utils import api_response, error_response, is_blank

logger = Logger()

repository = DynamoDBBookingRepository()
service = ArchiveBookingService(repository=repository, logger=logger)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約アーカイブ Lambda Handler (POST /bookings/{booking_id}/archive)"""

    path_params = event.path_parameters or {}
    booking_id = path_params.get("booking_id")

    if is_blank(booking_id):
        return error_response(400, "booking_id is required")

    logger.info("Received archive booking request", extra={"booking_id": booking_id})

    try:
        booking = service.archive(BookingId(value=booking_id))
        return api_response(200, to_response(booking))
    except DomainException as e:
        return domain_error_response(e, logger)
    except Exception:
        logger.exception("Failed to archive booking")
        return error_response(500, "Internal server error")
