from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.applications.create_booking import CreateBookingService
from services.booking.domain.factory import BookingFactory
from services.booking.handlers.errors import (
    domain_error_response,
    request_error_response,
)
from services.booking.handlers.request_models import CreateBookingRequest
from services.booking.handlers.response_models import to_response
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.shared.domain.exception import DomainException
from services.shared.utils import api_response, error_response

logger = Logger()

repository = DynamoDBBookingRepository()
factory = BookingFactory()
service = CreateBookingService(repository=repository, factory=factory, logger=logger)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約作成 Lambda Handler (POST /bookings)"""
    logger.info("Received create booking request")

    try:
        request = CreateBookingRequest.model_validate_json(event.decoded_body or "")
        booking = service.create(request.to_booking_details())
        return api_response(201, to_response(booking))
    except ValidationError as e:
        return request_error_response(e)
    except DomainException as e:
        return domain_error_response(e, logger)
    except Exception:
        logger.exception("Failed to create booking")
        return error_response(500, "Internal server error")
