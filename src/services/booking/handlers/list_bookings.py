from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.booking_enricher import BookingEnricher
from services.booking.applications.list_bookings import BookingQueryService
from services.booking.handlers.errors import domain_error_response
from services.booking.handlers.response_models import to_list_response
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.booking.infrastructure.placeholder_naming_lookup import (
    PlaceholderNamingLookup,
)
from services.shared.domain.exception import DomainException
from services.shared.utils import api_response, error_response

logger = Logger()

repository = DynamoDBBookingRepository()
enricher = BookingEnricher(naming_lookup=PlaceholderNamingLookup(), logger=logger)
service = BookingQueryService(repository=repository, enricher=enricher, logger=logger)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約一覧取得 Lambda Handler (GET /bookings?user_id=...&status=...)

    user_id と status の両方が指定された場合は user_id を優先する。
    """
    params = event.query_string_parameters or {}
    user_id = params.get("user_id")
    status = params.get("status")

    logger.info("Listing bookings", extra={"user_id": user_id, "status": status})

    try:
        bookings = service.list_bookings(user_id=user_id, status=status)
        return api_response(200, to_list_response(bookings))
    except DomainException as e:
        return domain_error_response(e, logger)
    except Exception:
        logger.exception("Failed to list bookings")
        return error_response(500, "Internal server error")
