from aws_lambda_powertools import Logger
from pydantic import ValidationError

from services.shared.domain.exception import (
    BusinessRuleViolationException,
    DependencyException,
    DomainException,
    DuplicateResourceException,
    ResourceNotFoundException,
    ValidationException,
)
from services.shared.utils import error_response

_STATUS_CODES: dict[type[DomainException], int] = {
    ValidationException: 400,
    ResourceNotFoundException: 404,
    BusinessRuleViolationException: 409,
    DuplicateResourceException: 409,
}


def request_error_response(e: ValidationError) -> dict:
    """リクエストボディの検証エラーを 400 レスポンスに変換する"""
    errors = [
        {"field": ".".join(str(loc) for loc in err["loc"]), "message": err["msg"]}
        for err in e.errors()
    ]
    return error_response(400, "Invalid request", errors=errors)


def domain_error_response(e: DomainException, logger: Logger) -> dict:
    """ドメイン例外を HTTP レスポンスに変換する

    DependencyException や未知のドメイン例外はサーバーエラーとして扱い、詳細は返さない。
    """
    if isinstance(e, DependencyException):
        logger.exception("Dependency failure")
        return error_response(500, "Internal server error")

    for exc_type, status_code in _STATUS_CODES.items():
        if isinstance(e, exc_type):
            logger.warning(str(e), extra={"error_type": type(e).__name__})
            return error_response(status_code, str(e))

    logger.exception("Unhandled domain exception")
    return error_response(500, "Internal server error")
