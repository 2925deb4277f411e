import json
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from services.booking.applications.archive_booking import ArchiveBookingService
from services.booking.applications.booking_enricher import BookingEnricher
from services.booking.applications.cancel_booking import CancelBookingService
from services.booking.applications.create_booking import CreateBookingService
from services.booking.applications.list_bookings import BookingQueryService
from services.booking.domain.factory import BookingFactory
from services.booking.handlers import archive, cancel, create, list_bookings
from services.booking.infrastructure.in_memory_booking_repository import (
    InMemoryBookingRepository,
)
from services.booking.infrastructure.placeholder_naming_lookup import (
    PlaceholderNamingLookup,
)
from services.shared.domain.exception import DependencyException


@pytest.fixture
def repository(monkeypatch):
    """各ハンドラのサービスをインメモリのリポジトリに差し替える"""
    repo = InMemoryBookingRepository()
    monkeypatch.setattr(
        create, "service", CreateBookingService(repo, BookingFactory())
    )
    monkeypatch.setattr(cancel, "service", CancelBookingService(repo))
    monkeypatch.setattr(archive, "service", ArchiveBookingService(repo))
    monkeypatch.setattr(
        list_bookings,
        "service",
        BookingQueryService(repo, BookingEnricher(PlaceholderNamingLookup())),
    )
    return repo


def _body(response: dict) -> dict:
    return json.loads(response["body"])


def _create_body(**overrides) -> dict:
    body = {
        "user_id": "user-1",
        "booking_date": (datetime.now(timezone.utc) + timedelta(days=1)).isoformat(),
        "service_ids": ["svc-1", "svc-2"],
        "vehicle_id": "vehicle-abcdef",
        "total_price": 99.99,
        "payment_method": "CARD",
    }
    body.update(overrides)
    return body


class TestCreateHandler:
    def test_create_returns_201(self, repository, make_event, lambda_context):
        response = create.lambda_handler(
            make_event(body=_create_body(), method="POST"), lambda_context
        )

        assert response["statusCode"] == 201
        data = _body(response)["data"]
        assert data["status"] == "PENDING"
        assert data["booking_id"]
        assert data["total_price"] == "99.99"
        assert data["service_ids"] == ["svc-1", "svc-2"]
        assert repository.find_by_user_id("user-1")

    def test_past_booking_date_returns_400(
        self, repository, make_event, lambda_context
    ):
        past = (datetime.now(timezone.utc) - timedelta(days=1)).isoformat()

        response = create.lambda_handler(
            make_event(body=_create_body(booking_date=past), method="POST"),
            lambda_context,
        )

        assert response["statusCode"] == 400
        assert "future" in _body(response)["message"]
        assert repository.find_by_user_id("user-1") == []

    def test_missing_field_returns_400(self, repository, make_event, lambda_context):
        body = _create_body()
        del body["vehicle_id"]

        response = create.lambda_handler(
            make_event(body=body, method="POST"), lambda_context
        )

        assert response["statusCode"] == 400
        fields = [e["field"] for e in _body(response)["errors"]]
        assert "vehicle_id" in fields

    def test_malformed_json_returns_400(self, repository, make_event, lambda_context):
        response = create.lambda_handler(
            make_event(body="{not json", method="POST"), lambda_context
        )

        assert response["statusCode"] == 400


class TestListBookingsHandler:
    def test_list_by_user(self, repository, make_event, lambda_context):
        create.lambda_handler(make_event(body=_create_body(), method="POST"), lambda_context)

        response = list_bookings.lambda_handler(
            make_event(query={"user_id": "user-1"}), lambda_context
        )

        assert response["statusCode"] == 200
        body = _body(response)
        assert body["count"] == 1
        assert body["bookings"][0]["service_names"] == "2 Service(s) Selected"
        assert body["bookings"][0]["vehicle_description"] == "Vehicle vehic..."

    def test_list_by_status_case_insensitive(
        self, repository, make_event, lambda_context
    ):
        create.lambda_handler(make_event(body=_create_body(), method="POST"), lambda_context)

        upper = list_bookings.lambda_handler(
            make_event(query={"status": "PENDING"}), lambda_context
        )
        lower = list_bookings.lambda_handler(
            make_event(query={"status": "pending"}), lambda_context
        )

        assert _body(upper) == _body(lower)
        assert _body(upper)["count"] == 1

    def test_unknown_status_returns_400(self, repository, make_event, lambda_context):
        response = list_bookings.lambda_handler(
            make_event(query={"status": "nope"}), lambda_context
        )

        assert response["statusCode"] == 400
        assert "Unrecognized status" in _body(response)["message"]

    def test_no_filters_returns_400(self, repository, make_event, lambda_context):
        response = list_bookings.lambda_handler(make_event(), lambda_context)

        assert response["statusCode"] == 400

    def test_dependency_failure_returns_500(
        self, monkeypatch, make_event, lambda_context
    ):
        failing = MagicMock()
        failing.list_bookings.side_effect = DependencyException("dynamodb down")
        monkeypatch.setattr(list_bookings, "service", failing)

        response = list_bookings.lambda_handler(
            make_event(query={"user_id": "user-1"}), lambda_context
        )

        assert response["statusCode"] == 500
        assert _body(response)["message"] == "Internal server error"


class TestCancelAndArchiveHandlers:
    @pytest.fixture
    def booking_id(self, repository, make_event, lambda_context):
        response = create.lambda_handler(
            make_event(body=_create_body(), method="POST"), lambda_context
        )
        return _body(response)["data"]["booking_id"]

    def test_cancel(self, booking_id, make_event, lambda_context):
        response = cancel.lambda_handler(
            make_event(path={"booking_id": booking_id}, method="POST"), lambda_context
        )

        assert response["statusCode"] == 200
        assert _body(response)["data"]["status"] == "CANCELLED"

    def test_archive_twice(self, booking_id, make_event, lambda_context):
        event = make_event(path={"booking_id": booking_id}, method="POST")

        archive.lambda_handler(event, lambda_context)
        response = archive.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 200
        assert _body(response)["data"]["status"] == "ARCHIVED"

    @pytest.mark.parametrize("handler", [cancel, archive])
    def test_unknown_booking_returns_404(
        self, repository, make_event, lambda_context, handler
    ):
        response = handler.lambda_handler(
            make_event(path={"booking_id": "missing"}, method="POST"), lambda_context
        )

        assert response["statusCode"] == 404

    @pytest.mark.parametrize("handler", [cancel, archive])
    def test_missing_booking_id_returns_400(
        self, repository, make_event, lambda_context, handler
    ):
        response = handler.lambda_handler(make_event(method="POST"), lambda_context)

        assert response["statusCode"] == 400
