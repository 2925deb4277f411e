import json
import os
from dataclasses import dataclass

import pytest

# ハンドラモジュールは import 時に DynamoDB リソースを生成するため、先に環境変数を設定する
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("TABLE_NAME", "test-bookings")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "booking-service")


@dataclass
class FakeLambdaContext:
    function_name: str = "test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:ap-northeast-1:123456789012:function:test"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def make_event():
    """API Gateway HTTP API (payload v2) のイベントを生成する"""

    def _factory(
        body: dict | str | None = None,
        query: dict | None = None,
        path: dict | None = None,
        method: str = "GET",
    ) -> dict:
        if isinstance(body, dict):
            body = json.dumps(body)
        return {
            "version": "2.0",
            "routeKey": "$default",
            "rawPath": "/bookings",
            "rawQueryString": "",
            "headers": {"content-type": "application/json"},
            "queryStringParameters": query,
            "pathParameters": path,
            "requestContext": {
                "http": {"method": method, "path": "/bookings"},
                "requestId": "request-id",
            },
            "body": body,
            "isBase64Encoded": False,
        }

    return _factory
