import json


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def error_response(status_code: int, message: str, **details: object) -> dict:
    """エラー時のレスポンスを生成する

    details はそのままボディに展開される（バリデーションエラーの一覧など）。
    """
    return api_response(status_code, {"status": "error", "message": message, **details})
