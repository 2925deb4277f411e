from aws_lambda_powertools import Logger


def get_logger(service_name: str | None = None) -> Logger:
    """アプリケーション層に注入する Logger を返す

    service_name を省略した場合は子 Logger として生成し、
    ハンドラ側で設定された Logger（POWERTOOLS_SERVICE_NAME）の設定を引き継ぐ。
    """
    if service_name is None:
        return Logger(child=True)
    return Logger(service=service_name)
