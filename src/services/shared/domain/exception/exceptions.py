class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ValidationException(DomainException):
    """入力値が不正な場合（必須項目の欠落、過去日時、未知のステータスなど）"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass


class DependencyException(DomainException):
    """永続化層・外部サービスが利用できない場合

    リトライは行わず、呼び出し元にそのまま伝播させる。
    """

    pass
