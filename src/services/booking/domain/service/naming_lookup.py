from abc import ABC, abstractmethod


class NamingLookup(ABC):
    """車両・サービスの表示名を解決する外部サービスのインターフェース"""

    @abstractmethod
    def describe_vehicle(self, vehicle_id: str | None) -> str:
        """車両IDから表示用の説明を返す"""
        raise NotImplementedError

    @abstractmethod
    def describe_services(self, service_ids: list[str] | None) -> str:
        """サービスID一覧から表示用の要約を返す"""
        raise NotImplementedError
