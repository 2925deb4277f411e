from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 集約内の状態変更は必ず集約ルートのメソッド経由で行う
    - 状態変更の記録はドメインイベントとして蓄積し、アプリケーション層が取り出す
    """

    def __init__(self, id: ID) -> None:
        super().__init__(id)
        self._domain_events: list[object] = []

    def add_domain_event(self, event: object) -> None:
        """ドメインイベントを追加する"""
        self._domain_events.append(event)

    def flush_domain_events(self) -> list[object]:
        """蓄積したドメインイベントを返し、内部のリストを空にする"""
        events = self._domain_events.copy()
        self._domain_events.clear()
        return events
