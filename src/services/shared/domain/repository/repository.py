from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - 集約の永続化を抽象化する
    - 保存時に採番・タイムスタンプ付与を行う場合は、保存後の集約を返す
    """

    @abstractmethod
    def save(self, aggregate: T) -> T:
        """集約を新規に永続化し、保存後の集約を返す"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDで集約を検索する"""
        raise NotImplementedError
