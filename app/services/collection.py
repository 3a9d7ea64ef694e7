# app/services/collection.py
from __future__ import annotations

from typing import Generic, Iterator, List, Optional, Protocol, TypeVar


class _Identified(Protocol):
    id: str


T = TypeVar("T", bound=_Identified)


class OrderedCollection(Generic[T]):
    """
    id로 찾는, 삽입 순서를 유지하는 소유 컬렉션.
    ProjectStore / UserRoster 공통 부모.
    """

    def __init__(self) -> None:
        self._items: List[T] = []

    def _append(self, item: T) -> T:
        self._items.append(item)
        return item

    def get(self, item_id: str) -> Optional[T]:
        # 정확히 일치하는 id만 (부분 일치 없음)
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def list(self) -> List[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __contains__(self, item_id: object) -> bool:
        return isinstance(item_id, str) and self.get(item_id) is not None
