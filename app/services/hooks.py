# app/services/hooks.py
"""
렌더 훅 (UI 계층 통지용).

스토어는 생성/수정/삭제 시점에 동기적으로 훅을 호출할 뿐,
UI 계층의 결과에는 의존하지 않는다.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from loguru import logger

from app.models.project import Project

ProjectCallback = Callable[[Project], Any]
RemovedCallback = Callable[[str], Any]


@dataclass
class StoreHooks:
    on_project_created: Optional[ProjectCallback] = None
    on_project_updated: Optional[ProjectCallback] = None
    on_project_removed: Optional[RemovedCallback] = None


class HookDispatcher:
    def __init__(self, hooks: Optional[StoreHooks] = None) -> None:
        self._subscribers: List[StoreHooks] = []
        if hooks is not None:
            self.subscribe(hooks)

    def subscribe(self, hooks: StoreHooks) -> None:
        self._subscribers.append(hooks)

    def _fire(self, attr: str, arg: Any) -> None:
        for hooks in self._subscribers:
            cb = getattr(hooks, attr)
            if cb is None:
                continue
            try:
                cb(arg)
            except Exception:
                # 훅 실패가 스토어 상태를 되돌리지는 않음
                logger.exception("render hook {} failed", attr)

    def created(self, project: Project) -> None:
        self._fire("on_project_created", project)

    def updated(self, project: Project) -> None:
        self._fire("on_project_updated", project)

    def removed(self, project_id: str) -> None:
        self._fire("on_project_removed", project_id)


def logging_hooks() -> StoreHooks:
    """기본 구독자: 렌더 이벤트를 debug 로그로 남김."""
    return StoreHooks(
        on_project_created=lambda p: logger.debug("render created: {} ({})", p.name, p.id),
        on_project_updated=lambda p: logger.debug("render updated: {} ({})", p.name, p.id),
        on_project_removed=lambda pid: logger.debug("render removed: {}", pid),
    )
