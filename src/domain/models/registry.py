from __future__ import annotations

from typing import Iterator


class StopRegistry:
    """Interns stop names into dense, stable integer handles.

    Handles are assigned in first-seen order and are never freed, so any
    structure holding a handle stays valid for the registry's lifetime.
    """

    __slots__ = ("_names", "_handles")

    def __init__(self) -> None:
        self._names: list[str] = []
        self._handles: dict[str, int] = {}

    def intern(self, name: str) -> int:
        handle = self._handles.get(name)
        if handle is None:
            handle = len(self._names)
            self._names.append(name)
            self._handles[name] = handle
        return handle

    def handle_of(self, name: str) -> int | None:
        return self._handles.get(name)

    def name_of(self, handle: int) -> str:
        return self._names[handle]

    def names(self) -> tuple[str, ...]:
        return tuple(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._handles

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)
