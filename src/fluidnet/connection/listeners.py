import inspect
import weakref
from collections.abc import Callable
from typing import Any

Listener = Callable[[Any], None]


def _make_ref(callback: Listener) -> weakref.ref:
    if inspect.ismethod(callback):
        return weakref.WeakMethod(callback)
    return weakref.ref(callback)


class Listeners:
    """Fan-out registry that holds its callbacks weakly.

    Subscribing does not keep a callback alive: once the caller drops its
    last reference (or the object owning a bound method goes away) the
    entry is pruned on the next notify.
    """

    __slots__ = ("_refs",)

    def __init__(self) -> None:
        self._refs: list[weakref.ref] = []

    def subscribe(self, callback: Listener) -> Listener:
        if not callable(callback):
            raise TypeError(f"listener must be callable, got {type(callback).__name__}")
        if callback not in self._live():
            self._refs.append(_make_ref(callback))
        return callback

    def unsubscribe(self, callback: Listener) -> None:
        self._refs = [ref for ref in self._refs if ref() is not None and ref() != callback]

    def notify(self, event: Any) -> None:
        for callback in self._live():
            callback(event)

    def clear(self) -> None:
        self._refs.clear()

    def _live(self) -> list[Listener]:
        alive: list[Listener] = []
        refs: list[weakref.ref] = []
        for ref in self._refs:
            callback = ref()
            if callback is not None:
                alive.append(callback)
                refs.append(ref)
        self._refs = refs
        return alive

    def __len__(self) -> int:
        return len(self._live())

    def __bool__(self) -> bool:
        return len(self) > 0
