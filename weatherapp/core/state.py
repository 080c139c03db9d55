from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List

Listener = Callable[["DisplayState"], None]

@dataclass
class DisplayState:
    """The one mutable value on screen; `toggle()` is its only writer."""
    is_night: bool = False
    _listeners: List[Listener] = field(default_factory=list, repr=False, compare=False)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe

    def toggle(self) -> bool:
        self.is_night = not self.is_night
        for listener in list(self._listeners):
            listener(self)
        return self.is_night
