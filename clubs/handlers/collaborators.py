"""Side-effecting collaborators the screens call after an operation.

Rendering, toasts, clipboard and navigation belong to whatever hosts the
screens; the core never calls these.
"""

from typing import Protocol

from clubs.services import Screen


class Notifier(Protocol):
    def notify(self, title: str, message: str, error: bool = False) -> None: ...


class Navigator(Protocol):
    def redirect(self, screen: Screen) -> None: ...


class Clipboard(Protocol):
    def copy(self, text: str) -> None: ...
