"""
Fragment-driven view routing

The active view is whatever follows ``#`` in the page URL. The stored value
is not validated: ``#anything`` is kept as-is and only falls back to the
dashboard when the page is composed.
"""
from typing import Callable, List, Optional

DEFAULT_VIEW = "dashboard"

FragmentListener = Callable[[str], None]


def fragment_of(url: str) -> str:
    """Text after the first ``#``, or ``""`` when there is none."""
    _, _, fragment = url.partition("#")
    return fragment


class FragmentEvents:
    """Fragment-change notifications for one page (the browser's ``hashchange``)."""

    def __init__(self):
        self._listeners: List[FragmentListener] = []

    def subscribe(self, listener: FragmentListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: FragmentListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, url: str) -> None:
        """Notify every listener, synchronously and in subscription order."""
        for listener in list(self._listeners):
            listener(url)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)


class ViewRouter:
    """Holds the active view identifier for the lifetime of a page."""

    def __init__(self, default_view: str = DEFAULT_VIEW):
        self.active_view = default_view
        self._events: Optional[FragmentEvents] = None

    def mount(self, url: str, events: Optional[FragmentEvents] = None) -> None:
        """Read the initial fragment, then follow fragment changes until unmounted."""
        self.handle_fragment_change(url)
        if events is not None:
            events.subscribe(self.handle_fragment_change)
            self._events = events

    def unmount(self) -> None:
        if self._events is not None:
            self._events.unsubscribe(self.handle_fragment_change)
            self._events = None

    def handle_fragment_change(self, url: str) -> None:
        # An empty fragment leaves the current view in place
        fragment = fragment_of(url)
        if fragment:
            self.active_view = fragment

    def set_active_view(self, view: str) -> None:
        """Direct setter used by sidebar clicks."""
        self.active_view = view

    @property
    def mounted(self) -> bool:
        return self._events is not None
