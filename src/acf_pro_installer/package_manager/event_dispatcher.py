"""
Dispatching of lifecycle events to plugin subscribers.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from acf_pro_installer.acf_installer_logger import AcfInstallerLogger
from .events import EventKind


class EventDispatcher:
    """
    Calls the handlers subscribed to an event kind, in registration order.

    Handler exceptions are not caught: a failing hook aborts the operation
    that fired the event.
    """

    def __init__(self, logger: Optional[AcfInstallerLogger] = None):
        self.logger = logger or AcfInstallerLogger()
        self._handlers: Dict[EventKind, List[Callable[[Any], None]]] = {
            kind: [] for kind in EventKind
        }

    def add_listener(self, kind: EventKind, handler: Callable[[Any], None]) -> None:
        self._handlers[EventKind(kind)].append(handler)

    def add_subscriber(self, subscriber: Any) -> None:
        """
        Register every handler of an object exposing get_subscribed_events().
        """
        for kind, handler in subscriber.get_subscribed_events().items():
            self.add_listener(kind, handler)

    def get_listeners(self, kind: EventKind) -> List[Callable[[Any], None]]:
        return list(self._handlers[EventKind(kind)])

    def dispatch(self, kind: EventKind, event: Any) -> Any:
        """
        Dispatch an event to its subscribers.

        Args:
            kind: The event kind
            event: The event, handed to each handler

        Returns:
            The event, possibly modified by the handlers
        """
        handlers = self._handlers[EventKind(kind)]
        self.logger.log(
            f"Dispatching {EventKind(kind).value} to {len(handlers)} handlers",
            logging.DEBUG,
        )
        for handler in handlers:
            handler(event)
        return event
