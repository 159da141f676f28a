"""
Minimal observer facility used by models.

Handlers subscribe by event name and are invoked synchronously, in
subscription order, with the payload passed to ``emit``.
"""

from typing import Any, Callable, Dict, List, Optional

from modelkit.utils.logger import setup_logger

logger = setup_logger(__name__)

EventHandler = Callable[..., Any]


class EventEmitter:
    """
    Subscribe-by-name, emit-by-name event mixin.

    Example:
        model.on("invalid:email", lambda model, messages: print(messages))
        model.emit("invalid:email", model, ["is invalid"])
    """

    def _handlers(self) -> Dict[str, List[EventHandler]]:
        # Created lazily so subclasses need not call our __init__ first
        handlers = self.__dict__.get('_event_handlers')
        if handlers is None:
            handlers = {}
            self.__dict__['_event_handlers'] = handlers
        return handlers

    def on(self, event: str, handler: Optional[EventHandler] = None) -> Any:
        """
        Subscribe a handler to an event.

        Without a handler, returns a decorator that subscribes the function
        it decorates.

        Returns:
            The handler (or the decorator)
        """
        if handler is None:
            return lambda func: self.on(event, func)

        self._handlers().setdefault(event, []).append(handler)
        return handler

    def off(self, event: str, handler: Optional[EventHandler] = None) -> None:
        """Remove one handler, or every handler for the event."""
        handlers = self._handlers()
        if handler is None:
            handlers.pop(event, None)
            return

        subscribed = handlers.get(event, [])
        if handler in subscribed:
            subscribed.remove(handler)

    def emit(self, event: str, *args: Any) -> None:
        """Invoke every handler subscribed to ``event`` with ``args``."""
        subscribed = list(self._handlers().get(event, []))
        if not subscribed:
            return

        logger.debug(f"Emitting '{event}' to {len(subscribed)} handler(s)")
        for handler in subscribed:
            handler(*args)

    def listeners(self, event: str) -> List[EventHandler]:
        """Handlers currently subscribed to ``event``."""
        return list(self._handlers().get(event, []))
