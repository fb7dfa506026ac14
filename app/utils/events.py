from typing import Dict, List, Callable, Any
import asyncio
from concurrent.futures import ThreadPoolExecutor
import logging

logger = logging.getLogger(__name__)

class EventBus:
    """In-process publish/subscribe used to hand side effects (emails) off the request path."""

    def __init__(self):
        self._handlers: Dict[str, List[Callable]] = {}
        self._executor = ThreadPoolExecutor(max_workers=4)

    def subscribe(self, event_type: str, handler: Callable):
        handlers = self._handlers.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)

    def unsubscribe(self, event_type: str, handler: Callable):
        if handler in self._handlers.get(event_type, []):
            self._handlers[event_type].remove(handler)

    async def publish(self, event_type: str, data: Dict[str, Any]):
        handlers = list(self._handlers.get(event_type, []))
        if not handlers:
            return

        loop = asyncio.get_running_loop()
        tasks = []
        for handler in handlers:
            if asyncio.iscoroutinefunction(handler):
                tasks.append(asyncio.create_task(handler(data)))
            else:
                tasks.append(loop.run_in_executor(self._executor, handler, data))

        # handler failures are logged and never reach the publisher
        results = await asyncio.gather(*tasks, return_exceptions=True)
        for handler, result in zip(handlers, results):
            if isinstance(result, Exception):
                logger.error(f"Error in event handler {handler.__name__} for {event_type}: {result}")

event_bus = EventBus()
