import asyncio

from app.utils.events import EventBus


def test_publish_reaches_async_and_sync_handlers():
    bus = EventBus()
    received = []

    async def async_handler(data):
        received.append(("async", data["value"]))

    def sync_handler(data):
        received.append(("sync", data["value"]))

    bus.subscribe("thing_happened", async_handler)
    bus.subscribe("thing_happened", sync_handler)
    asyncio.run(bus.publish("thing_happened", {"value": 1}))

    assert sorted(received) == [("async", 1), ("sync", 1)]


def test_failing_handler_does_not_break_publisher():
    bus = EventBus()
    received = []

    async def broken(data):
        raise RuntimeError("mail server down")

    async def healthy(data):
        received.append(data)

    bus.subscribe("thing_happened", broken)
    bus.subscribe("thing_happened", healthy)
    asyncio.run(bus.publish("thing_happened", {"value": 2}))

    assert received == [{"value": 2}]


def test_unsubscribe_and_unknown_events():
    bus = EventBus()
    received = []

    def handler(data):
        received.append(data)

    bus.subscribe("thing_happened", handler)
    bus.subscribe("thing_happened", handler)
    bus.unsubscribe("thing_happened", handler)
    asyncio.run(bus.publish("thing_happened", {"value": 3}))
    asyncio.run(bus.publish("nobody_listens", {"value": 4}))

    assert received == []
