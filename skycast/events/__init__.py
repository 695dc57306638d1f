from .bus import EventBus, QueryEvent

__all__ = ["EventBus", "QueryEvent"]
