from .base import QueryPhase, QueryState

__all__ = ["QueryPhase", "QueryState"]
