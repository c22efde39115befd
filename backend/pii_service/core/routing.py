"""Route Keys — exact method+path lookup keys and the immutable route table.

Invariants:
    - Route key = uppercase method + single space + path, path taken verbatim
    - No trailing-slash normalization, no path parameters, no query strings
    - Route tables are read-only after construction

Design Decisions:
    - Literal string keys over a pattern matcher: four fixed routes, no path
      parameters yet. Swap for a trie once parameterized paths appear.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from pii_service.core.handler_result import HandlerResult

RouteHandler = Callable[[], HandlerResult]


@dataclass(frozen=True)
class RouteKey:
    """Composite (method, path) identifying a single route."""
    method: str
    path: str

    def __str__(self) -> str:
        return build_route_key(self.method, self.path)


def build_route_key(method: str, path: str) -> str:
    return f"{method.upper()} {path}"


def build_route_table(
    entries: Mapping[RouteKey, RouteHandler],
) -> Mapping[str, RouteHandler]:
    """Freeze route entries into a read-only mapping keyed by route key string."""
    table: dict[str, RouteHandler] = {}
    for key, route_handler in entries.items():
        route_key = str(key)
        if route_key in table:
            raise ValueError(f"Duplicate route: {route_key}")
        table[route_key] = route_handler
    return MappingProxyType(table)
