"""Test doubles shared across the suite."""

from typing import Callable, Dict, List, Union
from unittest.mock import AsyncMock

import httpx

Route = Union[
    httpx.Response, List[httpx.Response], Callable[[httpx.Request], httpx.Response]
]


class FakeClock:
    """Epoch-millisecond clock that only moves when told to."""

    def __init__(self, start: float):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


class Router:
    """
    Path-keyed MockTransport handler.

    A route is a single response, a list of responses served in order (the
    last one repeats), or a callable taking the request.
    """

    def __init__(self, routes: Dict[str, Route]):
        self.routes = routes
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(
                404, json={"status": {"status_code": 404, "message": "Data not found"}}
            )
        if callable(route):
            return route(request)
        if isinstance(route, list):
            route = route[min(self.calls_to(request.url.path), len(route)) - 1]
        return _fresh(route)

    def calls_to(self, path: str) -> int:
        return sum(1 for r in self.requests if r.url.path == path)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def _fresh(response: httpx.Response) -> httpx.Response:
    # Responses are single-use once a client has read them
    return httpx.Response(
        response.status_code, headers=response.headers, content=response.content
    )


def slept_seconds(sleep: AsyncMock) -> List[float]:
    """Durations passed to a patched asyncio.sleep."""
    return [call.args[0] for call in sleep.await_args_list]
