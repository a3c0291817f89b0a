"""Shared fixtures: a fake PokeAPI served through ``httpx.MockTransport``."""

import asyncio
import typing

import httpx
import pytest

BASE_URL = 'https://pokeapi.co/api/v2'


def pokemon_payload(id: int, name: str, height: int = 7, weight: int = 69, abilities=()) -> dict:
    return {
        'id': id,
        'name': name,
        'height': height,
        'weight': weight,
        'abilities': [{'ability': {'name': ability, 'url': f'{BASE_URL}/ability/{ability}/'}} for ability in abilities],
        'base_experience': 112,
    }


class FakeUpstream:
    """Routes request paths to canned responses, optionally delayed."""

    def __init__(self) -> None:
        self.routes: typing.Dict[str, dict] = {}
        self.requests: typing.List[httpx.Request] = []
        self.completed: typing.List[str] = []
        self.cancelled: typing.List[str] = []

    def add(
        self,
        path: str,
        payload: typing.Any = None,
        *,
        status_code: int = 200,
        text: str = None,
        delay: float = 0.0,
        error: bool = False,
    ) -> None:
        self.routes[f'/api/v2{path}'] = dict(
            payload=payload, status_code=status_code, text=text, delay=delay, error=error
        )

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, text='Not Found')

        if route['delay']:
            try:
                await asyncio.sleep(route['delay'])
            except asyncio.CancelledError:
                self.cancelled.append(request.url.path)
                raise
        if route['error']:
            raise httpx.ConnectError('connection refused', request=request)

        self.completed.append(request.url.path)
        if route['text'] is not None:
            return httpx.Response(route['status_code'], text=route['text'])
        return httpx.Response(route['status_code'], json=route['payload'])

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def pikachu() -> dict:
    return pokemon_payload(25, 'pikachu', height=4, weight=60, abilities=['static', 'lightning-rod'])
