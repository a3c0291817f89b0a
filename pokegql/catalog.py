import asyncio
import logging
import time
import typing
from urllib.parse import quote

import httpx

from .errors import MalformedResponseError, NotFoundError, TransportError
from .models import Record

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'https://pokeapi.co/api/v2'


class CatalogClient:
    """Async client for the upstream pokemon catalog.

    One ``httpx.AsyncClient`` is shared by every request, so the connection
    pool lives as long as the client is open. Use it as an async context
    manager, or call ``open``/``close`` from the application lifespan.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = None,
        transport: httpx.AsyncBaseTransport = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport
        self._client: typing.Optional[httpx.AsyncClient] = None

    async def open(self) -> None:
        if self._client is None:
            options = {}
            # without a configured timeout httpx applies its own default
            if self.timeout is not None:
                options['timeout'] = self.timeout
            self._client = httpx.AsyncClient(base_url=self.base_url, transport=self.transport, **options)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> 'CatalogClient':
        await self.open()
        return self

    async def __aexit__(self, *exc_info: typing.Any) -> None:
        await self.close()

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError('CatalogClient is not open.')
        return self._client

    async def fetch_pokemon(self, name_or_id: str) -> Record:
        url = f'/pokemon/{quote(str(name_or_id), safe="")}'
        response = await self._get_keyed(url, 'Pokemon not found')
        return Record.from_payload(self._json(response), url=url)

    async def list_pokemon(self, limit: int = 10, offset: int = 0) -> typing.List[Record]:
        url = '/pokemon'
        response = await self._get(url, params={'limit': limit, 'offset': offset})
        data = self._json(response)
        try:
            urls = [entry['url'] for entry in data['results']]
        except (KeyError, TypeError) as exc:
            raise MalformedResponseError('Pokemon listing has no results', url=url) from exc
        return await self.fetch_many(urls)

    async def pokemon_by_type(self, type_name: str) -> typing.List[Record]:
        url = f'/type/{quote(str(type_name), safe="")}'
        response = await self._get_keyed(url, 'Type not found')
        data = self._json(response)
        try:
            urls = [entry['pokemon']['url'] for entry in data['pokemon']]
        except (KeyError, TypeError) as exc:
            raise MalformedResponseError('Type payload has no pokemon', url=url) from exc
        return await self.fetch_many(urls)

    async def fetch_record(self, url: str) -> Record:
        response = await self._get(url)
        return Record.from_payload(self._json(response), url=url)

    async def fetch_many(self, urls: typing.Sequence[str]) -> typing.List[Record]:
        """Fetch every url concurrently, results in the same order as ``urls``.

        The first failure cancels the sub-fetches still in flight and is
        re-raised once they have all finished.
        """
        tasks = [asyncio.ensure_future(self.fetch_record(url)) for url in urls]
        if not tasks:
            return []
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def _get_keyed(self, url: str, not_found_message: str) -> httpx.Response:
        try:
            response = await self._get(url)
        except TransportError as exc:
            raise NotFoundError(not_found_message, url=url) from exc
        if not response.is_success:
            logger.info('%s answered %s', url, response.status_code)
            raise NotFoundError(not_found_message, url=url)
        return response

    async def _get(self, url: str, params: typing.Dict[str, typing.Any] = None) -> httpx.Response:
        start = time.monotonic()
        try:
            response = await self.client.get(url, params=params)
        except httpx.RequestError as exc:
            logger.warning('GET %s failed: %s', url, exc)
            raise TransportError(f'Upstream request failed: {exc}', url=url) from exc

        logger.debug(
            'GET %s -> %s (%.1fms)', response.url, response.status_code, (time.monotonic() - start) * 1000
        )
        return response

    @staticmethod
    def _json(response: httpx.Response) -> typing.Any:
        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                f'Upstream body is not JSON (status {response.status_code})', url=str(response.url)
            ) from exc
