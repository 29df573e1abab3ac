'''HTTP fetcher using httpx.'''

import asyncio
from dataclasses import dataclass
from typing import Any

import httpx
import structlog
from rich.console import Console

from jsonfetch.log import ensure_logging


TODO_URL = 'https://jsonplaceholder.typicode.com/todos/1'

logger = structlog.get_logger()


@dataclass
class Response:
    '''Result of the GET: status code plus body (parsed JSON, or raw text).'''

    status: int
    data: Any
    url: str


class Fetcher:
    '''
    Fetches the todo endpoint once and prints the body.

    Single request per call; no retries, no caching, no timeout override.
    '''

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        # Tests pass httpx.MockTransport; None means the real network
        self.transport = transport
        ensure_logging()

    async def fetch(self) -> Response:
        '''
        GET the todo URL. Raises httpx.HTTPError on network failure or non-2xx status.
        '''
        logger.debug('fetching', url=TODO_URL)
        async with httpx.AsyncClient(transport=self.transport) as client:
            resp = await client.get(TODO_URL)
            resp.raise_for_status()
            try:
                data = resp.json()
            except ValueError:
                data = resp.text
        logger.debug('fetched', url=TODO_URL, status=resp.status_code)
        return Response(status=resp.status_code, data=data, url=str(resp.url))

    async def run(self) -> None:
        '''
        Fetch and print the body to stdout. Any failure is logged to stderr
        and swallowed; nothing is returned or raised.
        '''
        try:
            response = await self.fetch()
        except Exception as e:
            logger.error('Error fetching data:', error=str(e) or repr(e), url=TODO_URL)
            return
        if isinstance(response.data, str):
            print(response.data)
        else:
            Console().print_json(data=response.data)


def fetch_once() -> None:
    '''Fetch the todo endpoint once and print the result.'''
    asyncio.run(Fetcher().run())
