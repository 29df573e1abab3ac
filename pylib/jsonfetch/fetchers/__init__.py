'''HTTP fetcher for the todo endpoint.'''

from jsonfetch.fetchers.http import TODO_URL, Fetcher, Response, fetch_once

__all__ = [
    'Fetcher',
    'Response',
    'TODO_URL',
    'fetch_once',
]
