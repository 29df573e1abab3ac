'''jsonfetch: fetch one JSON document and print it.'''

from jsonfetch.fetchers import TODO_URL, Fetcher, Response, fetch_once

__all__ = ['TODO_URL', 'Fetcher', 'Response', 'fetch_once']
