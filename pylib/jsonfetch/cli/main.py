'''CLI: fetch the todo JSON document once and print it.'''

import fire
import structlog

from jsonfetch.config import FetchConfig
from jsonfetch.fetchers import fetch_once
from jsonfetch.log import configure_logging


def main() -> None:
    '''jsonfetch: GET https://jsonplaceholder.typicode.com/todos/1 and print the JSON.'''
    try:
        config = FetchConfig.from_env()
    except ValueError as e:
        config = FetchConfig()
        configure_logging(config.log_level)
        structlog.get_logger().warning('bad JSONFETCH_LOG_LEVEL; using default', error=str(e), level=config.log_level)
    else:
        configure_logging(config.log_level)
    fire.Fire(fetch_once)
