'''Shared pytest markers, skip guards, and fixtures.

Markers
-------
unit  fast, no network; HTTP goes through httpx.MockTransport
e2e   hits the live jsonplaceholder endpoint (set JSONFETCH_TEST_E2E=1)
'''

from __future__ import annotations

import os

import httpx
import pytest
import structlog

from jsonfetch.log import configure_logging


TODO_BODY = {'id': 1, 'userId': 1, 'title': 'delectus aut autem', 'completed': False}


def pytest_configure(config):
    config.addinivalue_line('markers', 'unit: fast, no network')
    config.addinivalue_line('markers', 'e2e: requires the live jsonplaceholder endpoint')


def pytest_collection_modifyitems(config, items):
    if os.getenv('JSONFETCH_TEST_E2E'):
        return
    skip_e2e = pytest.mark.skip(reason='Set JSONFETCH_TEST_E2E=1 to run end-to-end tests')
    for item in items:
        if 'e2e' in item.keywords:
            item.add_marker(skip_e2e)


class RecordingTransport(httpx.MockTransport):
    '''MockTransport that keeps every request it handled.'''

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def stderr_logging(capsys):
    '''Route structlog to the captured stderr for the duration of a test.'''
    configure_logging('warning')


@pytest.fixture
def todo_body():
    return dict(TODO_BODY)


@pytest.fixture
def ok_transport():
    return RecordingTransport(lambda request: httpx.Response(200, json=TODO_BODY))


@pytest.fixture
def not_found_transport():
    return RecordingTransport(lambda request: httpx.Response(404, json={}))


@pytest.fixture
def unreachable_transport():
    def _fail(request):
        raise httpx.ConnectError('[Errno -2] Name or service not known', request=request)

    return RecordingTransport(_fail)
