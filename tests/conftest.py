"""Shared fixtures: an in-memory stand-in for the HubSpot objects API."""

import itertools

import pytest
import requests

from app import create_app
from crm_client import HubSpotClient
from settings import Settings

TOKEN = 'test-token'


class StubResponse:
    """Just enough of :class:`requests.Response` for the client."""

    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self._text = text

    def json(self):
        if self._text is not None:
            raise ValueError('not JSON')
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f'{self.status_code} Error', response=self)


class StubHubSpot:
    """Session double that stores upserted records and echoes them on list.

    ``fail_with`` may be set to an HTTP status code or an exception instance to
    make the next calls fail.  ``raw`` overrides the list payload.
    """

    def __init__(self, token=TOKEN):
        self.token = token
        self.records = []
        self.calls = []
        self.fail_with = None
        self.raw = None
        self._ids = itertools.count(1)

    def _check(self, headers):
        if isinstance(self.fail_with, Exception):
            raise self.fail_with
        if self.fail_with is not None:
            return StubResponse(self.fail_with, {'status': 'error'})
        if headers.get('Authorization') != f'Bearer {self.token}' or not self.token:
            return StubResponse(401, {'category': 'INVALID_AUTHENTICATION'})
        return None

    def get(self, url, params=None, headers=None):
        self.calls.append(('GET', url, params, None))
        failed = self._check(headers or {})
        if failed is not None:
            return failed
        if self.raw is not None:
            return self.raw
        wanted = params['properties'].split(',')
        results = [
            {'id': rec['id'], 'properties': {k: rec['properties'].get(k) for k in wanted}}
            for rec in self.records[: params['limit']]
        ]
        return StubResponse(200, {'results': results})

    def post(self, url, json=None, headers=None):
        self.calls.append(('POST', url, None, json))
        failed = self._check(headers or {})
        if failed is not None:
            return failed
        record = {'id': str(next(self._ids)), 'properties': dict(json['properties'])}
        self.records.append(record)
        return StubResponse(201, record)


@pytest.fixture
def settings():
    return Settings(private_app_access_token=TOKEN, _env_file=None)


@pytest.fixture
def remote():
    return StubHubSpot()


@pytest.fixture
def hubspot_client(settings, remote):
    return HubSpotClient(settings, session=remote)


@pytest.fixture
def client(settings, hubspot_client):
    app = create_app(settings, hubspot_client)
    app.config.update(TESTING=True)
    return app.test_client()
