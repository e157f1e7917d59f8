"""Thin client for the HubSpot CRM custom object endpoints.

Only two calls are needed: list the records of the configured object type and
write one back.  Every failure (network, HTTP status, unreadable body) is
reported as a single error kind per operation.
"""

import logging

import requests

logger = logging.getLogger(__name__)


class HubSpotError(Exception):
    """Base class for failed calls to the HubSpot API."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class RemoteFetchError(HubSpotError):
    """Listing records failed."""


class RemoteWriteError(HubSpotError):
    """Writing a record failed."""


def _status_of(exc):
    if exc.response is not None:
        return exc.response.status_code
    return None


def _to_record(item):
    """Return ``{'id', 'properties'}`` for one list result, or ``None`` if malformed."""
    if not isinstance(item, dict):
        return None
    record_id = item.get('id')
    if record_id is None or isinstance(record_id, (bool, dict, list)):
        return None
    props = item.get('properties')
    if props is None:
        props = {}
    if not isinstance(props, dict):
        return None
    return {'id': str(record_id), 'properties': dict(props)}


class HubSpotClient:
    """Read and write records of one custom object type.

    Parameters
    ----------
    settings:
        Frozen :class:`settings.Settings`; supplies the token and endpoint.
    session:
        Object with ``get``/``post`` like :class:`requests.Session`.  A new
        session is created when omitted.
    """

    def __init__(self, settings, session=None):
        self._url = settings.objects_url
        self._headers = {
            'Authorization': f'Bearer {settings.private_app_access_token}',
            'Content-Type': 'application/json',
        }
        self._session = session if session is not None else requests.Session()

    def list_records(self, properties, limit):
        """Return up to ``limit`` records with only ``properties`` requested.

        Records keep the order the API returned them in.  Each one is a dict
        with the remote ``id`` and a ``properties`` mapping.
        """
        params = {'properties': ','.join(properties), 'limit': limit}
        logger.debug('GET %s params=%s', self._url, params)
        try:
            response = self._session.get(self._url, params=params, headers=self._headers)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise RemoteFetchError(f'listing records failed: {exc}', _status_of(exc)) from exc
        except ValueError as exc:
            raise RemoteFetchError('listing records returned a non-JSON body') from exc

        results = payload.get('results') if isinstance(payload, dict) else None
        if not isinstance(results, list):
            raise RemoteFetchError("listing records returned no 'results' array")

        records = []
        for item in results:
            record = _to_record(item)
            if record is None:
                raise RemoteFetchError('listing records returned a malformed record')
            records.append(record)
        return records

    def upsert(self, values):
        """Send ``values`` as the ``properties`` of a record write.

        Whether this creates or updates is up to the API.  The response body is
        not used.
        """
        body = {'properties': dict(values)}
        logger.debug('POST %s keys=%s', self._url, sorted(body['properties']))
        try:
            response = self._session.post(self._url, json=body, headers=self._headers)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise RemoteWriteError(f'writing record failed: {exc}', _status_of(exc)) from exc
