from app.errors import UpstreamEmptyError
from app.integrations.http import DEFAULT_TIMEOUT, get_json, unwrap

GEOCODE_URL = 'https://maps.googleapis.com/maps/api/geocode/json'


class GeocodeClient:
    provider = 'geocode'

    def __init__(self, api_key, timeout=DEFAULT_TIMEOUT):
        self.api_key = api_key
        self.timeout = timeout

    def fetch(self, query):
        """Geocode free text. Returns a one-element list with the best match."""
        body = get_json(
            self.provider,
            GEOCODE_URL,
            params={'address': query, 'key': self.api_key},
            timeout=self.timeout,
        )
        results = unwrap(self.provider, body, 'results')
        if not results:
            raise UpstreamEmptyError(self.provider, query)
        return results[:1]
