import logging
from app.integrations.http import DEFAULT_TIMEOUT, get_json, unwrap

logger = logging.getLogger(__name__)

EVENTBRITE_SEARCH_URL = 'https://www.eventbriteapi.com/v3/events/search'
MAX_EVENTS = 5


class EventbriteClient:
    provider = 'eventbrite'

    def __init__(self, api_key, timeout=DEFAULT_TIMEOUT, limit=MAX_EVENTS):
        self.api_key = api_key
        self.timeout = timeout
        self.limit = limit

    def fetch(self, location):
        """Search events near a resolved location, keeping only the first ``limit``."""
        body = get_json(
            self.provider,
            EVENTBRITE_SEARCH_URL,
            params={
                'location.latitude': location['latitude'],
                'location.longitude': location['longitude'],
                'token': self.api_key,
            },
            timeout=self.timeout,
        )
        events = unwrap(self.provider, body, 'events')
        if len(events) > self.limit:
            logger.debug(f"Eventbrite returned {len(events)} events, keeping {self.limit}")
        return events[:self.limit]
