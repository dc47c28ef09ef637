"""Cache-or-fetch resolution for locations, weather, events and movies.

Every resolver looks up stored rows for its key first. Rows found are returned
as-is (no TTL, no revalidation). Otherwise the provider is called exactly once,
each raw item is normalized and the batch is persisted before being returned.
"""
import logging
from app.errors import UpstreamError
from app.models import Event, Location, Movie, Weather
from app.services import normalizers

logger = logging.getLogger(__name__)


class Resolver:
    kind = None
    model = None

    def __init__(self, store, fetcher):
        self.store = store
        self.fetcher = fetcher

    def resolve(self, key):
        rows = self.store.select(self.model, **self.criteria(key))
        if rows:
            logger.info(f"Got {self.kind} data from SQL ({len(rows)} rows)")
            return [row.to_dict() for row in rows]

        logger.info(f"No cached {self.kind} data, fetching from API")
        raw_items = self.fetch(key)
        try:
            new_rows = [self.build_row(raw, key) for raw in raw_items]
        except (KeyError, TypeError, AttributeError) as e:
            raise UpstreamError(self.fetcher.provider, f'unexpected item shape: {e!r}') from e

        self.store.insert(new_rows)
        return [row.to_dict() for row in new_rows]

    def criteria(self, key):
        return {'location_id': key['id']}

    def fetch(self, key):
        return self.fetcher.fetch(key)

    def build_row(self, raw, key):
        raise NotImplementedError


class LocationResolver(Resolver):
    kind = 'location'
    model = Location

    def criteria(self, key):
        return {'search_query': key}

    def build_row(self, raw, key):
        return Location.from_record(normalizers.normalize_location(key, raw))


class WeatherResolver(Resolver):
    kind = 'weather'
    model = Weather

    def build_row(self, raw, key):
        return Weather.from_record(normalizers.normalize_weather(raw), key['id'])


class EventResolver(Resolver):
    kind = 'event'
    model = Event

    def build_row(self, raw, key):
        return Event.from_record(normalizers.normalize_event(raw), key['id'])


class MovieResolver(Resolver):
    kind = 'movie'
    model = Movie

    def fetch(self, key):
        return self.fetcher.fetch(key['search_query'])

    def build_row(self, raw, key):
        return Movie.from_record(normalizers.normalize_movie(raw), key['id'])
