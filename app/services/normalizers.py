"""Map provider JSON shapes onto the records this API stores and serves.

Each function takes one raw item from a provider's result list and returns a
plain dict. Keys a well-formed provider response always carries are indexed
directly, so malformed input raises KeyError/TypeError to the caller.
"""
from datetime import datetime, timezone

TMDB_IMAGE_BASE = 'https://image.tmdb.org/t/p/w500'


def normalize_location(search_query, raw):
    coords = raw['geometry']['location']
    return {
        'search_query': search_query,
        'formatted_query': raw['formatted_address'],
        'latitude': coords['lat'],
        'longitude': coords['lng'],
    }


def format_forecast_time(epoch_seconds):
    """Render epoch seconds as 'Fri Jan 01 2021' (UTC, always 15 chars)."""
    day = datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)
    return day.strftime('%a %b %d %Y')[:15]


def normalize_weather(raw):
    return {
        'forecast': raw['summary'],
        'time': format_forecast_time(raw['time']),
    }


def normalize_event(raw):
    description = raw.get('description') or {}
    return {
        'link': raw['url'],
        'name': raw['name']['text'],
        'event_date': raw['start']['local'],
        'summary': description.get('text'),
    }


def poster_url(poster_path):
    if not poster_path:
        return None
    return f"{TMDB_IMAGE_BASE}/{poster_path.lstrip('/')}"


def normalize_movie(raw):
    return {
        'title': raw['title'],
        'overview': raw.get('overview'),
        'average_votes': raw.get('vote_average'),
        'total_votes': raw.get('vote_count'),
        'image_url': poster_url(raw.get('poster_path')),
        'popularity': raw.get('popularity'),
        'released_on': raw.get('release_date'),
    }
