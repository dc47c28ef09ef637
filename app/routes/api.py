import json
from flask import Blueprint, current_app, jsonify, request
from app.extensions import db
from app.integrations.eventbrite import EventbriteClient
from app.integrations.geocode import GeocodeClient
from app.integrations.movies import MovieClient
from app.integrations.weather import WeatherClient
from app.models import Location
from app.services.resolvers import EventResolver, LocationResolver, MovieResolver, WeatherResolver
from app.services.store import StoreGateway

api_bp = Blueprint('api', __name__)


def _store():
    return StoreGateway(db.session)


def _timeout():
    return current_app.config['UPSTREAM_TIMEOUT_SECONDS']


def _location_resolver():
    client = GeocodeClient(current_app.config['GEOCODE_API_KEY'], timeout=_timeout())
    return LocationResolver(_store(), client)


def _data_param():
    data = request.args.get('data')
    if not data:
        return None, (jsonify({'error': 'Query parameter "data" is required'}), 400)
    return data, None


def _location_param(allow_search_text=False):
    """Read ``data`` as a resolved Location object.

    With ``allow_search_text``, a value that is not a JSON object is treated as
    a place name and looked up among stored locations only, so the request
    still makes at most one provider call.
    """
    data, error = _data_param()
    if error:
        return None, error

    try:
        location = json.loads(data)
    except ValueError:
        location = None

    if isinstance(location, dict):
        return location, None
    if allow_search_text:
        rows = _store().select(Location, search_query=data)
        if not rows:
            return None, (jsonify({'error': f'Unknown location "{data}", resolve it via /location first'}), 404)
        return rows[0].to_dict(), None
    return None, (jsonify({'error': '"data" must be a location JSON object'}), 400)


@api_bp.route('/location')
def get_location():
    """Resolve a search string to a single location."""
    query, error = _data_param()
    if error:
        return error

    locations = _location_resolver().resolve(query)
    return jsonify(locations[0])


@api_bp.route('/weather')
def get_weather():
    """Daily forecast for a previously resolved location."""
    location, error = _location_param()
    if error:
        return error

    client = WeatherClient(current_app.config['WEATHER_API_KEY'], timeout=_timeout())
    return jsonify(WeatherResolver(_store(), client).resolve(location))


@api_bp.route('/events')
def get_events():
    """Up to five nearby events for a previously resolved location."""
    location, error = _location_param()
    if error:
        return error

    client = EventbriteClient(current_app.config['EVENTBRITE_API_KEY'], timeout=_timeout())
    return jsonify(EventResolver(_store(), client).resolve(location))


@api_bp.route('/movies')
def get_movies():
    """Movies matching a location's search text (location JSON or a cached place name)."""
    location, error = _location_param(allow_search_text=True)
    if error:
        return error

    client = MovieClient(current_app.config['MOVIES_API_KEY'], timeout=_timeout())
    return jsonify(MovieResolver(_store(), client).resolve(location))
