import pytest
import requests
from unittest.mock import patch

from app.errors import UpstreamEmptyError, UpstreamError
from app.integrations.eventbrite import EventbriteClient
from app.integrations.geocode import GeocodeClient
from app.integrations.movies import MovieClient
from app.integrations.weather import WeatherClient
from conftest import darksky_payload, eventbrite_payload, fake_response, geocode_payload, tmdb_payload

LOCATION = {'id': 1, 'search_query': 'seattle', 'latitude': 47.6062, 'longitude': -122.3321}


class TestGeocodeClient:
    def test_returns_first_result(self):
        """Only the best geocode match is kept."""
        payload = geocode_payload()
        payload['results'].append({'formatted_address': 'second', 'geometry': {'location': {'lat': 0, 'lng': 0}}})

        with patch('app.integrations.http.requests.get', return_value=fake_response(payload)) as mock_get:
            results = GeocodeClient('geo-key').fetch('googleplex')

        assert len(results) == 1
        assert results[0]['formatted_address'] == '1600 Amphitheatre Pkwy'
        params = mock_get.call_args.kwargs['params']
        assert params == {'address': 'googleplex', 'key': 'geo-key'}

    def test_empty_results_raise(self):
        """Zero geocode results should raise the empty error."""
        with patch('app.integrations.http.requests.get', return_value=fake_response({'results': []})):
            with pytest.raises(UpstreamEmptyError):
                GeocodeClient('geo-key').fetch('xyzzyville')

    def test_malformed_envelope(self):
        """A body without results should raise an upstream error."""
        with patch('app.integrations.http.requests.get', return_value=fake_response({'error_message': 'denied'})):
            with pytest.raises(UpstreamError):
                GeocodeClient('geo-key').fetch('seattle')


class TestWeatherClient:
    def test_url_embeds_key_and_coordinates(self):
        """Forecast URL should carry the key and coordinates."""
        with patch('app.integrations.http.requests.get', return_value=fake_response(darksky_payload(8))) as mock_get:
            days = WeatherClient('sky-key', timeout=3).fetch(LOCATION)

        assert len(days) == 8
        assert mock_get.call_args.args[0] == 'https://api.darksky.net/forecast/sky-key/47.6062,-122.3321'
        assert mock_get.call_args.kwargs['timeout'] == 3

    def test_http_error(self):
        """Non-2xx status should raise an upstream error."""
        with patch('app.integrations.http.requests.get', return_value=fake_response({}, status_code=403)):
            with pytest.raises(UpstreamError):
                WeatherClient('bad-key').fetch(LOCATION)

    def test_network_error(self):
        """Connection failure should raise an upstream error."""
        with patch('app.integrations.http.requests.get', side_effect=requests.ConnectionError('down')):
            with pytest.raises(UpstreamError):
                WeatherClient('sky-key').fetch(LOCATION)


class TestEventbriteClient:
    def test_caps_results(self):
        """Eventbrite results should be capped at five."""
        with patch('app.integrations.http.requests.get', return_value=fake_response(eventbrite_payload(8))) as mock_get:
            events = EventbriteClient('eb-token').fetch(LOCATION)

        assert len(events) == 5
        assert events[0]['name']['text'] == 'Event 0'
        params = mock_get.call_args.kwargs['params']
        assert params['location.latitude'] == 47.6062
        assert params['location.longitude'] == -122.3321
        assert params['token'] == 'eb-token'

    def test_fewer_than_cap(self):
        """Short listings are returned whole."""
        with patch('app.integrations.http.requests.get', return_value=fake_response(eventbrite_payload(2))):
            assert len(EventbriteClient('eb-token').fetch(LOCATION)) == 2


class TestMovieClient:
    def test_search_params(self):
        """Movie search should send key and query text."""
        with patch('app.integrations.http.requests.get', return_value=fake_response(tmdb_payload(3))) as mock_get:
            movies = MovieClient('tmdb-key').fetch('seattle')

        assert len(movies) == 3
        assert mock_get.call_args.kwargs['params'] == {'api_key': 'tmdb-key', 'query': 'seattle'}

    def test_invalid_json(self):
        """An undecodable body should raise an upstream error."""
        resp = fake_response(None)
        resp.json.side_effect = ValueError('Expecting value')
        with patch('app.integrations.http.requests.get', return_value=resp):
            with pytest.raises(UpstreamError):
                MovieClient('tmdb-key').fetch('seattle')
