import pytest
import requests
from unittest.mock import MagicMock

from app import create_app
from app.extensions import db as _db
from app.models.location import Location
from config import TestConfig


@pytest.fixture(scope='session')
def app():
    """Create app with test config."""
    app = create_app(TestConfig)
    return app


@pytest.fixture(autouse=True)
def setup_db(app):
    """Create tables before each test, drop after."""
    with app.app_context():
        _db.create_all()
        yield
        _db.session.rollback()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db_session(app):
    with app.app_context():
        yield _db.session


@pytest.fixture
def seattle(db_session):
    """A location already present in the cache."""
    location = Location(
        search_query='seattle',
        formatted_query='Seattle, WA, USA',
        latitude=47.6062,
        longitude=-122.3321,
    )
    db_session.add(location)
    db_session.commit()
    return location


def fake_response(json_data, status_code=200):
    """Build a stand-in for requests.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = json_data
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f'{status_code} Error')
    else:
        resp.raise_for_status.return_value = None
    return resp


def geocode_payload(address='1600 Amphitheatre Pkwy', lat=37.4, lng=-122.1):
    return {
        'results': [
            {
                'formatted_address': address,
                'geometry': {'location': {'lat': lat, 'lng': lng}},
            },
        ],
        'status': 'OK',
    }


def darksky_payload(days=3):
    return {
        'daily': {
            'data': [
                {'summary': f'Day {i} summary', 'time': 1609459200 + i * 86400}
                for i in range(days)
            ],
        },
    }


def eventbrite_payload(count=8):
    return {
        'events': [
            {
                'url': f'https://www.eventbrite.com/e/{i}',
                'name': {'text': f'Event {i}'},
                'start': {'local': f'2021-01-0{i + 1}T19:00:00'},
                'description': {'text': f'Description {i}'},
            }
            for i in range(count)
        ],
    }


def tmdb_payload(count=2):
    return {
        'page': 1,
        'results': [
            {
                'title': f'Movie {i}',
                'overview': f'Overview {i}',
                'vote_average': 7.5,
                'vote_count': 100 + i,
                'poster_path': f'/poster{i}.jpg',
                'popularity': 12.3,
                'release_date': '1993-04-02',
            }
            for i in range(count)
        ],
    }
