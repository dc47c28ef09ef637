from app.models.location import Location
from app.models.weather import Weather
from app.models.event import Event
from app.models.movie import Movie

__all__ = [
    'Location',
    'Weather', 'Event', 'Movie',
]
