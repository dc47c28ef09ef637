import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    PORT = int(os.getenv('PORT', '3000'))
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'postgresql://localhost/city_explorer')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {'pool_pre_ping': True, 'pool_size': 5}

    # Provider keys, read once at startup
    GEOCODE_API_KEY = os.getenv('GEOCODE_API_KEY')
    WEATHER_API_KEY = os.getenv('WEATHER_API_KEY')
    EVENTBRITE_API_KEY = os.getenv('EVENTBRITE_API_KEY')
    MOVIES_API_KEY = os.getenv('MOVIES_API_KEY')

    # Outbound HTTP
    UPSTREAM_TIMEOUT_SECONDS = float(os.getenv('UPSTREAM_TIMEOUT_SECONDS', '10'))

    CORS_ORIGIN = os.getenv('CORS_ORIGIN', '*')

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}  # SQLite doesn't support pool_size
    GEOCODE_API_KEY = 'test-geocode-key'
    WEATHER_API_KEY = 'test-weather-key'
    EVENTBRITE_API_KEY = 'test-eventbrite-key'
    MOVIES_API_KEY = 'test-movies-key'
    UPSTREAM_TIMEOUT_SECONDS = 1.0
