from app.integrations.http import DEFAULT_TIMEOUT, get_json, unwrap

DARKSKY_BASE = 'https://api.darksky.net/forecast'


class WeatherClient:
    provider = 'darksky'

    def __init__(self, api_key, timeout=DEFAULT_TIMEOUT):
        self.api_key = api_key
        self.timeout = timeout

    def forecast_url(self, location):
        return f"{DARKSKY_BASE}/{self.api_key}/{location['latitude']},{location['longitude']}"

    def fetch(self, location):
        """Fetch the daily forecast for a resolved location. Returns raw day dicts."""
        body = get_json(self.provider, self.forecast_url(location), timeout=self.timeout)
        return unwrap(self.provider, body, 'daily', 'data')
