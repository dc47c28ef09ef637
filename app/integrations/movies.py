from app.integrations.http import DEFAULT_TIMEOUT, get_json, unwrap

TMDB_SEARCH_URL = 'https://api.themoviedb.org/3/search/movie'


class MovieClient:
    provider = 'tmdb'

    def __init__(self, api_key, timeout=DEFAULT_TIMEOUT):
        self.api_key = api_key
        self.timeout = timeout

    def fetch(self, query):
        """Search movies by free text. Returns raw result dicts."""
        body = get_json(
            self.provider,
            TMDB_SEARCH_URL,
            params={'api_key': self.api_key, 'query': query},
            timeout=self.timeout,
        )
        return unwrap(self.provider, body, 'results')
