import logging
import requests
from app.errors import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


def get_json(provider, url, params=None, timeout=DEFAULT_TIMEOUT):
    """Single GET against a provider; returns the decoded JSON body.

    Network failures, non-2xx statuses and undecodable bodies are raised
    as UpstreamError. Nothing is retried.
    """
    try:
        resp = requests.get(url, params=params, timeout=timeout)
        resp.raise_for_status()
        data = resp.json()
    except requests.RequestException as e:
        raise UpstreamError(provider, str(e)) from e
    except ValueError as e:
        raise UpstreamError(provider, f'invalid JSON body: {e}') from e

    logger.info(f"Got data from {provider} API")
    return data


def unwrap(provider, body, *path):
    """Walk ``path`` into a JSON envelope and return the list found there."""
    node = body
    try:
        for key in path:
            node = node[key]
    except (KeyError, TypeError, IndexError) as e:
        raise UpstreamError(provider, f"malformed envelope, missing {'.'.join(path)}") from e

    if not isinstance(node, list):
        raise UpstreamError(provider, f"malformed envelope, {'.'.join(path)} is not a list")
    return node
