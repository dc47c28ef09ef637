import logging
from flask import jsonify

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = 'Sorry, something went wrong'


class ResolveError(Exception):
    """Base class for failures while resolving a resource."""


class UpstreamEmptyError(ResolveError):
    def __init__(self, provider, query=None):
        self.provider = provider
        self.query = query
        super().__init__(f"No data from {provider} for query: {query!r}")


class UpstreamError(ResolveError):
    def __init__(self, provider, reason):
        self.provider = provider
        self.reason = reason
        super().__init__(f"{provider} request failed: {reason}")


class StoreError(ResolveError):
    pass


def register_error_handlers(app):
    @app.errorhandler(ResolveError)
    def handle_resolve_error(err):
        logger.exception(f"ERR {err}")
        return jsonify({'error': GENERIC_ERROR_MESSAGE}), 500
