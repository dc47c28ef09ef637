import logging
from flask import Blueprint, jsonify
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from app.extensions import db

logger = logging.getLogger(__name__)

health_bp = Blueprint('health', __name__)

CACHE_TABLES = ('locations', 'weathers', 'events', 'movies')


@health_bp.route('/health')
def health():
    return jsonify({'status': 'ok'})


@health_bp.route('/ready')
def ready():
    """Ready once the store answers and every cache table exists."""
    try:
        existing = set(inspect(db.engine).get_table_names())
    except SQLAlchemyError as e:
        logger.error(f"Readiness check failed: {e}")
        return jsonify({'status': 'not_ready', 'db': False, 'missing_tables': list(CACHE_TABLES)}), 503

    missing = [t for t in CACHE_TABLES if t not in existing]
    if missing:
        return jsonify({'status': 'not_ready', 'db': True, 'missing_tables': missing}), 503
    return jsonify({'status': 'ready', 'db': True, 'missing_tables': []})
