import logging
from sqlalchemy.exc import SQLAlchemyError
from app.errors import StoreError

logger = logging.getLogger(__name__)


class StoreGateway:
    """Thin SELECT / INSERT layer over a SQLAlchemy session.

    The session is injected so resolvers never reach for a global handle.
    """

    def __init__(self, session):
        self.session = session

    def select(self, model, **criteria):
        try:
            return (
                self.session.query(model)
                .filter_by(**criteria)
                .order_by(model.id)
                .all()
            )
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError(f"SELECT on {model.__tablename__} failed: {e}") from e

    def insert(self, rows):
        """Persist new rows in one commit and return them with ids assigned."""
        try:
            self.session.add_all(rows)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            table = rows[0].__tablename__ if rows else '?'
            raise StoreError(f"INSERT into {table} failed: {e}") from e

        logger.debug(f"Inserted {len(rows)} rows")
        return rows
