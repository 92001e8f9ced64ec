import logging

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, declarative_base, sessionmaker

log = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """
    Owns the SQLAlchemy engine (and so the connection pool) for one app.

    Built once at startup and attached to ``app.state.database``; handlers
    get sessions from it through ``get_db``.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine = create_engine(url, future=True, echo=echo)
        self.SessionLocal = sessionmaker(
            autocommit=False, autoflush=False, expire_on_commit=False, bind=self.engine
        )

    def session(self) -> Session:
        return self.SessionLocal()

    def check_connection(self) -> None:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def init_db(self, reset: bool = False) -> None:
        """
        Create the products table if it does not exist.

        ``reset=True`` drops it first, which also restarts the id sequence.
        """
        # populate metadata
        import app.models.product  # noqa: F401

        if reset:
            log.info("Resetting database...")
            Base.metadata.drop_all(bind=self.engine)
        Base.metadata.create_all(bind=self.engine)
        log.info("Database initialized.")

    def clear_products(self) -> None:
        """Delete every product and restart ids at 1."""
        with self.engine.begin() as conn:
            conn.execute(text("DELETE FROM products"))
            if self.engine.dialect.name == "postgresql":
                conn.execute(text("ALTER SEQUENCE products_id_seq RESTART WITH 1"))
            elif self.engine.dialect.name == "sqlite":
                conn.execute(text("DELETE FROM sqlite_sequence WHERE name = 'products'"))

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request):
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
