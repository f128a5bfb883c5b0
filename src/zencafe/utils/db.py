from protean.domain import Domain
from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError

from zencafe.utils.logging import get_logger

logger = get_logger(__name__)

_SQL_PROVIDERS = ("sqlite", "postgresql")


class DatabaseUnavailableError(Exception):
    """Raised when a configured provider cannot be reached."""


def setup_db(domain: Domain):
    """Setup database schema"""
    with domain.domain_context():
        for _, provider in domain.providers.items():
            if provider.conn_info["provider"] in _SQL_PROVIDERS:
                engine = create_engine(provider.conn_info["database_uri"])

                # Touching `_dao` registers each table on the provider's metadata
                for _, aggregate_record in domain.registry.aggregates.items():
                    if aggregate_record.cls.meta_.provider == provider.name:
                        domain.repository_for(aggregate_record.cls)._dao  # noqa: B018

                for _, entity_record in domain.registry.entities.items():
                    if entity_record.cls.meta_.provider == provider.name:
                        domain.repository_for(entity_record.cls)._dao  # noqa: B018

                provider._metadata.create_all(engine)
                logger.info("Database schema created", provider=provider.name)


def drop_db(domain: Domain):
    """Drop database schema"""
    with domain.domain_context():
        for _, provider in domain.providers.items():
            if provider.conn_info["provider"] in _SQL_PROVIDERS:
                engine = create_engine(provider.conn_info["database_uri"])
                provider._metadata.drop_all(engine)
                logger.info("Database schema dropped", provider=provider.name)


def check_db(domain: Domain):
    """Verify that every configured provider answers a trivial read.

    Raises `DatabaseUnavailableError` on the first provider that does not.
    """
    with domain.domain_context():
        for name, provider in domain.providers.items():
            if provider.conn_info["provider"] not in _SQL_PROVIDERS:
                continue

            engine = create_engine(provider.conn_info["database_uri"])
            try:
                with engine.connect() as conn:
                    conn.execute(text("SELECT 1"))
            except SQLAlchemyError as exc:
                logger.error("Database unavailable", provider=name, error=str(exc))
                raise DatabaseUnavailableError(f"Provider '{name}' is unavailable: {exc}") from exc
            finally:
                engine.dispose()
