from sqlalchemy import URL, Engine, create_engine

from ehr.config_file import DatabaseConfig


def get_database_engine(config: DatabaseConfig) -> Engine:
    """
    Connect to the EHR database and return an SQLAlchemy engine using the provided credentials.
    """

    # The SQLAlchemy URL object notably escapes special characters in the configuration attributes.
    url = URL.create(
        drivername = 'postgresql+psycopg2',
        host       = config.host,
        port       = config.port,
        username   = config.username,
        password   = config.password,
        database   = config.database,
    )

    # The helpers only read, so each request works on the latest committed data.
    return create_engine(url, isolation_level='READ COMMITTED')
