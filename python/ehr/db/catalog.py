"""
SQLAlchemy Core definitions of the PostgreSQL catalog views read by the EHR helpers. These tables
are only read and are not part of the application metadata.
"""

from sqlalchemy import Column, Float, Integer, MetaData, String, Table

catalog_metadata = MetaData()

information_schema_columns = Table(
    'columns',
    catalog_metadata,
    Column('table_schema',     String),
    Column('table_name',       String),
    Column('column_name',      String),
    Column('ordinal_position', Integer),
    Column('column_default',   String),
    Column('is_nullable',      String),
    Column('data_type',        String),
    Column('udt_name',         String),
    schema='information_schema',
)

pg_type = Table(
    'pg_type',
    catalog_metadata,
    Column('oid',     Integer, primary_key=True),
    Column('typname', String),
    Column('typtype', String),
    schema='pg_catalog',
)

pg_enum = Table(
    'pg_enum',
    catalog_metadata,
    Column('oid',           Integer, primary_key=True),
    Column('enumtypid',     Integer),
    Column('enumsortorder', Float),
    Column('enumlabel',     String),
    schema='pg_catalog',
)
