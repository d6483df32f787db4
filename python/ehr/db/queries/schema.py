from collections.abc import Mapping
from dataclasses import dataclass

from sqlalchemy import case, select
from sqlalchemy.orm import Session as Database

from ehr.db.catalog import information_schema_columns as columns


@dataclass
class ColumnDescriptor:
    """
    Description of a table column as read from the database catalog.
    """

    name: str
    data_type: str
    is_nullable: bool
    # Name of the column type if the column has a user-defined type, data type otherwise
    enum_type: str
    default: str | None


def get_table_schema(db: Database, table_name: str, sort: Mapping[str, int] | None = None) -> list[ColumnDescriptor]:
    """
    Get the descriptors of the columns of a table in their declaration order, or an empty list if
    the table does not exist.

    If a sort mapping is provided, the columns are stably sorted using the value associated with
    their name in that mapping, columns that are not in the mapping sort as `0`.
    """

    enum_type = case(
        (columns.c.data_type == 'USER-DEFINED', columns.c.udt_name),
        else_=columns.c.data_type,
    )

    rows = db.execute(select(
            columns.c.column_name,
            columns.c.data_type,
            columns.c.is_nullable,
            enum_type.label('enum_type'),
            columns.c.column_default,
        )
        .where(columns.c.table_name == table_name)
        .order_by(columns.c.ordinal_position)
    ).all()

    schema = [
        ColumnDescriptor(
            name        = row.column_name,
            data_type   = row.data_type,
            is_nullable = row.is_nullable != 'NO',
            enum_type   = row.enum_type,
            default     = row.column_default,
        ) for row in rows
    ]

    if sort:
        schema.sort(key=lambda column: sort.get(column.name, 0))

    return schema
