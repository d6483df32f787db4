from sqlalchemy import select
from sqlalchemy.orm import Session as Database

from ehr.db.catalog import pg_enum, pg_type
from ehr.exception.enum_type_not_found_error import EnumTypeNotFoundError
from ehr.util.text import id_to_label


def get_enum_values(db: Database, type_name: str) -> list[str]:
    """
    Get the values of a database enum type in their declaration order, or raise an
    `EnumTypeNotFoundError` if that type does not exist or has no values.
    """

    values = db.execute(select(pg_enum.c.enumlabel)
        .join(pg_type, pg_type.c.oid == pg_enum.c.enumtypid)
        .where(pg_type.c.typname == type_name)
        .order_by(pg_enum.c.enumsortorder)
    ).scalars().all()

    if not values:
        raise EnumTypeNotFoundError(type_name)

    return list(values)


def get_enum_variants(db: Database, type_name: str) -> dict[str, str]:
    """
    Get the variants of a database enum type as an ordered mapping from each value to its
    displayed label, or raise an `EnumTypeNotFoundError` if that type does not exist.
    """

    return {value: id_to_label(value) for value in get_enum_values(db, type_name)}
