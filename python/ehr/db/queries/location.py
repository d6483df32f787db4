from collections.abc import Sequence

from sqlalchemy import String, cast, func, select
from sqlalchemy.orm import Session as Database

from ehr.db.models.location import DbLocation


def get_locations_with_uid(db: Database, uid: str) -> Sequence[DbLocation]:
    """
    Get the locations whose UID is the given UID from the database. This sequence should contain
    at most one location.
    """

    return db.execute(select(DbLocation)
        .where(DbLocation.uid == uid)
    ).scalars().all()


def get_unique_locations(db: Database) -> Sequence[DbLocation]:
    """
    Get the valid locations from the database, keeping a single location (the one with the lowest
    UID) for each distinct name, address and department.
    """

    # PostgreSQL has no `min` aggregate for UUIDs, the UIDs are compared as text.
    uid_text = cast(DbLocation.uid, String)

    unique_uids = (select(func.min(uid_text))
        .where(DbLocation.is_valid)
        .group_by(DbLocation.name, DbLocation.address, DbLocation.department)
    )

    return db.execute(select(DbLocation)
        .where(uid_text.in_(unique_uids))
        .order_by(DbLocation.name, DbLocation.uid)
    ).scalars().all()
