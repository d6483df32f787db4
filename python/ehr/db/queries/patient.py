from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session as Database

from ehr.db.models.patient import DbPatient


def get_patients_with_uid(db: Database, uid: str) -> Sequence[DbPatient]:
    """
    Get the patients whose UID is the given UID from the database. This sequence should contain
    at most one patient.
    """

    return db.execute(select(DbPatient)
        .where(DbPatient.uid == uid)
    ).scalars().all()

