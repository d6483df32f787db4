from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session as Database

from ehr.db.models.sample import DbSample


def get_samples_with_patient_uid(db: Database, patient_uid: str) -> Sequence[DbSample]:
    """
    Get all the samples of a patient from the database, the most recently edited sample first.
    """

    return db.execute(select(DbSample)
        .where(DbSample.patient_uid == patient_uid)
        .order_by(DbSample.last_edited.desc())
    ).scalars().all()

