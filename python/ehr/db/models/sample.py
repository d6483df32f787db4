from datetime import datetime

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

import ehr.db.models.patient as db_patient
from ehr.db.base import Base
from ehr.db.decorators.json_list import JsonList


class DbSample(Base):
    __tablename__ = 'samplev1'

    uid                    : Mapped[str]              = mapped_column('uid', primary_key=True)
    patient_uid            : Mapped[str]              = mapped_column('patient_uid', ForeignKey('patientv1.uid'))
    created_at             : Mapped[datetime]         = mapped_column('created_at')
    last_edited            : Mapped[datetime]         = mapped_column('last_edited')
    sample_type            : Mapped[str | None]       = mapped_column('sample_type', default=None)
    collection_location_id : Mapped[str | None] \
        = mapped_column('collection_location_id', ForeignKey('locationv1.uid'), default=None)
    collection_datetime    : Mapped[datetime | None]  = mapped_column('collection_datetime', default=None)
    last_meal_types        : Mapped[list[str] | None] = mapped_column('last_meal_types', JsonList, default=None)
    last_meal_time         : Mapped[datetime | None]  = mapped_column('last_meal_time', default=None)
    version                : Mapped[int]              = mapped_column('version', default=1)

    patient             : Mapped['db_patient.DbPatient'] \
        = relationship('DbPatient', back_populates='samples', init=False, repr=False, compare=False)
