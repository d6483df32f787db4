from datetime import date, datetime

from sqlalchemy.orm import Mapped, mapped_column, relationship

import ehr.db.models.sample as db_sample
from ehr.db.base import Base


class DbPatient(Base):
    __tablename__ = 'patientv1'

    uid           : Mapped[str]             = mapped_column('uid', primary_key=True)
    name          : Mapped[str]             = mapped_column('name')
    created_at    : Mapped[datetime]        = mapped_column('created_at')
    last_edited   : Mapped[datetime]        = mapped_column('last_edited')
    email         : Mapped[str | None]      = mapped_column('email',         default=None)
    phone         : Mapped[str | None]      = mapped_column('phone',         default=None)
    date_of_birth : Mapped[date | None]     = mapped_column('date_of_birth', default=None)
    gender        : Mapped[str | None]      = mapped_column('gender',        default=None)
    address       : Mapped[str | None]      = mapped_column('address',       default=None)
    version       : Mapped[int]             = mapped_column('version',       default=1)

    samples : Mapped[list['db_sample.DbSample']] \
        = relationship('DbSample', back_populates='patient', init=False, repr=False, compare=False)
