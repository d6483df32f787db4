from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column

from ehr.db.base import Base


class DbLocation(Base):
    __tablename__ = 'locationv1'

    uid         : Mapped[str]             = mapped_column('uid', primary_key=True)
    name        : Mapped[str]             = mapped_column('name')
    address     : Mapped[str | None]      = mapped_column('address',     default=None)
    department  : Mapped[str | None]      = mapped_column('department',  default=None)
    is_valid    : Mapped[bool]            = mapped_column('is_valid',    default=True)
    created_at  : Mapped[datetime | None] = mapped_column('created_at',  default=None)
    last_edited : Mapped[datetime | None] = mapped_column('last_edited', default=None)
