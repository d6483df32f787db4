from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column

from ehr.db.base import Base


class DbUploadedFile(Base):
    __tablename__ = 'uploaded_filev1'

    # The patient and sample UIDs are not foreign keys since older uploads store them without
    # hyphens.
    uid               : Mapped[str]             = mapped_column('uid', primary_key=True)
    patient_uid       : Mapped[str]             = mapped_column('patient_uid')
    uri               : Mapped[str]             = mapped_column('uri')
    document_type     : Mapped[str]             = mapped_column('document_type')
    original_filename : Mapped[str]             = mapped_column('original_filename')
    sample_uid        : Mapped[str | None]      = mapped_column('sample_uid',  default=None)
    is_valid          : Mapped[bool]            = mapped_column('is_valid',    default=True)
    created_at        : Mapped[datetime | None] = mapped_column('created_at',  default=None)
    last_edited       : Mapped[datetime | None] = mapped_column('last_edited', default=None)
