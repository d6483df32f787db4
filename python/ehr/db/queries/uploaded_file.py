from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session as Database

from ehr.db.models.uploaded_file import DbUploadedFile
from ehr.util.uid import uuid_variants


def get_valid_uploaded_files(
    db: Database,
    patient_uid: str,
    sample_uid: str | None = None,
    document_type: str | None = None,
) -> Sequence[DbUploadedFile]:
    """
    Get the valid uploaded files of a patient, optionally restricted to a sample and a document
    type. The patient and sample UIDs match both their hyphenated and unhyphenated forms.
    """

    query = (select(DbUploadedFile)
        .where(DbUploadedFile.patient_uid.in_(uuid_variants(patient_uid)))
        .where(DbUploadedFile.is_valid)
    )

    if sample_uid is not None:
        query = query.where(DbUploadedFile.sample_uid.in_(uuid_variants(sample_uid)))

    if document_type is not None:
        query = query.where(DbUploadedFile.document_type == document_type)

    return db.execute(query.order_by(DbUploadedFile.created_at, DbUploadedFile.uid)).scalars().all()
