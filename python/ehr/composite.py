"""
Composite records, that is, patient records enriched with their samples, the collection location
of each sample and its uploaded documents.
"""

from collections.abc import Sequence
from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Any, TypeVar

from ehr.db.models.location import DbLocation
from ehr.db.models.patient import DbPatient
from ehr.db.models.sample import DbSample
from ehr.db.models.uploaded_file import DbUploadedFile
from ehr.db.queries.location import get_locations_with_uid
from ehr.db.queries.patient import get_patients_with_uid
from ehr.db.queries.sample import get_samples_with_patient_uid
from ehr.db.queries.uploaded_file import get_valid_uploaded_files
from ehr.env import Env
from ehr.exception.patient_not_found_error import PatientNotFoundError
from ehr.logging import log, log_verbose, log_warning
from ehr.storage import EhrStorage

T = TypeVar('T')


@dataclass
class MedicalDocument:
    """
    Uploaded document of a patient. This is a copy of the database row, so that its URI can be
    replaced by a temporary URI without modifying the database.
    """

    uid: str
    sample_uid: str | None
    uri: str
    document_type: str
    original_filename: str
    created_at: datetime | None
    last_edited: datetime | None

    @staticmethod
    def from_uploaded_file(uploaded_file: DbUploadedFile) -> 'MedicalDocument':
        return MedicalDocument(
            uploaded_file.uid,
            uploaded_file.sample_uid,
            uploaded_file.uri,
            uploaded_file.document_type,
            uploaded_file.original_filename,
            uploaded_file.created_at,
            uploaded_file.last_edited,
        )


@dataclass
class CompositeSample:
    sample: DbSample
    location: DbLocation | None
    documents: list[MedicalDocument]


@dataclass
class CompositePatientRecord:
    patient: DbPatient
    # Most recently edited sample first
    samples: list[CompositeSample]


def expect_one(env: Env, rows: Sequence[T], what: str) -> T | None:
    """
    Get the single row of a query result, or `None` if the result is empty. If the result contains
    more than one row, log a warning and return the first row.
    """

    if len(rows) > 1:
        log_warning(env, f"More than 1 rows found for query {what}: {rows}")

    if not rows:
        return None

    return rows[0]


def make_composite_record(env: Env, patient_uid: str, storage: EhrStorage | None = None) -> CompositePatientRecord:
    """
    Make the composite record of a patient by fetching its information from the database, or raise
    a `PatientNotFoundError` if that patient does not exist.

    If a storage is provided, the URIs of the documents are replaced by temporary access URIs.
    """

    patient = expect_one(env, get_patients_with_uid(env.db, patient_uid), f"patient uid={patient_uid}")
    if patient is None:
        raise PatientNotFoundError(patient_uid)

    samples = get_composite_samples_for_patient_uid(env, patient.uid, storage)
    return CompositePatientRecord(patient, samples)


def get_samples_for_patient_uid(env: Env, patient_uid: str) -> list[DbSample]:
    """
    Get the samples of a patient, the most recently edited sample first.
    """

    return list(get_samples_with_patient_uid(env.db, patient_uid))


def get_composite_samples_for_patient_uid(
    env: Env,
    patient_uid: str,
    storage: EhrStorage | None = None,
) -> list[CompositeSample]:
    """
    Get the samples of a patient, the most recently edited sample first, each enriched with its
    collection location and its documents.
    """

    composite_samples: list[CompositeSample] = []
    for sample in get_samples_for_patient_uid(env, patient_uid):
        location = None
        if sample.collection_location_id is not None:
            locations = get_locations_with_uid(env.db, sample.collection_location_id)
            location = expect_one(env, locations, f"location uid={sample.collection_location_id}")

        documents = get_patient_medical_documents(env, patient_uid, sample.uid, storage=storage)
        composite_samples.append(CompositeSample(sample, location, documents))

    return composite_samples


def get_patient_medical_documents(
    env: Env,
    patient_uid: str,
    sample_uid: str | None = None,
    document_type: str | None = None,
    storage: EhrStorage | None = None,
) -> list[MedicalDocument]:
    """
    Get the valid documents of a patient, optionally restricted to a sample and a document type.

    If a storage is provided, the URI of each document is replaced by a temporary access URI.
    """

    log(env, f"Searching for documents for patient_uid=`{patient_uid}` and sample_uid=`{sample_uid}`.")

    uploaded_files = get_valid_uploaded_files(env.db, patient_uid, sample_uid, document_type)
    documents = list(map(MedicalDocument.from_uploaded_file, uploaded_files))

    if storage is not None:
        log(env, "Regenerating temporary uri.")
        for document in documents:
            document.uri = storage.url(
                patient_uid,
                sample_uid,
                document.document_type,
                document.original_filename,
            )

    log_verbose(env, f"> Found {documents}")

    return documents


def composite_record_to_dict(record: CompositePatientRecord) -> dict[str, Any]:
    """
    Convert a composite record to a JSON-serializable dictionary, the samples being stored under
    the `samples` key of the patient fields.
    """

    patient = _model_to_dict(record.patient)
    patient['samples'] = [
        {
            **_model_to_dict(composite_sample.sample),
            'location':  _model_to_dict(composite_sample.location) if composite_sample.location else None,
            'documents': [_jsonable_dict(asdict(document)) for document in composite_sample.documents],
        } for composite_sample in record.samples
    ]

    return patient


def _model_to_dict(model: Any) -> dict[str, Any]:
    return _jsonable_dict({column.key: getattr(model, column.key) for column in model.__mapper__.column_attrs})


def _jsonable_dict(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value.isoformat() if isinstance(value, date) else value for key, value in data.items()}
