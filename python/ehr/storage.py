"""Temporary access URIs for the documents stored in the EHR S3 bucket."""

from typing import Protocol

import boto3
from botocore.config import Config

from ehr.config_file import S3Config


class EhrStorage(Protocol):
    """
    Storage service that generates temporary access URIs for the uploaded documents.
    """

    def url(self, patient_uid: str, sample_uid: str | None, document_type: str, filename: str) -> str:
        ...


class S3EhrStorage:
    """
    EHR storage backed by an S3 bucket, in which the documents are stored under the key
    `<patient UID>/<sample UID>/<document type>/<file name>`.
    """

    def __init__(self, s3_client, bucket_name: str, url_expiration: int = 3600):
        self.s3_client = s3_client
        self.bucket_name = bucket_name
        self.url_expiration = url_expiration

    def object_key(self, patient_uid: str, sample_uid: str | None, document_type: str, filename: str) -> str:
        """
        Get the S3 key of a document. Documents that are not associated with a sample are stored
        in the `patient` directory of their patient.
        """

        sample_dir = sample_uid if sample_uid is not None else 'patient'
        return f'{patient_uid}/{sample_dir}/{document_type}/{filename}'

    def url(self, patient_uid: str, sample_uid: str | None, document_type: str, filename: str) -> str:
        """
        Get a presigned URI that grants a temporary read access to a document.
        """

        key = self.object_key(patient_uid, sample_uid, document_type, filename)
        return self.s3_client.generate_presigned_url(
            'get_object',
            Params={'Bucket': self.bucket_name, 'Key': key},
            ExpiresIn=self.url_expiration,
        )


def make_s3_storage(config: S3Config) -> S3EhrStorage:
    """
    Create an S3 EHR storage using the provided configuration. No request is sent to the S3
    service, presigned URIs are computed locally.
    """

    session = boto3.session.Session()
    s3_client = session.client(
        service_name="s3",
        aws_access_key_id=config.aws_access_key_id,
        aws_secret_access_key=config.aws_secret_access_key,
        endpoint_url=config.aws_s3_endpoint_url,
        region_name=config.aws_s3_region_name,
        config=Config(signature_version='s3v4'),
    )

    return S3EhrStorage(s3_client, config.aws_s3_bucket_name, config.url_expiration)
