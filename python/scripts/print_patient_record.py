#!/usr/bin/env python

import argparse
import json
import sys
from dataclasses import dataclass

from sqlalchemy.orm import Session

import ehr.exitcode
from ehr.composite import composite_record_to_dict, make_composite_record
from ehr.config_file import get_form_config, load_config
from ehr.db.connect import get_database_engine
from ehr.env import make_env
from ehr.exception.patient_not_found_error import PatientNotFoundError
from ehr.logging import log_error_exit
from ehr.storage import make_s3_storage

parser = argparse.ArgumentParser(description=(
        'Print the composite record of a patient, that is, the patient with its samples, their '
        'collection location and their documents, as JSON in the console.'
    ))

parser.add_argument(
    'patient_uid',
    help='The UID of the patient')

parser.add_argument(
    '--presign',
    action='store_true',
    help='Replace the document URIs by temporary access URIs using the S3 configuration')

parser.add_argument(
    '--config',
    help='The name of the configuration file in the EHR_CONFIG directory')

parser.add_argument(
    '--verbose',
    action='store_true',
    help='Set the script to be verbose')


@dataclass
class Args:
    patient_uid: str
    presign: bool
    config: str | None
    verbose: bool


def main() -> None:
    parsed_args = parser.parse_args()
    args = Args(parsed_args.patient_uid, parsed_args.presign, parsed_args.config, parsed_args.verbose)

    config = load_config(args.config)
    database_config = getattr(config, 'database', None)
    if database_config is None:
        print("ERROR: No 'database' setting in the configuration file.", file=sys.stderr)
        sys.exit(ehr.exitcode.DB_SETTINGS_FAILURE)

    engine = get_database_engine(database_config)
    with Session(engine) as db:
        env = make_env(db, args.verbose, form_config=get_form_config(config))

        storage = None
        if args.presign:
            s3_config = getattr(config, 's3', None)
            if s3_config is None:
                log_error_exit(env, "No 's3' setting in the configuration file.", ehr.exitcode.MISSING_ARG)

            storage = make_s3_storage(s3_config)

        try:
            record = make_composite_record(env, args.patient_uid, storage)
        except PatientNotFoundError as error:
            log_error_exit(env, error.args[0], ehr.exitcode.SELECT_FAILURE)

        print(json.dumps(composite_record_to_dict(record), indent=4))

    sys.exit(ehr.exitcode.SUCCESS)


if __name__ == "__main__":
    main()
