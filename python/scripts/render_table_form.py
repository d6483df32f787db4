#!/usr/bin/env python

import argparse
import json
import sys
from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

import ehr.exitcode
from ehr.config_file import get_form_config, load_config
from ehr.db.connect import get_database_engine
from ehr.env import make_env
from ehr.form.render import render_table_form

parser = argparse.ArgumentParser(description=(
        'Read the schema of a database table and print the HTML form generated for this table '
        'in the console.'
    ))

parser.add_argument(
    'table',
    help='The database table')

parser.add_argument(
    '--data',
    default='{}',
    help='The current values of the form fields, as a JSON object')

parser.add_argument(
    '--hide',
    nargs='*',
    default=[],
    help='The columns to hide')

parser.add_argument(
    '--show',
    nargs='*',
    default=[],
    help='The columns to show, all the other columns are hidden')

parser.add_argument(
    '--readonly',
    nargs='*',
    default=[],
    help='The columns that cannot be edited')

parser.add_argument(
    '--submit',
    help='The label of the submit button, no button is added if not provided')

parser.add_argument(
    '--config',
    help='The name of the configuration file in the EHR_CONFIG directory')

parser.add_argument(
    '--verbose',
    action='store_true',
    help='Set the script to be verbose')


@dataclass
class Args:
    table: str
    data: dict[str, Any]
    hide: list[str]
    show: list[str]
    readonly: list[str]
    submit: str | None
    config: str | None
    verbose: bool


def main() -> None:
    parsed_args = parser.parse_args()

    try:
        data = json.loads(parsed_args.data)
    except json.JSONDecodeError as e:
        print(f"ERROR: The form data is not valid JSON.\nException message:\n{e}", file=sys.stderr)
        sys.exit(ehr.exitcode.INVALID_ARG)

    if not isinstance(data, dict):
        print("ERROR: The form data must be a JSON object.", file=sys.stderr)
        sys.exit(ehr.exitcode.INVALID_ARG)

    args = Args(
        parsed_args.table,
        data,
        parsed_args.hide,
        parsed_args.show,
        parsed_args.readonly,
        parsed_args.submit,
        parsed_args.config,
        parsed_args.verbose,
    )

    config = load_config(args.config)
    database_config = getattr(config, 'database', None)
    if database_config is None:
        print("ERROR: No 'database' setting in the configuration file.", file=sys.stderr)
        sys.exit(ehr.exitcode.DB_SETTINGS_FAILURE)

    engine = get_database_engine(database_config)
    with Session(engine) as db:
        env = make_env(db, args.verbose, form_config=get_form_config(config))
        form = render_table_form(
            env,
            args.table,
            args.data,
            hide=args.hide,
            show=args.show,
            readonly=args.readonly,
            submit=args.submit,
        )

    print(form)

    sys.exit(ehr.exitcode.SUCCESS)


if __name__ == "__main__":
    main()
