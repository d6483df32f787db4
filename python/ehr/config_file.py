"""
This module stores the classes used in the Python configuration file of the EHR helpers.

A configuration file is a Python module that may define the following variables:

- `database`: a `DatabaseConfig` object (required by the scripts).
- `s3`: an `S3Config` object, used to regenerate the temporary document URIs.
- `form`: a `FormConfig` object, used to customize the generated forms.
"""

import importlib.util
import os
import sys
from dataclasses import dataclass, field
from typing import Any

import ehr.exitcode


@dataclass
class DatabaseConfig:
    """
    Class wrapping the PostgreSQL database access configuration.
    """

    host:     str
    username: str
    password: str
    database: str
    port:     int = 5432  # Default database port.


@dataclass
class S3Config:
    """
    Class wrapping the S3 access configuration of the EHR document storage.
    """

    aws_access_key_id:     str
    aws_secret_access_key: str
    aws_s3_bucket_name:    str
    aws_s3_endpoint_url:   str | None = None
    aws_s3_region_name:    str | None = None
    url_expiration:        int = 3600  # Lifetime of a temporary document URI in seconds.


@dataclass
class MultiValueFieldConfig:
    """
    A column that stores a list of enum values and is rendered as a multiple select.
    """

    column_name: str
    """
    Name of the column, compared case-insensitively.
    """

    enum_type: str
    """
    Name of the database enum type that provides the options.
    """


@dataclass
class FormConfig:
    """
    Configuration of the forms generated from the database tables.
    """

    hidden_columns: list[str] = field(default_factory=lambda: ['version', 'created_at', 'last_edited'])
    """
    Columns that are always hidden unless explicitly shown.
    """

    multi_value_fields: list[MultiValueFieldConfig] = field(default_factory=lambda: [
        MultiValueFieldConfig('last_meal_types', 'lastmealtype'),
    ])


def load_config(arg: str | None) -> Any:
    """
    Load the EHR Python configuration file from the environment or exit the program with an error
    if that file is not found or cannot be loaded.
    """

    config_dir_path = os.environ.get('EHR_CONFIG')
    if config_dir_path is None:
        print("ERROR: Environment variable 'EHR_CONFIG' not set.", file=sys.stderr)
        sys.exit(ehr.exitcode.INVALID_ENVIRONMENT_VAR)

    # Get the name of the configuration file from the argument or use the default name.
    config_file_name = arg if arg is not None else 'config.py'

    config_file_path = os.path.join(config_dir_path, config_file_name)
    if not os.path.exists(config_file_path):
        print(
            f"ERROR: No configuration file '{config_file_name}' found in the '{config_dir_path}' directory.",
            file=sys.stderr,
        )

        sys.exit(ehr.exitcode.INVALID_PATH)

    # Get the name of the configuration module from its file name.
    module_name = os.path.splitext(os.path.basename(config_file_path))[0]

    spec = importlib.util.spec_from_file_location(module_name, config_file_path)
    if spec is None or spec.loader is None:
        print(f"ERROR: Cannot load module specification for configuration file '{config_file_name}'.", file=sys.stderr)
        sys.exit(ehr.exitcode.INVALID_IMPORT)

    # Load the configuration module.
    config = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(config)
    return config


def get_form_config(config: Any) -> FormConfig:
    """
    Get the form configuration of a loaded configuration module, or the default form configuration
    if the module does not define one.
    """

    form_config = getattr(config, 'form', None)
    if form_config is None:
        return FormConfig()

    return form_config
