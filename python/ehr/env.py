from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from ehr.config_file import FormConfig


@dataclass
class Env:
    """
    This class wraps information about the environment in which the EHR helpers are executed,
    usually a single request or script run. It notably stores the database handle and various
    information used for logging.
    """

    db: Session
    verbose: bool = False
    # Path of the file in which all the messages are appended, or `None` to only print them
    log_file: str | None = None
    form_config: FormConfig = field(default_factory=FormConfig)


def make_env(
    db: Session,
    verbose: bool = False,
    log_file: str | None = None,
    form_config: FormConfig | None = None,
) -> Env:
    """
    Create a new environment using the provided database session and options.
    """

    if form_config is None:
        form_config = FormConfig()

    return Env(db, verbose, log_file, form_config)
