import sys
from typing import Never

from ehr.env import Env


def log(env: Env, message: str):
    """
    Log a standard message.
    """

    print(message)
    write_to_log_file(env, message)


def log_verbose(env: Env, message: str):
    """
    Log a verbose message, which is displayed only if the environment is verbose.
    """

    if env.verbose:
        print(message)

    write_to_log_file(env, message)


def log_warning(env: Env, message: str):
    """
    Log a warning message.
    """

    full_message = f"WARNING: {message}"
    print(full_message, file=sys.stderr)
    write_to_log_file(env, full_message)


def log_error(env: Env, message: str):
    """
    Log an error message without exiting the program.
    """

    full_message = f"ERROR: {message}"
    print(full_message, file=sys.stderr)
    write_to_log_file(env, full_message)


def log_error_exit(env: Env, message: str, exit_code: int = -1) -> Never:
    """
    Log an error message and exit the program.
    """

    log_error(env, message)
    sys.exit(exit_code)


def write_to_log_file(env: Env, message: str):
    """
    Write a message to the log file of the environment, if the environment has one.
    """

    if env.log_file is None:
        return

    with open(env.log_file, 'a') as file:
        file.write(f"{message}\n")
