"""Exit codes of the EHR helper scripts."""


__license__ = "GPLv3"


# -- Script ran successfully
SUCCESS = 0

# -- Common input error checks & setting failures (exit codes from 1 to 19)
MISSING_ARG         = 3  # if missing script's argument(s)
DB_SETTINGS_FAILURE = 4  # if DB settings in the configuration file are not set
INVALID_PATH        = 5  # if path to file or folder does not exist
INVALID_ARG         = 6  # if one of the program argument is invalid
INVALID_IMPORT      = 7  # if an import statement failed

# -- Common database related failures (exit codes from 20 to 39)
SELECT_FAILURE = 23  # if a SELECT query did not return anything

# -- Common configuration failures (exit codes from 40 to 59)
INVALID_ENVIRONMENT_VAR = 40  # missing or invalid environment variable
