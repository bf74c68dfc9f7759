"""Canonical logging field names.

Keeping names centralized prevents drift between the components that log
errors and the tooling that indexes those logs by code.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EVENT = "event"

# Error identity fields.
RFC_CODE = "rfc_code"
ERROR_ID = "error_id"
ERROR_CODE = "error_code"
ERROR_CLASS = "error_class"
ERROR_MESSAGE = "error_message"
ERROR_FILE = "error_file"
ERROR_LINE = "error_line"
EXCEPTION_TYPE = "exception_type"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
