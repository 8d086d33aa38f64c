"""User-facing message templates shared across parsers and commands."""

from __future__ import annotations

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{usage}"
MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_PERSONS_LISTED_OVERVIEW = "{count} persons listed!"
MESSAGE_DUPLICATE_FIELDS = "Multiple values specified for the following single-valued field(s): "
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_INVALID_CONFIRMATION = "Please answer with {yes} to confirm or {no} to cancel."
MESSAGE_ACTION_ABORTED = "Action aborted."
MESSAGE_NOT_APPLIED = "Cannot undo {command}: it was never applied."

FILE_OPS_ERROR_FORMAT = "Could not save data due to the following error: %s"
FILE_OPS_PERMISSION_ERROR_FORMAT = (
    "Could not save data to file %s due to insufficient permissions to write to the file or the folder."
)


def invalid_format(usage: str) -> str:
    return MESSAGE_INVALID_COMMAND_FORMAT.format(usage=usage)


def duplicate_prefixes(prefixes: list[str]) -> str:
    return MESSAGE_DUPLICATE_FIELDS + " ".join(prefixes)
