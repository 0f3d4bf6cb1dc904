"""
Field-level validators for connector configuration.

Every validator takes the configuration, the field being validated and the
schema the field belongs to, and returns the list of problems it found. An
empty list means the value is acceptable.
"""

import re
from typing import List

from relational_config import constants
from relational_config.config.models import DecimalHandlingMode, ValidationProblem
from relational_config.utils import parse_regex_list


def is_required(config, field, schema) -> List[ValidationProblem]:
    """The field must have a non-blank value."""
    value = config.get_string(field)
    if value is None or not value.strip():
        return [ValidationProblem(field=field.name, value=value, message="A value is required")]
    return []


def is_boolean(config, field, schema) -> List[ValidationProblem]:
    """The field, when set, must be 'true' or 'false'."""
    value = config.get_string(field)
    if value is None or value.strip().lower() in ("true", "false"):
        return []
    return [ValidationProblem(field=field.name, value=value, message="Must be either 'true' or 'false'")]


def is_integer(config, field, schema) -> List[ValidationProblem]:
    """The field, when set, must be an integer."""
    value = config.get_string(field)
    if value is None:
        return []
    try:
        int(value.strip())
    except ValueError:
        return [ValidationProblem(field=field.name, value=value, message="An integer value is expected")]
    return []


def is_positive_integer(config, field, schema) -> List[ValidationProblem]:
    """The field, when set, must be an integer greater than zero."""
    problems = is_integer(config, field, schema)
    if problems:
        return problems
    value = config.get_string(field)
    if value is not None and int(value.strip()) <= 0:
        return [ValidationProblem(field=field.name, value=value, message="A positive integer value is expected")]
    return []


def is_list_of_regex(config, field, schema) -> List[ValidationProblem]:
    """Each comma-separated entry of the field must be a valid regular expression."""
    value = config.get_string(field)
    if value is None:
        return []
    problems = []
    for pattern in parse_regex_list(value):
        try:
            re.compile(pattern)
        except re.error as e:
            problems.append(
                ValidationProblem(
                    field=field.name,
                    value=value,
                    message=f"A comma-separated list of valid regular expressions is expected, but '{pattern}' is invalid: {e}",
                )
            )
    return problems


def is_decimal_handling_mode(config, field, schema) -> List[ValidationProblem]:
    """The field, when set, must name one of the decimal handling options."""
    value = config.get_string(field)
    if value is None or DecimalHandlingMode.parse(value) is not None:
        return []
    allowed = ", ".join(option.value for option in DecimalHandlingMode.options())
    return [ValidationProblem(field=field.name, value=value, message=f"Value must be one of {allowed}")]


def validate_table_blacklist(config, field, schema) -> List[ValidationProblem]:
    """Table whitelist and blacklist cannot both be set; the conflict is reported on the blacklist."""
    whitelist = config.get_string(schema.field(constants.TABLE_WHITELIST))
    blacklist = config.get_string(schema.field(constants.TABLE_BLACKLIST))

    if whitelist is not None and blacklist is not None:
        return [
            ValidationProblem(
                field=constants.TABLE_BLACKLIST,
                value=blacklist,
                message=constants.TABLE_WHITELIST_ALREADY_SPECIFIED,
            )
        ]

    return []


def validate_schema_blacklist(config, field, schema) -> List[ValidationProblem]:
    """Schema whitelist and blacklist cannot both be set; the conflict is reported on the blacklist."""
    whitelist = config.get_string(schema.field(constants.SCHEMA_WHITELIST))
    blacklist = config.get_string(schema.field(constants.SCHEMA_BLACKLIST))
    if whitelist is not None and blacklist is not None:
        return [
            ValidationProblem(
                field=constants.SCHEMA_BLACKLIST,
                value=blacklist,
                message=constants.SCHEMA_WHITELIST_ALREADY_SPECIFIED,
            )
        ]
    return []
