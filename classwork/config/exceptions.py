# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Custom exceptions for the configuration system.

Kept separate so the CLI can catch config failures without importing
pydantic or the schema module.
"""


class ConfigError(Exception):
    """Base for all configuration errors."""


class ConfigValidationError(ConfigError):
    """
    Raised when run settings fail schema validation: an unknown log level,
    a wrong type, or an unexpected field.
    """
