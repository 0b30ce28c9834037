# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Config loader: turns parsed CLI options into a validated, frozen RunConfig.

No retries, no fallback defaults for bad values. An invalid setting stops the
run before any input is read.
"""

import argparse

from pydantic import ValidationError

from classwork.config.exceptions import ConfigValidationError
from classwork.config.schema import RunConfig

_CONFIG_FIELDS = ("log_level", "log_file", "strict_exit")


def load_config(args: argparse.Namespace) -> RunConfig:
    """
    Build a RunConfig from the global options on an argparse namespace.

    Options the namespace doesn't carry fall back to the schema defaults, so
    handlers can be driven by a hand-built namespace in tests.

    Raises:
        ConfigValidationError: If any option fails schema validation.
    """
    raw_data = {
        name: getattr(args, name)
        for name in _CONFIG_FIELDS
        if getattr(args, name, None) is not None
    }

    try:
        return RunConfig.model_validate(raw_data)
    except ValidationError as err:
        raise ConfigValidationError(f"Invalid run settings:\n{err}") from err
