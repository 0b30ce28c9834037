# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Subcommand handlers for the classwork CLI.

Each function here corresponds to one CLI subcommand and returns an exit
code. Handlers are the only place where errors turn into user-facing
messages: the subsystems raise, the handler catches, writes one line to
stderr and returns.

Program output (prompts, reports, matrices) goes straight to stdout.
Diagnostics go through the structured logger.
"""

import argparse
import logging
import sys
from pathlib import Path

from classwork.cli.exit_codes import (
    CONFIG_ERROR,
    RUNTIME_ERROR,
    SUCCESS,
    VALIDATION_ERROR,
)
from classwork.config.exceptions import ConfigError
from classwork.config.loader import load_config
from classwork.config.schema import RunConfig
from classwork.console.session import InputExhaustedError, open_session
from classwork.grades.exceptions import ParseError
from classwork.logging.logger import configure_logging, get_logger
from classwork.matrix.exceptions import MatrixError

INVALID_SCORES_MESSAGE = "Invalid input. Please enter numbers only."


def _load_and_configure(
    args: argparse.Namespace,
    command_name: str,
) -> tuple[int, RunConfig | None, logging.Logger]:
    """
    The shared setup that every command needs: validate settings, set up logging.

    Returns a tuple of (exit_code, config, logger). If exit_code is not SUCCESS,
    the caller should return it immediately.
    """
    logger = get_logger(f"classwork.cli.{command_name}")

    try:
        config = load_config(args)
    except ConfigError as err:
        logger.error(
            "Configuration error",
            extra={"command": command_name, "error": str(err)},
        )
        return CONFIG_ERROR, None, logger

    log_file = Path(config.log_file) if config.log_file is not None else None
    try:
        configure_logging(config.log_level, log_file)
    except OSError as err:
        logger.error(
            "Cannot open log file",
            extra={"command": command_name, "log_file": config.log_file, "error": str(err)},
        )
        return CONFIG_ERROR, None, logger

    logger.debug("Command started", extra={"command": command_name})
    return SUCCESS, config, logger


def _input_error_code(config: RunConfig) -> int:
    return VALIDATION_ERROR if config.strict_exit else SUCCESS


def _write_output(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _write_error(message: str) -> None:
    sys.stderr.write(message + "\n")
    sys.stderr.flush()


def handle_grades(args: argparse.Namespace) -> int:
    """Read a line of scores and print max, min, average and the histogram."""
    from classwork.grades.graph import render_report
    from classwork.grades.parser import read_scores
    from classwork.grades.statistics import compute_report

    exit_code, config, logger = _load_and_configure(args, "grades")
    if exit_code != SUCCESS or config is None:
        return exit_code

    try:
        try:
            with open_session() as session:
                scores = read_scores(session)
        except (ParseError, InputExhaustedError) as err:
            logger.info("Score line rejected", extra={"error": str(err)})
            _write_error(INVALID_SCORES_MESSAGE)
            return _input_error_code(config)

        if not scores:
            logger.info("No scores entered, nothing to report")
            return SUCCESS

        report = compute_report(scores)
        _write_output(render_report(report))

        logger.info(
            "Grade report printed",
            extra={"count": report.count, "buckets": list(report.buckets)},
        )
        return SUCCESS

    except Exception as err:
        logger.error("Grades failed", extra={"error": str(err)}, exc_info=True)
        return RUNTIME_ERROR


def handle_matrix(args: argparse.Namespace) -> int:
    """Read matrices A and B, multiply them and print the product."""
    from classwork.matrix.operations import multiply
    from classwork.matrix.printer import format_matrix
    from classwork.matrix.reader import read_matrix

    exit_code, config, logger = _load_and_configure(args, "matrix")
    if exit_code != SUCCESS or config is None:
        return exit_code

    try:
        try:
            with open_session() as session:
                matrix_a = read_matrix(session, "A")
                matrix_b = read_matrix(session, "B")
            product = multiply(matrix_a, matrix_b)
        except (MatrixError, InputExhaustedError) as err:
            logger.info(
                "Matrix input rejected",
                extra={"error": str(err), "error_type": type(err).__name__},
            )
            _write_error(f"Error: {err}")
            return _input_error_code(config)

        _write_output("\nMatrix C:\n" + format_matrix(product))

        logger.info("Product printed", extra={"shape": product.shape})
        return SUCCESS

    except Exception as err:
        logger.error("Matrix failed", extra={"error": str(err)}, exc_info=True)
        return RUNTIME_ERROR
