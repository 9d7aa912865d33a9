# *******************************************************************************
# Copyright (c) 2025 Contributors to the Eclipse Foundation
#
# See the NOTICE file(s) distributed with this work for additional
# information regarding copyright ownership.
#
# This program and the accompanying materials are made available under the
# terms of the Apache License Version 2.0 which is available at
# https://www.apache.org/licenses/LICENSE-2.0
#
# SPDX-License-Identifier: Apache-2.0
# *******************************************************************************

import os
import sys
from typing import NoReturn, Protocol


def is_running_in_github_actions() -> bool:
    return "GITHUB_ACTIONS" in os.environ


class DiagnosticLogger(Protocol):
    """What the ordering code needs from a logger: debug tracing only."""

    def debug(self, msg: str) -> None: ...


class NullLogger:
    """Discards everything. Default for comparisons."""

    def debug(self, msg: str) -> None:
        pass


class Logger:
    """Prints to stderr, or as workflow commands when running on GitHub Actions.

    Debug output is only printed when `verbose` is set. Warnings are kept so a
    caller can decide on the exit status once all work is done.
    """

    _LEVELS = {
        # level: (GitHub Actions command, local prefix)
        "debug": ("debug", "DEBUG"),
        "info": ("notice", "INFO"),
        "warning": ("warning", "WARNING"),
        "error": ("error", "ERROR"),
    }

    def __init__(self, name: str, verbose: bool = False):
        self.name = name
        self.verbose = verbose
        self.warnings: list[str] = []

    def _print(self, level: str, msg: str) -> None:
        command, prefix = self._LEVELS[level]
        if is_running_in_github_actions():
            print(f"::{command}::{self.name} {msg}", file=sys.stderr)
        else:
            print(f"{prefix}: {self.name} {msg}", file=sys.stderr)

    def debug(self, msg: str) -> None:
        if self.verbose:
            self._print("debug", msg)

    def info(self, msg: str) -> None:
        self._print("info", msg)

    def warning(self, msg: str) -> None:
        self.warnings.append(msg)
        self._print("warning", msg)

    def fatal(self, msg: str) -> NoReturn:
        self._print("error", msg)
        raise SystemExit(1)
