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

from .gh_logging import DiagnosticLogger, Logger, NullLogger
from .orderer import Sortable, VersionOrderer, sort_in_place, sort_versions
from .version import Version, compare_bases, parse_base, split_version

__all__ = [
    "DiagnosticLogger",
    "Logger",
    "NullLogger",
    "Sortable",
    "Version",
    "VersionOrderer",
    "compare_bases",
    "parse_base",
    "sort_in_place",
    "sort_versions",
    "split_version",
]
