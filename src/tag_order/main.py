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

import argparse
import json
import sys
from pathlib import Path

from .gh_logging import Logger
from .orderer import sort_versions
from .version import Version

log = Logger(__name__)


def parse_args(args: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Sort version tags by base version, then by suffix number."
    )
    parser.add_argument(
        "--from-file",
        type=Path,
        default=None,
        help=(
            "Read versions from a file: a JSON list, a JSON object with a "
            "'versions' list, or plain text with one version per line."
        ),
    )
    parser.add_argument(
        "--reverse",
        action="store_true",
        help="Print the highest version first.",
    )
    parser.add_argument(
        "--latest",
        action="store_true",
        help="Print only the highest version.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Warn about versions whose base is not a valid semantic version "
        "and exit with a non-zero code if there are any.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Trace every comparison on stderr.",
    )
    parser.add_argument(
        "versions",
        nargs="*",
        help="Versions to sort. If neither these nor --from-file are given, "
        "versions are read from stdin, one per line.",
    )
    return parser.parse_args(args)


def _lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def read_versions_file(path: Path) -> list[str]:
    """Read versions from a JSON or plain text file.

    JSON content must be a list of strings or an object whose "versions"
    field is one, like a registry metadata.json. Anything that is not JSON
    is taken as one version per line.
    """
    try:
        content = path.read_text()
    except OSError as e:
        log.fatal(f"{path} could not be read: {e}")

    try:
        data = json.loads(content)
    except json.JSONDecodeError:
        return _lines(content)
    if not isinstance(data, (dict, list)):
        # A lone "1.0" line is valid JSON too
        return _lines(content)

    raw_versions = data.get("versions") if isinstance(data, dict) else data
    if not isinstance(raw_versions, list) or not all(
        isinstance(v, str) for v in raw_versions
    ):
        log.fatal(
            f"{path} has invalid versions field; expected list of version strings"
        )
    return raw_versions


def collect_versions(p: argparse.Namespace) -> list[str]:
    """Gather versions from the command line, then --from-file, else stdin."""
    versions: list[str] = list(p.versions)
    if p.from_file:
        versions += read_versions_file(p.from_file)
    if not p.versions and not p.from_file:
        log.debug("No versions given; reading from stdin.")
        versions = _lines(sys.stdin.read())
    return versions


def check_versions(versions: list[Version]) -> None:
    """Warn about every version that will be ordered as an invalid base."""
    for v in versions:
        if not v.base_is_valid:
            log.warning(
                f"Version {v} does not start with a valid semantic version; "
                "it is ordered before all valid versions."
            )


def main(args: list[str]) -> None:
    """Sort the given versions and print them, one per line."""
    p = parse_args(args)
    log.verbose = p.verbose
    log.warnings.clear()

    versions = [Version(v) for v in collect_versions(p)]
    if p.strict:
        check_versions(versions)

    ordered = sort_versions(versions, reverse=p.reverse or p.latest, log=log)
    if p.latest:
        ordered = ordered[:1]

    for v in ordered:
        print(v)

    if log.warnings:
        log.fatal(f"Completed with {len(log.warnings)} warnings.")


def run() -> None:
    main(args=sys.argv[1:])


if __name__ == "__main__":
    run()
