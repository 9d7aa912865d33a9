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

import re

import semver

from .gh_logging import DiagnosticLogger, NullLogger

# A trailing suffix token counts as a number only if it looks like one.
_SUFFIX_NUMBER = re.compile(r"[+-]?[0-9]+")


def split_version(text: str) -> tuple[str, int]:
    """Split a version string into its base and its suffix number.

    The base is everything before the first hyphen. The suffix number is the
    last dot-separated token after that hyphen, or 0 if there is none or it is
    not numeric.

    >>> split_version("1.2.3-rc.4")
    ('1.2.3', 4)
    >>> split_version("1.2.3-beta")
    ('1.2.3', 0)
    """
    base, _, suffix = text.partition("-")
    if not suffix:
        return base, 0

    last = suffix.rsplit(".", 1)[-1]
    if _SUFFIX_NUMBER.fullmatch(last):
        return base, int(last)
    return base, 0


def parse_base(base: str) -> semver.Version | None:
    """Parse a base version on its own. Returns None if it is not semver.

    A leading "v" is accepted and missing minor/patch parts default to 0,
    so tags like "v1.2" parse as 1.2.0.
    """
    if base[:1] in ("v", "V"):
        base = base[1:]
    try:
        return semver.Version.parse(base, optional_minor_and_patch=True)
    except ValueError:
        return None


def compare_bases(a: semver.Version | None, b: semver.Version | None) -> int:
    """Three-way comparison of two parsed bases.

    An unparseable base (None) sorts before any valid version, and two
    unparseable bases are equal.
    """
    if a is None or b is None:
        return (a is not None) - (b is not None)
    return a.compare(b)


def compare_versions(
    a: "Version", b: "Version", log: DiagnosticLogger | None = None
) -> int:
    """Order two versions by base first, then by suffix number.

    Only the original text is consulted; the full semver parse of either
    version plays no part.
    """
    log = log or NullLogger()

    base_a, suffix_a = split_version(a.original)
    base_b, suffix_b = split_version(b.original)
    log.debug(f"Comparing base {base_a} with base {base_b}")

    parsed_a = parse_base(base_a)
    parsed_b = parse_base(base_b)
    for base, parsed, version in ((base_a, parsed_a, a), (base_b, parsed_b, b)):
        if parsed is None:
            log.debug(
                f"Base {base!r} of {version} is not a valid semantic version; "
                "ordering it before all valid versions"
            )

    comp = compare_bases(parsed_a, parsed_b)
    if comp != 0:
        return comp
    return (suffix_a > suffix_b) - (suffix_a < suffix_b)


class Version:
    def __init__(self, s: str) -> None:
        if not isinstance(s, str):
            raise TypeError("Version must be a string")

        self._raw = s

        try:
            self._semver = semver.Version.parse(s)
        except ValueError:
            self._semver = None

    @property
    def original(self) -> str:
        return self._raw

    @property
    def semver(self) -> semver.Version | None:
        """Strict parse of the full text, suffix included; None if not semver.

        Informational only: ordering uses the base and suffix number instead.
        """
        return self._semver

    @property
    def base_is_valid(self) -> bool:
        base, _ = split_version(self._raw)
        return parse_base(base) is not None

    def __lt__(self, other: "Version") -> bool:
        assert isinstance(other, Version)
        return compare_versions(self, other) < 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        # Raw text, not ordering: "1.0.0-a.1" and "1.0.0-b.1" order as equal
        # but are different versions.
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __repr__(self) -> str:
        return f"Version({self._raw!r})"

    def __str__(self) -> str:
        return self._raw
