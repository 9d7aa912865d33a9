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

from collections.abc import Iterable
from functools import cmp_to_key
from typing import Protocol

from .gh_logging import DiagnosticLogger, NullLogger
from .version import Version, compare_versions


class Sortable(Protocol):
    def __len__(self) -> int: ...

    def less(self, i: int, j: int) -> bool: ...

    def swap(self, i: int, j: int) -> None: ...


class VersionOrderer:
    """Sortable view over a list of versions.

    Versions are ordered by their base (the text before the first hyphen) and,
    when the bases are equal, by the number that ends the suffix. The list is
    borrowed, not copied: `swap` rearranges the caller's list in place.
    """

    def __init__(
        self, versions: list[Version], log: DiagnosticLogger | None = None
    ) -> None:
        self.versions = versions
        self.log = log or NullLogger()

    def _check(self, i: int, j: int) -> None:
        n = len(self.versions)
        assert 0 <= i < n and 0 <= j < n, f"index out of range: {i}, {j} (len {n})"

    def __len__(self) -> int:
        return len(self.versions)

    def __getitem__(self, i: int) -> Version:
        return self.versions[i]

    def length(self) -> int:
        return len(self.versions)

    def swap(self, i: int, j: int) -> None:
        self._check(i, j)
        self.versions[i], self.versions[j] = self.versions[j], self.versions[i]

    def compare(self, i: int, j: int) -> int:
        self._check(i, j)
        return compare_versions(self.versions[i], self.versions[j], self.log)

    def less(self, i: int, j: int) -> bool:
        return self.compare(i, j) < 0


def _sift_down(data: Sortable, root: int, end: int) -> None:
    while True:
        child = 2 * root + 1
        if child >= end:
            return
        if child + 1 < end and data.less(child, child + 1):
            child += 1
        if not data.less(root, child):
            return
        data.swap(root, child)
        root = child


def sort_in_place(data: Sortable) -> None:
    """Heap sort driven only by `len`, `less` and `swap`.

    Not stable: elements that compare equal may end up in any order.
    """
    n = len(data)
    for root in range(n // 2 - 1, -1, -1):
        _sift_down(data, root, n)
    for end in range(n - 1, 0, -1):
        data.swap(0, end)
        _sift_down(data, 0, end)


def sort_versions(
    versions: Iterable[str | Version],
    reverse: bool = False,
    log: DiagnosticLogger | None = None,
) -> list[Version]:
    """Sort versions, lowest first unless `reverse` is set.

    The result depends only on the multiset of version strings, never on the
    order they came in: they are put in text order before the stable sort, so
    versions that order as equal keep a fixed relative position.
    """
    log = log or NullLogger()
    result = sorted(
        (v if isinstance(v, Version) else Version(v) for v in versions),
        key=lambda v: v.original,
    )
    result.sort(
        key=cmp_to_key(lambda a, b: compare_versions(a, b, log)), reverse=reverse
    )
    return result
