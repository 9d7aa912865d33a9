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
from typing import Any

import pytest

from tag_order import Version, VersionOrderer
from tag_order.gh_logging import Logger


class MockLogger(Logger):
    """Logger that captures messages for testing."""

    def __init__(self):
        super().__init__("test", verbose=True)
        self.debug_messages: list[str] = []
        self.info_messages: list[str] = []
        self.warning_messages: list[str] = []
        self.error_messages: list[str] = []

    def _print(self, level: str, msg: str) -> None:
        if level == "debug":
            self.debug_messages.append(msg)
        elif level == "info":
            self.info_messages.append(msg)
        elif level == "warning":
            self.warning_messages.append(msg)
        elif level == "error":
            self.error_messages.append(msg)


@pytest.fixture
def mock_logger() -> MockLogger:
    """Create a mock logger for testing."""
    return MockLogger()


@pytest.fixture(autouse=True)
def local_output(monkeypatch: pytest.MonkeyPatch) -> None:
    """Log in local format even when the tests themselves run on GitHub Actions."""
    monkeypatch.delenv("GITHUB_ACTIONS", raising=False)


@pytest.fixture
def build_fake_filesystem(fs: Any):
    """Convenience helper to build a fake filesystem from a nested dict."""

    def _build(structure: dict[str, object], base_path: str = "") -> None:
        base = base_path or "/"
        for name, value in structure.items():
            path = f"{base.rstrip('/')}/{name}"
            if isinstance(value, dict):
                fs.makedirs(path, exist_ok=True)
                _build(value, path)
            else:
                fs.create_file(path, contents=value)

    return _build


def make_orderer(*versions: str, log: Logger | None = None) -> VersionOrderer:
    return VersionOrderer([Version(v) for v in versions], log=log)


def less(a: str, b: str) -> bool:
    return make_orderer(a, b).less(0, 1)


def originals(versions: list[Version]) -> list[str]:
    return [v.original for v in versions]
