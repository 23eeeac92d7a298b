"""Shared fixtures for ccwc tests."""

import io

import pytest


@pytest.fixture
def fake_stdin():
    """Factory for text streams whose .buffer yields the given bytes."""

    def build(data: bytes) -> io.TextIOWrapper:
        return io.TextIOWrapper(io.BytesIO(data), encoding="utf-8")

    return build
