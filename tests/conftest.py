"""Shared test fixtures."""

import pytest


@pytest.fixture
def query_buffer():
    return bytearray(b"id=42&name=sensor&mode=auto")


@pytest.fixture
def nested_json():
    return b'{"id":7,"cfg":{"rate":5,"opts":{"x":1}},"tags":["a",["b"]],"on":false}'


@pytest.fixture
def out_buffer():
    return bytearray(b"\xff" * 16)
