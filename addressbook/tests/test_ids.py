"""Test identifier generators."""

from __future__ import annotations

import pytest

from addressbook.ids import SequentialIdGenerator, UUIDIdGenerator, build_id_generator


def test_sequential_ids():
    ids = SequentialIdGenerator(start=5, prefix="c-")
    assert [ids.new_id() for _ in range(3)] == ["c-5", "c-6", "c-7"]


def test_uuid_ids_are_unique():
    ids = UUIDIdGenerator()
    generated = {ids.new_id() for _ in range(100)}
    assert len(generated) == 100
    assert all(len(i) == 32 for i in generated)


def test_build_id_generator():
    assert isinstance(build_id_generator("uuid"), UUIDIdGenerator)
    assert isinstance(build_id_generator(" Sequential "), SequentialIdGenerator)
    assert build_id_generator("adapter") is None
    with pytest.raises(ValueError):
        build_id_generator("random")
