"""
Tests for the Either result type.
"""

import dataclasses

import pytest

from samira.riot_api.either import Left, Right, left, right


class TestEither:
    def test_left(self):
        result = left("boom")

        assert isinstance(result, Left)
        assert result.is_left() is True
        assert result.is_right() is False
        assert result.value == "boom"

    def test_right(self):
        result = right({"puuid": "abc"})

        assert isinstance(result, Right)
        assert result.is_right() is True
        assert result.is_left() is False
        assert result.value == {"puuid": "abc"}

    def test_values_compare_by_content(self):
        assert right(1) == Right(1)
        assert left(1) != right(1)

    def test_immutable(self):
        result = right(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.value = 2

    def test_pattern_matching(self):
        match right(42):
            case Right(value):
                matched = value
            case Left(_):
                matched = None

        assert matched == 42
