"""Tests for the immutable Vector value type."""

import dataclasses

import pytest

from lavarun.errors import TypeArgumentError
from lavarun.vector import Vector


class TestVector:
    def test_defaults_to_origin(self):
        v = Vector()
        assert (v.x, v.y) == (0, 0)

    @pytest.mark.parametrize("a, b", [
        (Vector(1, 2), Vector(3, 4)),
        (Vector(-1.5, 0.25), Vector(0.5, -0.25)),
        (Vector(0, 0), Vector(7, -7)),
    ])
    def test_plus_adds_components(self, a, b):
        result = a.plus(b)
        assert result.x == a.x + b.x
        assert result.y == a.y + b.y

    def test_plus_does_not_mutate_operands(self):
        a = Vector(1, 2)
        b = Vector(3, 4)
        result = a.plus(b)
        assert result is not a and result is not b
        assert a == Vector(1, 2)
        assert b == Vector(3, 4)

    @pytest.mark.parametrize("bad", [None, (1, 2), 5, "vector"])
    def test_plus_rejects_non_vectors(self, bad):
        with pytest.raises(TypeArgumentError):
            Vector(1, 1).plus(bad)

    def test_type_argument_error_is_a_type_error(self):
        with pytest.raises(TypeError, match="Vector"):
            Vector().plus([1, 2])

    @pytest.mark.parametrize("k", [0, 1, -1, 2.5])
    def test_times_scales_components(self, k):
        a = Vector(3, -2)
        result = a.times(k)
        assert result.x == a.x * k
        assert result.y == a.y * k
        assert a == Vector(3, -2)

    def test_is_frozen(self):
        v = Vector(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.x = 5
