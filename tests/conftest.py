"""Shared fixtures for the fixednorm test suite."""

import random

import pytest

import fixednorm

SIGNED_NORMS = [fixednorm.Norm8, fixednorm.Norm16, fixednorm.Norm32, fixednorm.Norm64]
UNSIGNED_NORMS = [fixednorm.UNorm8, fixednorm.UNorm16, fixednorm.UNorm32, fixednorm.UNorm64]
ALL_NORMS = SIGNED_NORMS + UNSIGNED_NORMS

SIGNED_FIXED = [fixednorm.Fixed8, fixednorm.Fixed16, fixednorm.Fixed32, fixednorm.Fixed64]
UNSIGNED_FIXED = [fixednorm.UFixed8, fixednorm.UFixed16, fixednorm.UFixed32, fixednorm.UFixed64]
ALL_FIXED = SIGNED_FIXED + UNSIGNED_FIXED


@pytest.fixture
def rng():
    return random.Random(1234)
