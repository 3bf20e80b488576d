"""Tests for predicate trees."""

import dataclasses
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from logic.predicates import (
    ALWAYS,
    AllOf,
    AnyOf,
    FlagRef,
    Not,
    all_of,
    any_of,
    as_predicate,
    flag,
    not_,
)


@pytest.fixture
def can_ecdh():
    return any_of(
        all_of('USE_PSA', 'WANT_ECDH'),
        all_of(not_('USE_PSA'), 'ECDH'))


def test_flag_ref_reads_value():
    assert flag('A').evaluate({'A': True})
    assert not flag('A').evaluate({'A': False})
    # Missing keys count as inactive
    assert not flag('A').evaluate({})


def test_all_of_and_any_of():
    values = {'A': True, 'B': False}
    assert any_of('A', 'B').evaluate(values)
    assert not all_of('A', 'B').evaluate(values)
    assert all_of('A').evaluate(values)


def test_empty_nodes():
    assert ALWAYS.evaluate({})
    assert not AnyOf(()).evaluate({'A': True})


def test_not():
    assert not_('A').evaluate({})
    assert not not_('A').evaluate({'A': True})


def test_mutually_exclusive_branches(can_ecdh):
    assert can_ecdh.evaluate({'ECDH': True})
    assert not can_ecdh.evaluate({'ECDH': True, 'USE_PSA': True})
    assert can_ecdh.evaluate({'USE_PSA': True, 'WANT_ECDH': True})
    assert not can_ecdh.evaluate({'WANT_ECDH': True})


def test_flag_keys_and_negated_keys(can_ecdh):
    assert can_ecdh.flag_keys() == frozenset({'USE_PSA', 'WANT_ECDH', 'ECDH'})
    assert can_ecdh.negated_keys() == frozenset({'USE_PSA'})
    assert ALWAYS.flag_keys() == frozenset()


def test_describe(can_ecdh):
    assert all_of('A', 'B').describe() == 'A and B'
    assert can_ecdh.describe() == '(USE_PSA and WANT_ECDH) or (not USE_PSA and ECDH)'
    assert not_(any_of('A', 'B')).describe() == 'not (A or B)'
    assert ALWAYS.describe() == 'always'


def test_helpers_build_tagged_nodes():
    assert all_of('A', flag('B')) == AllOf((FlagRef('A'), FlagRef('B')))
    assert any_of('A') == AnyOf((FlagRef('A'),))
    assert not_('A') == Not(FlagRef('A'))


def test_predicates_are_frozen_and_hashable():
    predicate = all_of('A', 'B')
    with pytest.raises(dataclasses.FrozenInstanceError):
        predicate.operands = ()
    assert len({predicate, all_of('A', 'B')}) == 1


def test_as_predicate_rejects_other_types():
    with pytest.raises(TypeError):
        as_predicate(42)
