"""Boolean predicates over flag states.

Predicates are small immutable trees: ``FlagRef`` leaves combined with
``AllOf``, ``AnyOf`` and ``Not`` nodes. They are evaluated against any
mapping of flag key -> bool, usually a ``Flags`` container.

Example:
    from logic.predicates import all_of, any_of, not_

    can_ecdh = any_of(
        all_of('MBEDTLS_USE_PSA_CRYPTO', 'PSA_WANT_ALG_ECDH'),
        all_of(not_('MBEDTLS_USE_PSA_CRYPTO'), 'MBEDTLS_ECDH_C'))
    can_ecdh.evaluate({'MBEDTLS_ECDH_C': True})  # True
"""

from dataclasses import dataclass
from typing import FrozenSet, Mapping, Tuple, Union


class Predicate:
    """Base class for predicate nodes."""

    def evaluate(self, values: Mapping[str, bool]) -> bool:
        """Evaluate against current flag states. Missing keys count as inactive."""
        raise NotImplementedError

    def flag_keys(self) -> FrozenSet[str]:
        """Every flag key this predicate reads."""
        raise NotImplementedError

    def negated_keys(self) -> FrozenSet[str]:
        """Flag keys read underneath a Not node."""
        raise NotImplementedError

    def describe(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class FlagRef(Predicate):
    """True when the named flag is active."""
    key: str

    def evaluate(self, values: Mapping[str, bool]) -> bool:
        return bool(values.get(self.key, False))

    def flag_keys(self) -> FrozenSet[str]:
        return frozenset((self.key,))

    def negated_keys(self) -> FrozenSet[str]:
        return frozenset()

    def describe(self) -> str:
        return self.key


@dataclass(frozen=True)
class AllOf(Predicate):
    """True when every operand holds. An empty AllOf always holds."""
    operands: Tuple[Predicate, ...]

    def evaluate(self, values: Mapping[str, bool]) -> bool:
        return all(operand.evaluate(values) for operand in self.operands)

    def flag_keys(self) -> FrozenSet[str]:
        return frozenset().union(*(operand.flag_keys() for operand in self.operands))

    def negated_keys(self) -> FrozenSet[str]:
        return frozenset().union(*(operand.negated_keys() for operand in self.operands))

    def describe(self) -> str:
        if not self.operands:
            return "always"
        return " and ".join(_describe_operand(operand) for operand in self.operands)


@dataclass(frozen=True)
class AnyOf(Predicate):
    """True when at least one operand holds. An empty AnyOf never holds."""
    operands: Tuple[Predicate, ...]

    def evaluate(self, values: Mapping[str, bool]) -> bool:
        return any(operand.evaluate(values) for operand in self.operands)

    def flag_keys(self) -> FrozenSet[str]:
        return frozenset().union(*(operand.flag_keys() for operand in self.operands))

    def negated_keys(self) -> FrozenSet[str]:
        return frozenset().union(*(operand.negated_keys() for operand in self.operands))

    def describe(self) -> str:
        if not self.operands:
            return "never"
        return " or ".join(_describe_operand(operand) for operand in self.operands)


@dataclass(frozen=True)
class Not(Predicate):
    """True when the operand does not hold."""
    operand: Predicate

    def evaluate(self, values: Mapping[str, bool]) -> bool:
        return not self.operand.evaluate(values)

    def flag_keys(self) -> FrozenSet[str]:
        return self.operand.flag_keys()

    def negated_keys(self) -> FrozenSet[str]:
        return self.operand.flag_keys()

    def describe(self) -> str:
        return f"not {_describe_operand(self.operand)}"


def _describe_operand(operand: Predicate) -> str:
    if isinstance(operand, (AllOf, AnyOf)) and len(operand.operands) > 1:
        return f"({operand.describe()})"
    return operand.describe()


PredicateLike = Union[Predicate, str]


def as_predicate(value: PredicateLike) -> Predicate:
    """Wrap bare flag keys in FlagRef; pass predicates through."""
    if isinstance(value, Predicate):
        return value
    if isinstance(value, str):
        return FlagRef(value)
    raise TypeError(f"Expected a Predicate or flag key, got {type(value).__name__}")


def flag(key: str) -> FlagRef:
    return FlagRef(key)


def all_of(*operands: PredicateLike) -> AllOf:
    return AllOf(tuple(as_predicate(operand) for operand in operands))


def any_of(*operands: PredicateLike) -> AnyOf:
    return AnyOf(tuple(as_predicate(operand) for operand in operands))


def not_(operand: PredicateLike) -> Not:
    return Not(as_predicate(operand))


ALWAYS = AllOf(())
