"""Implication rules and the immutable tables that hold them."""

from dataclasses import dataclass
import logging
from typing import FrozenSet, Iterable, Iterator, Tuple, Type

from flags import FlagRegistry
from .errors import NonMonotonicRuleError, SelfReferentialRuleError, UnknownFlagError
from .predicates import Predicate, PredicateLike, as_predicate

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    """If ``predicate`` holds, ``consequent`` must be active too."""
    consequent: str
    predicate: Predicate
    reason: str = ""

    def __str__(self) -> str:
        return f"{self.predicate.describe()} => {self.consequent}"


def implies(predicate: PredicateLike, consequent: str, reason: str = "") -> Rule:
    """Build a rule; bare flag keys are accepted as predicates."""
    return Rule(consequent, as_predicate(predicate), reason)


class RuleTable:
    """A fixed, validated catalogue of rules over one flag vocabulary.

    Validation happens once, here, so resolution never sees a rule that names
    an unknown flag, reads its own consequent, or negates a flag that some
    rule can switch on.
    """

    def __init__(self, registry: Type[FlagRegistry], rules: Iterable[Rule]) -> None:
        self._registry = registry
        self._rules: Tuple[Rule, ...] = tuple(rules)
        self._derived: FrozenSet[str] = frozenset(rule.consequent for rule in self._rules)
        self._validate()
        log.debug(f"Built rule table with {len(self._rules)} rules over {registry.__name__}")

    def _validate(self) -> None:
        known = self._registry.get_all_flags()
        for rule in self._rules:
            if rule.consequent not in known:
                raise UnknownFlagError(rule.consequent, f"consequent of rule '{rule}'")
            for key in sorted(rule.predicate.flag_keys()):
                if key not in known:
                    raise UnknownFlagError(key, f"predicate of rule '{rule}'")
            if rule.consequent in rule.predicate.flag_keys():
                raise SelfReferentialRuleError(rule.consequent)
            for key in sorted(rule.predicate.negated_keys()):
                if key in self._derived:
                    raise NonMonotonicRuleError(rule.consequent, key)

    @property
    def registry(self) -> Type[FlagRegistry]:
        return self._registry

    def rules(self) -> Tuple[Rule, ...]:
        """All rules, in declaration order."""
        return self._rules

    def derived_flags(self) -> FrozenSet[str]:
        """Keys that at least one rule can activate."""
        return self._derived

    def rules_for(self, key: str) -> Tuple[Rule, ...]:
        """Rules whose consequent is ``key``."""
        if key not in self._registry.get_all_flags():
            raise UnknownFlagError(key, f"not in {self._registry.__name__}")
        return tuple(rule for rule in self._rules if rule.consequent == key)

    def reordered(self, order: Iterable[int]) -> 'RuleTable':
        """A new table with the same rules in the given index order."""
        indices = list(order)
        if sorted(indices) != list(range(len(self._rules))):
            raise ValueError("order must be a permutation of the rule indices")
        return RuleTable(self._registry, (self._rules[i] for i in indices))

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleTable({self._registry.__name__}, {len(self._rules)} rules)"
