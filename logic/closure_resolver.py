from dataclasses import dataclass
import logging
from typing import List, Mapping, Optional, Tuple

from flags import Flags
from .errors import NonConvergenceError
from .rules import Rule, RuleTable

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    """Outcome of one resolution run.

    ``flags`` maps every known key to its final state and is read-only.
    ``activations`` lists the derived flags in the order they were switched
    on, each with the rule that did it.
    """
    flags: Mapping[str, bool]
    passes: int
    activations: Tuple[Tuple[str, Rule], ...]

    def active(self) -> List[str]:
        return sorted(key for key, value in self.flags.items() if value)

    def derived(self) -> List[str]:
        return [key for key, _ in self.activations]


class ClosureResolver:
    """Computes the least fixed point of a rule table over a base flag set.

    The resolver keeps no state between calls. A single instance can serve
    any number of runs, including concurrent ones, since each run works on
    its own Flags container.
    """

    def __init__(self, rule_table: RuleTable, max_passes: Optional[int] = None) -> None:
        if max_passes is not None and max_passes < 1:
            raise ValueError(f"max_passes must be positive, got {max_passes}")
        self.rule_table = rule_table
        # Every pass but the last switches on at least one derived flag
        self.max_passes = max_passes if max_passes is not None else len(rule_table.derived_flags()) + 1

    def resolve(self, base: Mapping[str, bool]) -> Mapping[str, bool]:
        """Resolve ``base`` and return the final state of every known flag."""
        return self.explain(base).flags

    def explain(self, base: Mapping[str, bool]) -> Resolution:
        """Resolve ``base`` and report how the fixed point was reached."""
        working = Flags(self.rule_table.registry)
        working.from_dict(base)
        log.debug(f"Resolving base set: {', '.join(working.active()) or '(empty)'}")

        activations = []
        num_passes = 0
        last_pass_start = 0
        still_making_progress = True
        while still_making_progress:
            if num_passes >= self.max_passes:
                pending = [key for key, _ in activations[last_pass_start:]]
                log.error(f"Exceeded {self.max_passes} passes without reaching a fixed point")
                raise NonConvergenceError(num_passes, pending)

            num_passes += 1
            still_making_progress = False
            last_pass_start = len(activations)
            for rule in self.rule_table.rules():
                if working[rule.consequent]:
                    continue
                if rule.predicate.evaluate(working):
                    working.set(rule.consequent, True)
                    activations.append((rule.consequent, rule))
                    still_making_progress = True
                    log.debug(f"  Pass {num_passes}: {rule.consequent} <- {rule.predicate.describe()}")

        log.info(f"Resolved {len(working.active())} active flags "
                 f"({len(activations)} derived) in {num_passes} passes")
        return Resolution(working.snapshot(), num_passes, tuple(activations))
