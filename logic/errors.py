"""Errors raised while building rule tables and resolving flags."""

from flags.errors import ConfigurationError, UnknownFlagError


class SelfReferentialRuleError(ConfigurationError):
    """A rule's predicate reads the flag the rule activates."""

    def __init__(self, consequent: str) -> None:
        self.consequent = consequent
        super().__init__(f"Rule for '{consequent}' reads its own consequent")


class NonMonotonicRuleError(ConfigurationError):
    """A rule negates a flag that another rule can activate."""

    def __init__(self, consequent: str, negated: str) -> None:
        self.consequent = consequent
        self.negated = negated
        super().__init__(
            f"Rule for '{consequent}' negates derived flag '{negated}'; "
            f"only flags that no rule activates may appear under Not")


class NonConvergenceError(RuntimeError):
    """Resolution did not reach a fixed point within the pass limit."""

    def __init__(self, passes: int, pending: list) -> None:
        self.passes = passes
        self.pending = pending
        super().__init__(
            f"No fixed point after {passes} passes; still changing: {', '.join(pending)}")


__all__ = [
    'ConfigurationError',
    'UnknownFlagError',
    'SelfReferentialRuleError',
    'NonMonotonicRuleError',
    'NonConvergenceError',
]
