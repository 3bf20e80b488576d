"""Configuration errors raised while validating flag names and values."""


class ConfigurationError(ValueError):
    """Base class for invalid flag vocabularies, rule tables or base sets."""


class UnknownFlagError(ConfigurationError, KeyError):
    """A flag name outside the known vocabulary was referenced."""

    def __init__(self, key: str, context: str = "") -> None:
        self.key = key
        self.context = context
        message = f"Flag '{key}' not found"
        if context:
            message = f"{message} ({context})"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]
