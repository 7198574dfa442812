"""Exception types shared across aura modules."""


class AuraError(Exception):
    """Base class for aura errors."""


class ConfigurationError(AuraError):
    """Required configuration (such as the API key) is missing."""


class GenerationError(AuraError):
    """A checklist could not be generated.

    Raised for transport failures, non-JSON replies and replies missing
    required fields. The message is safe to show to the user.
    """
