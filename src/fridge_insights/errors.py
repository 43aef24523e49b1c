"""Error taxonomy shared by services and the HTTP layer."""


class FridgeInsightsError(Exception):
    """Base class for application errors."""


class ValidationError(FridgeInsightsError):
    """Malformed input supplied by the caller."""


class NotFoundError(FridgeInsightsError):
    """Referenced user, item or product does not exist."""


class InvalidCredentialError(FridgeInsightsError):
    """The identity collaborator rejected the supplied credentials."""


class UpstreamError(FridgeInsightsError):
    """An external collaborator failed to answer."""


class MalformedResponseError(FridgeInsightsError):
    """The language model replied with something that is not usable JSON."""
