"""Error types shared by the planning core and its adapters."""


class InvalidRequest(ValueError):
    """A plan request is missing one of its required fields."""

    def __init__(self, message: str = "Missing required parameters"):
        super().__init__(message)
        self.message = message


class ProviderUnavailable(RuntimeError):
    """An external provider call failed (transport, status or payload)."""

    def __init__(self, provider: str, reason: str):
        super().__init__(f"{provider} unavailable: {reason}")
        self.provider = provider
        self.reason = reason
