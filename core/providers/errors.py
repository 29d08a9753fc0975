from __future__ import annotations


class ProviderError(RuntimeError):
    """Raised by any external capability that could not produce a usable answer."""

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider
