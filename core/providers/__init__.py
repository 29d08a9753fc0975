from core.providers.errors import ProviderError
from core.providers.loader import Providers, load_providers

__all__ = ["ProviderError", "Providers", "load_providers"]
