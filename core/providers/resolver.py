"""Hostname resolution using the running event loop's resolver."""

from __future__ import annotations

import asyncio
import socket
from typing import Protocol

from core.providers.errors import ProviderError


class Resolver(Protocol):
    async def resolve(self, hostname: str) -> str:
        ...


class SystemResolver:
    """Resolve a hostname to one address, preferring IPv4 like a plain ``lookup``."""

    def __init__(self, timeout: float):
        self.timeout = timeout

    async def resolve(self, hostname: str) -> str:
        loop = asyncio.get_running_loop()
        try:
            infos = await asyncio.wait_for(
                loop.getaddrinfo(hostname, None, type=socket.SOCK_STREAM),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as exc:
            raise ProviderError("dns", f"timed out resolving {hostname}") from exc
        except OSError as exc:
            raise ProviderError("dns", f"could not resolve {hostname}: {exc}") from exc
        except ValueError as exc:
            # idna encoding rejects empty or over-long labels before any lookup
            raise ProviderError("dns", f"invalid hostname {hostname!r}: {exc}") from exc
        if not infos:
            raise ProviderError("dns", f"no addresses for {hostname}")
        for family, _type, _proto, _canon, sockaddr in infos:
            if family == socket.AF_INET:
                return sockaddr[0]
        return infos[0][4][0]
