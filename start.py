#!/usr/bin/env python3
"""
Startup wrapper for the PathPilot API with IPv4/IPv6 auto-detection.

Binds to dual-stack (::) when the host supports it, falling back to
IPv4-only (0.0.0.0) otherwise.

Supports environment variables:
- BIND_ADDRESS: Explicit bind address (default: auto-detect)
- PORT: HTTP port (default: 3000)
"""

import asyncio
import os
import socket
import sys

import uvicorn

APP_PATH = "pathpilot_api.main:app"


def can_bind_ipv6_dualstack(port: int) -> bool:
    """Test if we can bind to IPv6 with dual-stack support on the given port.

    Returns True only if both IPv6 and IPv4 will work via the :: binding.
    """
    try:
        sock = socket.socket(socket.AF_INET6, socket.SOCK_STREAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.setsockopt(socket.IPPROTO_IPV6, socket.IPV6_V6ONLY, 0)
        except (AttributeError, OSError):
            sock.close()
            return False

        sock.bind(("::", port))
        sock.close()
        return True
    except OSError:
        return False


def resolve_host(bind_address: str, port: int) -> str:
    """Turn BIND_ADDRESS into a concrete host, probing when it is ``auto``."""
    if bind_address != "auto":
        return bind_address
    return "::" if can_bind_ipv6_dualstack(port) else "0.0.0.0"


async def serve_dualstack(port: int, log_level: str) -> None:
    """Serve on a pre-bound :: socket with IPV6_V6ONLY=0."""
    sock = socket.socket(socket.AF_INET6, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    sock.setsockopt(socket.IPPROTO_IPV6, socket.IPV6_V6ONLY, 0)
    sock.bind(("::", port))
    sock.listen(128)
    sock.setblocking(False)

    server = uvicorn.Server(uvicorn.Config(APP_PATH, log_level=log_level))
    await server.serve(sockets=[sock])


def main() -> None:
    """Start uvicorn with auto-detected or explicit bind address."""
    port = int(os.getenv("PORT", "3000"))
    log_level = os.getenv("LOG_LEVEL", "INFO").lower()
    host = resolve_host(os.getenv("BIND_ADDRESS", "auto"), port)

    print(f"API listening on [{host}]:{port}", file=sys.stderr)

    if host == "::":
        asyncio.run(serve_dualstack(port, log_level))
    else:
        uvicorn.run(APP_PATH, host=host, port=port, log_level=log_level)


if __name__ == "__main__":
    main()
