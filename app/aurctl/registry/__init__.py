"""Remote package registry access."""

from aurctl.registry.client import DEFAULT_RPC_URL, RegistryClient

__all__ = ["DEFAULT_RPC_URL", "RegistryClient"]
