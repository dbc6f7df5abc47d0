"""Observability for shared middleware operations."""

from shared_kernel.middleware.observability.access_gate_probe import (
    AccessGateProbe,
    DefaultAccessGateProbe,
)

__all__ = [
    "AccessGateProbe",
    "DefaultAccessGateProbe",
]
