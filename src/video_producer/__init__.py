"""AI Video Producer - sequential multi-asset video production orchestrator."""

__version__ = "0.1.0"
