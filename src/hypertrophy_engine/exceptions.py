"""Exception hierarchy for the hypertrophy engine."""

from __future__ import annotations


class HypertrophyEngineError(Exception):
    """Base exception for all hypertrophy_engine errors."""


class ConfigurationError(HypertrophyEngineError):
    """An engine configuration table is malformed."""


class UnknownPolicyError(HypertrophyEngineError, KeyError):
    """No autoregulation policy is registered under the requested id."""

    def __init__(self, policy_id: str, available: list[str] | None = None) -> None:
        self.policy_id = policy_id
        self.available = sorted(available or [])
        super().__init__(
            f"Unknown autoregulation policy {policy_id!r}; "
            f"available: {', '.join(self.available) or 'none'}"
        )

    def __str__(self) -> str:
        return str(self.args[0])
