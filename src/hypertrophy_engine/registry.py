"""Policy registry with auto-discovery of AutoregulationPolicy subclasses."""

from __future__ import annotations

import importlib
import logging
import pkgutil

from hypertrophy_engine.autoregulation.base import AutoregulationPolicy
from hypertrophy_engine.config import EngineConfig
from hypertrophy_engine.exceptions import UnknownPolicyError

logger = logging.getLogger(__name__)


class PolicyRegistry:
    """Discovers and manages all AutoregulationPolicy implementations.

    Auto-discovers policies by scanning the autoregulation package for
    concrete subclasses of AutoregulationPolicy. A new policy is added by
    placing a module in that package.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()
        self._policies: dict[str, AutoregulationPolicy] = {}

    def discover_policies(self) -> None:
        """Scan the autoregulation package and register every policy found."""
        import hypertrophy_engine.autoregulation as policies_pkg

        self._scan_package(policies_pkg.__name__, list(policies_pkg.__path__))

    def _scan_package(self, package_name: str, package_path: list[str]) -> None:
        for _, module_name, _ in pkgutil.walk_packages(
            package_path, prefix=package_name + "."
        ):
            try:
                module = importlib.import_module(module_name)
            except ImportError:
                logger.warning("Could not import policy module %s", module_name)
                continue

            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (
                    isinstance(attr, type)
                    and issubclass(attr, AutoregulationPolicy)
                    and attr is not AutoregulationPolicy
                    and not getattr(attr, "__abstractmethods__", set())
                    and attr.policy_id not in self._policies
                ):
                    self.register(attr(self.config))

    def register(self, policy: AutoregulationPolicy) -> None:
        """Register a policy instance by its policy_id."""
        self._policies[policy.policy_id] = policy
        logger.debug("Registered autoregulation policy %s", policy.policy_id)

    def get(self, policy_id: str) -> AutoregulationPolicy:
        """Retrieve a policy by id.

        Raises:
            UnknownPolicyError: If no policy is registered under that id.
        """
        try:
            return self._policies[policy_id]
        except KeyError:
            raise UnknownPolicyError(policy_id, self.policy_ids) from None

    def get_all_policies(self) -> list[AutoregulationPolicy]:
        """Return all registered policies sorted by id."""
        return [self._policies[k] for k in sorted(self._policies)]

    @property
    def policy_ids(self) -> list[str]:
        return list(self._policies.keys())
