"""Configuration for the solver and its logging."""

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class SolverConfig:
    """Runtime switches for ``max_bw_spf`` and the ``bwpath`` logger."""

    # Re-verify the optimality conditions after every solve. Costs an extra
    # O(V + E) pass, so it stays off outside of tests and debugging.
    check_optimality: bool = False

    # Level name ("DEBUG", "warning") or number ("10") for the bwpath root
    # logger. Resolved by bwpath.logging when the root logger is set up.
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "SolverConfig":
        """Build a config from ``BWPATH_CHECK_OPTIMALITY`` and ``BWPATH_LOG_LEVEL``."""
        raw_check = os.environ.get("BWPATH_CHECK_OPTIMALITY", "")
        raw_level = os.environ.get("BWPATH_LOG_LEVEL", "").strip()
        return cls(
            check_optimality=raw_check.strip().lower() in _TRUTHY,
            log_level=raw_level or cls.log_level,
        )


SOLVER_CONFIG = SolverConfig.from_env()
