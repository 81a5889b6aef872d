"""Runtime settings, read from ``STOREFRONT_*`` environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path

from storefront.domain.exceptions import ValidationError

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}

_LEVELS_BY_ENV = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


def _flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValidationError(f"{name} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    environment: str = "development"
    log_level: str = "DEBUG"
    storage: str = "memory"  # "memory" or "json"
    data_dir: Path = DEFAULT_DATA_DIR
    seed_catalog: bool = True
    strict_transitions: bool = False
    verify_totals: bool = False
    total_tolerance: Decimal = Decimal("0.01")

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if env is None else env
        environment = env.get("STOREFRONT_ENV", "development").lower()

        storage = env.get("STOREFRONT_STORAGE", "memory").lower()
        if storage not in ("memory", "json"):
            raise ValidationError(f"STOREFRONT_STORAGE must be 'memory' or 'json', got {storage!r}")

        raw_tolerance = env.get("STOREFRONT_TOTAL_TOLERANCE", "0.01")
        try:
            tolerance = Decimal(raw_tolerance)
        except InvalidOperation as exc:
            raise ValidationError(
                f"STOREFRONT_TOTAL_TOLERANCE must be a decimal, got {raw_tolerance!r}"
            ) from exc

        return cls(
            environment=environment,
            log_level=env.get("STOREFRONT_LOG_LEVEL", _LEVELS_BY_ENV.get(environment, "INFO")).upper(),
            storage=storage,
            data_dir=Path(env.get("STOREFRONT_DATA_DIR", str(DEFAULT_DATA_DIR))),
            seed_catalog=_flag(env, "STOREFRONT_SEED_CATALOG", storage == "memory"),
            strict_transitions=_flag(env, "STOREFRONT_STRICT_TRANSITIONS", False),
            verify_totals=_flag(env, "STOREFRONT_VERIFY_TOTALS", False),
            total_tolerance=tolerance,
        )
