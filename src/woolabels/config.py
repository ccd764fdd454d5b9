from __future__ import annotations

from dataclasses import dataclass
import os

DEFAULT_SINGLE_PACKAGE_MAX = 40.0
DEFAULT_DOUBLE_PACKAGE_MAX = 70.0


@dataclass(frozen=True, slots=True)
class PackagingConfig:
    """Order-value thresholds that decide how many packages an order ships in.

    Orders worth up to ``single_package_max`` ship as one package, up to
    ``double_package_max`` as two, anything above as three.
    """

    single_package_max: float = DEFAULT_SINGLE_PACKAGE_MAX
    double_package_max: float = DEFAULT_DOUBLE_PACKAGE_MAX
    multipack: bool = True

    def __post_init__(self) -> None:
        if self.single_package_max < 0 or self.double_package_max < 0:
            msg = "Package thresholds must not be negative"
            raise ValueError(msg)
        if self.single_package_max > self.double_package_max:
            msg = "single_package_max must not exceed double_package_max"
            raise ValueError(msg)


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def load_packaging_config_from_env() -> PackagingConfig:
    """Load packaging thresholds from env, falling back to the defaults."""
    single_max = _float_env("WOOLABELS_SINGLE_PACKAGE_MAX", DEFAULT_SINGLE_PACKAGE_MAX)
    double_max = _float_env("WOOLABELS_DOUBLE_PACKAGE_MAX", DEFAULT_DOUBLE_PACKAGE_MAX)
    multipack = os.environ.get("WOOLABELS_MULTIPACK", "true").strip().lower() in {
        "1",
        "true",
        "yes",
        "on",
    }

    return PackagingConfig(
        single_package_max=single_max,
        double_package_max=double_max,
        multipack=multipack,
    )
