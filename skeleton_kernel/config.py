"""Configuration helpers for the offset event kernel."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Optional


@dataclass
class KernelConfig:
    """Process-wide knobs; callers replace them through ``set_kernel_config``."""

    sqrt_precision_bits: int = 64
    # default cap for EventArena chains; None disables the check
    max_propagation_depth: Optional[int] = 64

    def __post_init__(self) -> None:
        if self.sqrt_precision_bits < 1:
            raise ValueError("sqrt_precision_bits must be positive")
        if self.max_propagation_depth is not None and self.max_propagation_depth < 0:
            raise ValueError("max_propagation_depth must be non-negative")


_KERNEL_CONFIG = KernelConfig()


def get_kernel_config() -> KernelConfig:
    return copy.deepcopy(_KERNEL_CONFIG)


def set_kernel_config(config: KernelConfig) -> None:
    global _KERNEL_CONFIG
    _KERNEL_CONFIG = copy.deepcopy(config)
