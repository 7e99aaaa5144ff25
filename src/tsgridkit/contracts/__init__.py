"""Request contracts for tsgridkit orchestrators."""

from tsgridkit.contracts.specs import BaseSpec, PadSpec, Rounding, ThickenSpec

__all__ = [
    "BaseSpec",
    "PadSpec",
    "Rounding",
    "ThickenSpec",
]
