"""Constant-product AMM arithmetic: swaps, fees, LP conversions, price oracle and configuration."""

__version__ = "0.1.0"

__all__ = [
    "calculator",
    "config",
    "constant_product",
    "curve_types",
    "errors",
    "events",
    "fees",
    "mathutils",
    "oracle",
]