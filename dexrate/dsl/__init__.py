"""Rate file loading."""

from dexrate.dsl.loader import load_rates_yaml

__all__ = ["load_rates_yaml"]
