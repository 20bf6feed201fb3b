"""Value objects used by the search."""

from dexrate.model.path import RatePath

__all__ = ["RatePath"]
