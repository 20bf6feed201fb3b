"""YAML loader + schema validation for rate files.

A rate file lists one direction of each conversion; inverses are derived
when the graph is built::

    rates:
      - {source: USD, target: EUR, rate: 0.92}
      - {source: EUR, target: GBP, rate: 0.86}
"""

from __future__ import annotations

import json
import math
from importlib import resources
from typing import Any, Dict

import jsonschema
import yaml

from dexrate.logging import get_logger

logger = get_logger(__name__)

RECOGNIZED_KEYS = {"rates"}


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("dexrate.schemas")
        .joinpath("rates.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_rates_yaml(yaml_str: str) -> Dict[str, Any]:
    """Load and validate a rate file given as a YAML string.

    Returns:
        The parsed document, with ``rates`` present (possibly empty).

    Raises:
        ValueError: On a non-mapping document, unrecognized top-level keys,
            vertex names that YAML parsed as booleans, or non-finite rates.
        jsonschema.ValidationError: If the document does not match the schema.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    extra = set(data.keys()) - RECOGNIZED_KEYS
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s) in rate file: "
            f"{', '.join(sorted(map(str, extra)))}. "
            f"Allowed keys are {sorted(RECOGNIZED_KEYS)}"
        )

    # YAML 1.1 turns names like NO/ON/YES into booleans; catch this before the
    # schema reports a less helpful type error.
    rates = data.get("rates") or []
    if isinstance(rates, list):
        for entry in rates:
            if not isinstance(entry, dict):
                continue
            for key in ("source", "target"):
                if isinstance(entry.get(key), bool):
                    raise ValueError(
                        f"Vertex name in '{key}' was parsed as a boolean "
                        f"({entry[key]}); quote it in the YAML file."
                    )

    data["rates"] = rates
    jsonschema.validate(data, _load_schema())

    # JSON Schema numbers admit YAML .inf and .nan
    for entry in rates:
        src, dst, rate = entry["source"], entry["target"], entry["rate"]
        if not math.isfinite(rate):
            raise ValueError(f"Rate from '{src}' to '{dst}' must be finite, got {rate}.")

    logger.debug("Loaded rate file with %d rate(s)", len(rates))
    return data
