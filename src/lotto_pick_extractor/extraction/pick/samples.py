"""
samples
=======

Does: Load the bundled groups of sample digit strings (data/sample_inputs.json,
      a commented json5 file).
Used By: CLI `--samples` and the default run with no inputs.
Returns: Ordered dict of group title -> list of digit strings.
"""

from __future__ import annotations

import logging
from typing import Any

from lotto_pick_extractor.extraction.general.utils import load_config

log = logging.getLogger(__name__)

SAMPLE_FILE = "sample_inputs"

__all__ = ["SAMPLE_FILE", "load_sample_inputs"]


def _validate_samples(data: dict[str, Any]) -> dict[str, list[str]]:
    """Does: Require every group to be a list of strings; raise ValueError otherwise."""
    out: dict[str, list[str]] = {}
    for title, inputs in data.items():
        if not isinstance(inputs, list) or not all(isinstance(s, str) for s in inputs):
            raise ValueError(f"group {title!r} must be a list of strings")
        out[str(title)] = list(inputs)
    return out


def load_sample_inputs(file: str = SAMPLE_FILE) -> dict[str, list[str]]:
    """Does: Load and validate the sample groups (raises Config* errors on bad files)."""
    groups = load_config(
        file,
        mode="validated_dict",
        validator=_validate_samples,
        allow_comments=True,
    )
    log.debug("Loaded %d sample group(s) from %s", len(groups), file)
    return groups
