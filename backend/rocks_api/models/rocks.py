"""
Rocks API — Rock Collection
=============================

What:  The fixed, ordered collection of rock names served by /rocks.
Why:   A tuple makes the collection immutable: no handler can append to it,
       reorder it, or reinitialise it for the lifetime of the process.
Who:   Read by RockService; never written.
"""

from typing import Tuple

ROCKS: Tuple[str, ...] = (
    "granite",
    "basalt",
    "obsidian",
    "marble",
    "limestone",
    "sandstone",
    "slate",
    "quartzite",
    "pumice",
    "shale",
)
