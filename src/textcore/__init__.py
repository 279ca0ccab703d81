"""
textcore — ASCII text algorithms.

Self-contained, stateless text-processing primitives (character
classification, predicate scanning, ordering, strict parsing, reflow,
substring extraction, escape codecs and format validators) that are
independent of any I/O or external systems.

The whole public surface of textcore.algorithms and textcore.domain is
re-exported here:

    >>> from textcore import natural_sorted, LayoutOptions
"""

import logging

from textcore import algorithms, domain
from textcore.algorithms import *  # noqa: F401,F403
from textcore.domain import *  # noqa: F401,F403

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Algorithms (classification, scanning, ordering, parsing, reflow,
    # encoding, escaping, extraction, network, formats)
    *algorithms.__all__,
    # Domain (layout options)
    *domain.__all__,
    # Package metadata
    "__version__",
]
