"""Configuration constants.

Protocol-facing values that clients depend on and that are not user
configurable. Configurable values live in models.py.
"""

# =============================================================================
# Symbol Locations
# =============================================================================

PLACEHOLDER_RANGE_END_CHAR = 100
"""End character of every emitted symbol range. Ranges cover "this line",
not the real token span."""

# =============================================================================
# Document Index Wait
# =============================================================================
# The indexer publishes documents asynchronously after open/change. Symbol
# requests that arrive first wait at most 100 polls x 100 ms. IndexConfig
# defaults mirror these values.

DOCUMENT_POLL_INTERVAL_SEC = 0.1
"""Delay between two lookups of a not-yet-indexed document."""

DOCUMENT_POLL_MAX_RETRIES = 100
"""Lookups after the initial one before a document wait gives up."""
