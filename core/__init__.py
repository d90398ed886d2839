# =============================================================================
# core/__init__.py
# =============================================================================
# All domain logic for the Turkish culture agent: provider adapters, the
# normalizer, the local knowledge store, the random word selector and the
# tool orchestrators.
#
# Nothing in this package imports Google ADK, FastMCP or Starlette.  The
# only third-party import is httpx, used by the provider adapters.
# =============================================================================
