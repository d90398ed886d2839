# =============================================================================
# client/__init__.py
# =============================================================================
# Remote access to the agent over HTTP (see client/culture_client.py).
# Depends on core/ for configuration and the random word selector only.
# =============================================================================

from client.culture_client import AgentResponse, CultureClient

__all__ = ["AgentResponse", "CultureClient"]
