# =============================================================================
# agent/__init__.py
# =============================================================================
# The Google ADK agent: configuration (culture_agent.py), system prompt
# (prompt.py) and the messages-in / text-out gateway used by the HTTP
# boundary (gateway.py).
#
# The agent holds no domain logic.  It decides WHICH tool to call and HOW
# to phrase the answer; the tools (tools/) and core/ do the work.
# =============================================================================
