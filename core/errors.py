# =============================================================================
# core/errors.py  -  Exception hierarchy
# =============================================================================
#
# Only these failures ever reach a caller:
#   - ToolInputError            bad tool name / arguments at the serving boundary
#   - AgentError                the agent runtime failed (HTTP 502)
#   - EndpointUnavailableError  the remote client could not reach any backend
#
# ProviderError is raised inside provider adapters and converted into a
# ProviderResult by the adapter guard; it never escapes core/providers.py.
# =============================================================================


class TurkishCultureError(Exception):
    """Base class for every error raised by this project."""


class ToolInputError(TurkishCultureError, ValueError):
    """A tool was invoked with an unknown name or invalid arguments."""

    def __init__(self, message: str, tool: str | None = None):
        super().__init__(message)
        self.tool = tool


class ProviderError(TurkishCultureError):
    """An external provider answered, but not usefully (bad status, exit code)."""

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider


class AgentError(TurkishCultureError):
    """The agent runtime failed to produce an answer."""


class EndpointUnavailableError(TurkishCultureError):
    """The remote client failed to talk to the agent server."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
