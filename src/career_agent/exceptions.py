"""Error hierarchy shared by the session loop and the CLI."""


class CareerAgentError(Exception):
    """Base class for every error raised by the career agent."""


class ConfigurationError(CareerAgentError):
    """Required settings are missing or invalid. Fatal at startup."""


class BackendError(CareerAgentError):
    """The model backend failed while serving a task."""


class TaskTimeoutError(BackendError):
    """A streamed task did not finish within the configured timeout."""

    def __init__(self, timeout: float):
        super().__init__(f"Model task exceeded the {timeout:g}s timeout")
        self.timeout = timeout
