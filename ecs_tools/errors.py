"""Exception hierarchy for ECS Tools."""


class ECSToolsError(Exception):
    """Base class for errors reported to the user by the command line."""


class RemoteCallError(ECSToolsError):
    """An ECS API call failed."""


class ServiceLookupError(ECSToolsError):
    """A service name did not resolve to exactly one service."""

    def __init__(self, message: str, cluster: str, service: str):
        super().__init__(message)
        self.cluster = cluster
        self.service = service


class ServiceNotFoundError(ServiceLookupError):
    """No service with the given name exists in the cluster."""


class ServiceAmbiguousError(ServiceLookupError):
    """More than one service matched the given name."""
