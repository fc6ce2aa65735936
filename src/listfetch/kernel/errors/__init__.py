"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   ├── InvalidRequestError
    │   └── ControllerClosedError
    └── InfrastructureError  (infrastructure.py)
        ├── ConnectionError
        ├── TimeoutError
        ├── SerializationError
        └── ExternalServiceError
            ├── ClientError
            ├── ServerError
            └── InvalidResponseError

Fetch collaborators raise these; the list controller stores whatever it
receives without branching on the kind.
"""

from listfetch.kernel.errors.application import (
    ApplicationError,
    ControllerClosedError,
    InvalidRequestError,
)
from listfetch.kernel.errors.base import BaseError
from listfetch.kernel.errors.infrastructure import (
    ClientError,
    ConnectionError,
    ExternalServiceError,
    InfrastructureError,
    InvalidResponseError,
    SerializationError,
    ServerError,
    TimeoutError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ClientError",
    "ConnectionError",
    "ControllerClosedError",
    "ExternalServiceError",
    "InfrastructureError",
    "InvalidRequestError",
    "InvalidResponseError",
    "SerializationError",
    "ServerError",
    "TimeoutError",
]
