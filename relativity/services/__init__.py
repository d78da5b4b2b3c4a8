"""
CHRONOS services and the registry the app mounts them from.

A service turns raw JSON payloads into validated inputs for the physics
core (validate), runs the core (compute), and owns the HTTP endpoints that
expose it (register_routes). create_app() builds one registry; the /api
blueprint mounts every registered service and /api/services lists them.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

from abc import ABC, abstractmethod


class ChronosService(ABC):
    """
    Base class for a CHRONOS service.

    Subclasses set ``id``, ``name``, ``description`` and ``endpoints``
    (``"METHOD /api/path"`` strings, listed by /api/services).
    """

    id = ""
    name = ""
    description = ""
    endpoints = ()

    @abstractmethod
    def validate(self, config):
        """
        Turn a raw request payload into compute() input.

        Raises
        ------
        ValueError
            Message is returned to the client with a 400.
        """

    @abstractmethod
    def compute(self, config):
        """Run the computation on validated input; return a JSON-ready dict."""

    @abstractmethod
    def register_routes(self, bp):
        """Mount the service's endpoints on the /api blueprint."""

    def metadata(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "endpoints": list(self.endpoints),
        }


class ChronosRegistry:
    """Services keyed by id, iterated in registration order."""

    def __init__(self):
        self._services = {}

    def register(self, service):
        """Add a service; a second service with the same id is a ValueError."""
        if not service.id:
            raise ValueError("Service has no id")
        if service.id in self._services:
            raise ValueError(
                "Service '{}' is already registered".format(service.id)
            )
        self._services[service.id] = service

    def get(self, service_id):
        return self._services.get(service_id)

    def list_all(self):
        return [s.metadata() for s in self._services.values()]

    def __iter__(self):
        return iter(self._services.values())

    def __len__(self):
        return len(self._services)

    def __contains__(self, service_id):
        return service_id in self._services
