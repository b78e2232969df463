"""
Service layer: LifecycleService ABC and ServiceRegistry.

Each comparison domain is a LifecycleService registered with the
ServiceRegistry at app startup. A service owns its input validation,
its computation and its namespaced API endpoints; the registry looks
services up by id and lists them for the API index.

Classes:
    LifecycleService - Abstract base class for all services
    ServiceRegistry  - Central lookup container for registered services

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

from abc import ABC, abstractmethod


class LifecycleService(ABC):
    """
    Abstract base class for a lifecycle emissions service.

    Class Attributes
    ----------------
    id : str
        Unique service identifier (e.g. "comparison").
    name : str
        Human-readable display name.
    description : str
        One-liner for the service index.
    route : str
        Frontend page route (e.g. "/").
    """

    id = ""
    name = ""
    description = ""
    route = ""

    @abstractmethod
    def validate(self, config):
        """
        Validate raw input and return a normalized input record.

        Parameters
        ----------
        config : mapping
            Raw request payload or form fields.

        Raises
        ------
        emissions.errors.ValidationError
            If the input is invalid.
        """

    @abstractmethod
    def compute(self, config):
        """
        Run the service computation on validated input.

        Parameters
        ----------
        config
            Output of validate().
        """

    def register_routes(self, blueprint):
        """
        Mount service-specific API endpoints onto a Flask blueprint.

        Services with endpoints override this; the default mounts nothing.
        """
        pass

    def metadata(self):
        """Service info: id, name, description, route."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "route": self.route,
        }


class ServiceRegistry:
    """
    Central lookup container for registered LifecycleService instances.
    """

    def __init__(self):
        self._services = {}

    def register(self, service):
        """
        Register a service instance.

        Raises
        ------
        ValueError
            If a service with the same id is already registered.
        """
        if service.id in self._services:
            raise ValueError(
                "Service '{}' is already registered".format(service.id)
            )
        self._services[service.id] = service

    def get(self, service_id):
        """Look up a service by id; None if not found."""
        return self._services.get(service_id)

    def list_all(self):
        """Metadata for all registered services, in registration order."""
        return [s.metadata() for s in self._services.values()]

    def __iter__(self):
        """Registered services, in registration order."""
        return iter(self._services.values())
