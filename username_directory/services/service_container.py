"""
Process-wide registry of lazily created services
"""
import threading
from typing import Any, Callable, Dict

from ..constants import ServiceConstants
from .username_directory import UsernameDirectory


class ServiceContainer:
    """
    Hands out one shared instance per service name.
    
    Creation happens at most once per name even when many threads ask at
    the same time; later lookups return the cached instance without locking.
    """
    
    def __init__(self):
        self._lock = threading.Lock()
        self._services: Dict[str, Any] = {}
        self._factories: Dict[str, Callable[[], Any]] = {
            ServiceConstants.USERNAME_DIRECTORY: UsernameDirectory,
        }
    
    def get_service(self, service_name: str):
        """
        Shared instance for `service_name`, created on first request
        
        Raises:
            ValueError: If no factory exists for the name
        """
        service = self._services.get(service_name)
        if service is not None:
            return service
        
        with self._lock:
            service = self._services.get(service_name)
            if service is None:
                factory = self._factories.get(service_name)
                if factory is None:
                    raise ValueError(f"Unknown service: {service_name}")
                service = factory()
                self._services[service_name] = service
            return service
    
    def register_service(self, service_name: str, service_instance):
        """Install a ready-made instance, replacing any cached one"""
        with self._lock:
            self._services[service_name] = service_instance
    
    def clear_services(self):
        """Drop cached instances; the next lookup creates fresh ones"""
        with self._lock:
            self._services.clear()


_service_container = ServiceContainer()


def get_service(service_name: str):
    return _service_container.get_service(service_name)


def register_service(service_name: str, service_instance):
    _service_container.register_service(service_name, service_instance)


def clear_services():
    _service_container.clear_services()
