from .username_directory import UsernameDirectory
from .service_container import ServiceContainer, get_service, register_service, clear_services

__all__ = [
    'UsernameDirectory',
    'ServiceContainer',
    'get_service',
    'register_service',
    'clear_services',
]
