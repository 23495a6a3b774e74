"""
Structured logging for username-directory
Each entry is a single JSON object printed to stdout
"""
import json
from datetime import datetime, timezone
from .config import config
from .constants import ServiceConstants


class DirectoryLogger:
    """
    JSON-lines logger carrying service and environment on every entry
    """
    
    def __init__(self, service_name: str = ServiceConstants.DIRECTORY_LOGGER_NAME):
        self.service_name = service_name
        self.environment = config.environment
        self.debug_enabled = config.enable_debug_logging
    
    def _log(self, level: str, message: str, **context):
        entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level.upper(),
            'service': self.service_name,
            'environment': self.environment,
            'message': message,
            **context
        }
        print(json.dumps(entry, default=str))
    
    def debug(self, message: str, **context):
        """Emitted only when enable-debug-logging is set"""
        if self.debug_enabled:
            self._log('debug', message, **context)
    
    def info(self, message: str, **context):
        self._log('info', message, **context)
    
    def warning(self, message: str, **context):
        self._log('warning', message, **context)
    
    def log_service_operation(self, operation: str, entity_type: str = None, entity_id: str = None, **context):
        """Info entry for a state-changing directory operation"""
        if entity_type:
            context['entity_type'] = entity_type
        if entity_id:
            context['entity_id'] = entity_id
        
        self._log('info', f"Service operation: {operation}", operation=operation, **context)


directory_logger = DirectoryLogger()
