"""
Service operation decorators for username-directory
"""
import time
from functools import wraps
from typing import Callable, Optional

from .exceptions import DirectoryServiceError
from .logger import directory_logger as logger


def log_operation(operation: Optional[str] = None, subject_field: Optional[str] = None, log_result: bool = True):
    """
    Decorator that times a directory method and emits a debug log entry
    
    Args:
        operation: Operation name for the log entry (defaults to the function name)
        subject_field: Log key for the method's first positional argument;
            when None, positional arguments are logged under 'args'
        log_result: Whether to include the return value in the log entry
    """
    def decorator(func: Callable) -> Callable:
        operation_name = operation or getattr(func, '__name__', 'unknown')
        
        def call_context(args) -> dict:
            if not args:
                return {}
            if subject_field:
                return {subject_field: args[0]}
            return {'args': list(args)}
        
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            start_time = time.time()
            
            try:
                result = func(self, *args, **kwargs)
            except DirectoryServiceError as e:
                logger.warning(
                    f"Operation {operation_name} rejected",
                    operation=operation_name,
                    duration_ms=round((time.time() - start_time) * 1000, 3),
                    error_code=e.error_code,
                    error_message=e.message
                )
                raise
            
            log_data = {
                'operation': operation_name,
                'duration_ms': round((time.time() - start_time) * 1000, 3),
                **call_context(args)
            }
            if log_result:
                log_data['result'] = result
            
            logger.debug(f"Operation {operation_name} completed", **log_data)
            return result
        
        return wrapper
    return decorator
