"""
Username Directory Exceptions
Custom exception classes for username-directory operations
"""


class DirectoryServiceError(Exception):
    """Base exception for all username directory errors"""
    
    def __init__(self, message: str, error_code: str = None, details: dict = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)
    
    def to_dict(self) -> dict:
        """Convert exception to dictionary for callers that report errors"""
        result = {
            'error': self.__class__.__name__,
            'message': self.message
        }
        if self.error_code:
            result['error_code'] = self.error_code
        if self.details:
            result['details'] = self.details
        return result


class InvalidArgumentError(DirectoryServiceError):
    """Raised when a username or user id is missing or empty"""
    
    def __init__(self, message: str, field: str = None, value=None):
        self.field = field
        self.value = value
        
        details = {}
        if field:
            details['field'] = field
        if value is not None:
            details['value'] = repr(value)
            
        super().__init__(message, 'INVALID_ARGUMENT', details)


class EmptyCounterError(DirectoryServiceError):
    """Raised when attempt analytics are requested before any check happened"""
    
    def __init__(self, message: str = "No availability checks have been recorded"):
        super().__init__(message, 'EMPTY_COUNTER')

