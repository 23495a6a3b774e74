"""
Username Directory Constants
"""


class SuggestionConstants:
    """Fallback strategies applied when a username is taken"""
    
    # Strategy 1: append a decimal suffix, inclusive range
    NUMERIC_SUFFIX_START = 1
    NUMERIC_SUFFIX_END = 5
    
    # Strategy 2: separator substitution
    UNDERSCORE = '_'
    DOT = '.'


class ReportConstants:
    """Analytics report formatting"""
    
    MOST_ATTEMPTED_FORMAT = '{username} ({count} attempts)'


class ServiceConstants:
    """Service names for logging and the service container"""
    
    USERNAME_DIRECTORY = 'username_directory'
    
    DIRECTORY_LOGGER_NAME = 'directory-service'
    
    # Entity types used in structured logs
    USERNAME = 'username'
