"""
Username Directory Validation Utilities
"""
from typing import Any, Dict, List

from .exceptions import InvalidArgumentError


def validate_required_fields(data: Dict[str, Any], required_fields: List[str]) -> List[str]:
    """
    Validate that all required fields are present and non-empty.
    
    Args:
        data: Mapping of field name to value
        required_fields: List of required field names
        
    Returns:
        List of missing field names (empty if all fields are present)
    """
    if not isinstance(data, dict):
        return required_fields
    
    missing_fields = []
    for field in required_fields:
        if field not in data or data[field] is None or data[field] == "":
            missing_fields.append(field)
    
    return missing_fields


def require_identifier(value: Any, field: str) -> str:
    """
    Ensure an identifier is a non-empty string and return it unchanged.
    
    Identifiers are used verbatim: no case folding or whitespace stripping.
    
    Raises:
        InvalidArgumentError: If the value is missing, not a string, or empty
    """
    if value is None:
        raise InvalidArgumentError(f"{field} is required", field=field)
    
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"{field} must be a string, got {type(value).__name__}",
            field=field,
            value=value
        )
    
    if value == "":
        raise InvalidArgumentError(f"{field} cannot be empty", field=field, value=value)
    
    return value


def require_identifiers(**identifiers: Any) -> None:
    """
    Validate several identifiers at once, reporting every missing one.
    
    Raises:
        InvalidArgumentError: Listing all missing fields, or the first
            non-string field
    """
    missing_fields = validate_required_fields(identifiers, list(identifiers))
    if missing_fields:
        raise InvalidArgumentError(
            f"Missing required fields: {', '.join(missing_fields)}",
            field=missing_fields[0]
        )
    
    for field, value in identifiers.items():
        require_identifier(value, field)
