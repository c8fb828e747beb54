from .exceptions import (
    AuthorizationException,
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    InvalidInputException,
    ResourceNotFoundException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
    "InvalidInputException",
    "AuthorizationException",
]
