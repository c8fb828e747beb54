from .entity import AggregateRoot, Entity
from .enum import Role
from .exception import (
    AuthorizationException,
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    InvalidInputException,
    ResourceNotFoundException,
)
from .repository import Repository
from .value_object import Caller, Currency, Money, UserId

__all__ = [
    "Entity",
    "AggregateRoot",
    "Repository",
    "Role",
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
    "InvalidInputException",
    "AuthorizationException",
    "UserId",
    "Caller",
    "Currency",
    "Money",
]
