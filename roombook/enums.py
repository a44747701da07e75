from enum import Enum


class RuleKind(str, Enum):
    PATTERN = "pattern"
    PREDICATE = "predicate"


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"
