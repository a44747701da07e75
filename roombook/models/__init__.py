from .timestamps import SoftDeleteMixin, TimestampMixin
from .room import Room
from .user import User
from .validation import CheckOptions, PatternRule, PredicateRule, Rule


__all__ = [
    "TimestampMixin",
    "SoftDeleteMixin",
    "Room",
    "User",
    "CheckOptions",
    "PatternRule",
    "PredicateRule",
    "Rule",
]
