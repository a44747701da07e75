from re import Pattern
from typing import Any, Callable, Literal, Union
from pydantic import BaseModel, ConfigDict

from roombook.enums import RuleKind
from roombook.settings import settings


class PatternRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[RuleKind.PATTERN] = RuleKind.PATTERN
    name: str
    pattern: Pattern[str]

    def matches(self, value: Any) -> bool:
        return self.pattern.fullmatch(str(value)) is not None


class PredicateRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[RuleKind.PREDICATE] = RuleKind.PREDICATE
    name: str
    predicate: Callable[[Any], bool]

    def matches(self, value: Any) -> bool:
        return bool(self.predicate(value))


Rule = Union[PatternRule, PredicateRule]


class CheckOptions(BaseModel):
    """Optional arguments of a single rule check.

    ``label`` names the field in error messages, ``required`` rejects empty
    values, ``min``/``max`` bound the value for predicate rules and the
    length for pattern rules.
    """

    model_config = ConfigDict(frozen=True)

    label: str = settings.DEFAULT_FIELD_LABEL
    required: bool = False
    min: int | float | None = None
    max: int | float | None = None
