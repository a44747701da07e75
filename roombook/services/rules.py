from typing import Any, Dict, Iterable, List, Optional

from roombook.constants import ERROR_MESSAGES, NUMERIC_STRING_REGEX, PATTERN_RULES
from roombook.exceptions import ValidatorConfigurationError
from roombook.models.validation import PatternRule, PredicateRule, Rule


def is_numeric(value: Any) -> bool:
    """Numbers and numeric strings such as ``"42"``, ``" -1.5e3"`` or ``".5"``."""
    if isinstance(value, bool):
        return False

    if isinstance(value, (int, float)):
        return True

    if isinstance(value, str):
        return NUMERIC_STRING_REGEX.fullmatch(value) is not None

    return False


def is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_float(value: Any) -> bool:
    return isinstance(value, float)


PREDICATE_RULES = {
    "numeric": is_numeric,
    "int": is_int,
    "float": is_float,
}


def build_rules(
    pattern_rules: Iterable[PatternRule], predicate_rules: Iterable[PredicateRule]
) -> Dict[str, Rule]:
    rules: Dict[str, Rule] = {}

    for rule in [*pattern_rules, *predicate_rules]:
        if rule.name in rules:
            raise ValidatorConfigurationError(
                f"Validation rule '{rule.name}' is defined more than once"
            )

        if rule.name not in ERROR_MESSAGES:
            raise ValidatorConfigurationError(
                f"Validation rule '{rule.name}' has no error message"
            )

        rules[rule.name] = rule

    return rules


RULES = build_rules(
    [PatternRule(name=name, pattern=pattern) for name, pattern in PATTERN_RULES.items()],
    [
        PredicateRule(name=name, predicate=predicate)
        for name, predicate in PREDICATE_RULES.items()
    ],
)


def get_validation_rules() -> List[Rule]:
    return list(RULES.values())


def get_validation_rule(name: str) -> Optional[Rule]:
    return RULES.get(name)


def to_number(value: Any) -> int | float | None:
    """Numeric view of ``value`` for min/max bounds, ``None`` if it has none."""
    if is_int(value) or is_float(value):
        return value

    if isinstance(value, str) and is_numeric(value):
        number = float(value)
        return int(number) if number.is_integer() else number

    return None
