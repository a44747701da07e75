import logging
from typing import Any, List, Optional, Sequence

from pymongo.asynchronous.database import AsyncDatabase

from roombook.constants import ERROR_MESSAGES
from roombook.exceptions import UnknownRuleError, ValidatorConfigurationError
from roombook.models.validation import CheckOptions, PredicateRule, Rule
from roombook.services.rules import RULES, to_number
from roombook.settings import settings


logger = logging.getLogger(__name__)


def is_empty(value: Any) -> bool:
    """``None``, ``False`` and zero-length values count as empty, ``0`` does not."""
    if value is None or value is False:
        return True

    try:
        return len(value) == 0
    except TypeError:
        return False


class Validator:
    """Checks form values against named rules and collects error messages.

    One instance covers one validation pass, e.g. one form submission.
    Failed checks never raise; they append a rendered message to the error
    log, which callers read once all fields are checked::

        validator = Validator(database)
        validator.check("textnum", form.name, "Name", True, max=255)
        validator.check("alphanumeric", form.room_nr, "Raumnummer", True)
        await validator.unique(form.room_nr, "Raumnummer", "rooms", "room_nr")
        if validator.has_errors():
            ...

    Only an unregistered rule name raises (``UnknownRuleError``).
    """

    def __init__(self, database: Optional[AsyncDatabase[Any]] = None):
        self.database = database
        self._errors: List[str] = []

    def check(
        self,
        rule_name: str,
        value: Any,
        label: str = settings.DEFAULT_FIELD_LABEL,
        required: bool = False,
        min: int | float | None = None,
        max: int | float | None = None,
    ) -> bool:
        rule = RULES.get(rule_name)
        if rule is None:
            logger.error("Validation rule '%s' is not registered", rule_name)
            raise UnknownRuleError(rule_name)

        options = CheckOptions(label=label, required=required, min=min, max=max)
        return self.check_rule(rule, value, options)

    def check_rule(self, rule: Rule, value: Any, options: CheckOptions) -> bool:
        errors_before = len(self._errors)

        if options.required and is_empty(value):
            self._add_error("required", options.label)
            return False

        if not options.required and is_empty(value):
            return True

        self._validate_min(rule, value, options)
        self._validate_max(rule, value, options)

        if not rule.matches(value):
            self._add_error(rule.name, options.label)

        return len(self._errors) == errors_before

    def compare(
        self, value_and_label1: Sequence[Any], value_and_label2: Sequence[Any]
    ) -> bool:
        value1, label1 = value_and_label1
        value2, label2 = value_and_label2

        # no coercion: "1" and 1 differ
        if type(value1) is not type(value2) or value1 != value2:
            self._add_error("compare", label1, label2)
            return False

        return True

    async def unique(self, value: Any, label: str, table: str, column: str) -> bool:
        if self.database is None:
            raise ValidatorConfigurationError(
                "unique() needs a validator created with a database"
            )

        count = await self.database[table].count_documents({column: value}, limit=1)
        if count >= 1:
            self._add_error("unique", label)
            return False

        return True

    def has_errors(self) -> bool:
        return bool(self._errors)

    def get_errors(self) -> List[str]:
        return list(self._errors)

    def _validate_min(self, rule: Rule, value: Any, options: CheckOptions) -> None:
        if options.min is None:
            return

        if isinstance(rule, PredicateRule):
            number = to_number(value)
            if number is not None and number < options.min:
                self._add_error("min", options.label, _format_bound(options.min))
        elif len(str(value)) < options.min:
            self._add_error("min-string", options.label, _format_bound(options.min))

    def _validate_max(self, rule: Rule, value: Any, options: CheckOptions) -> None:
        if options.max is None:
            return

        if isinstance(rule, PredicateRule):
            number = to_number(value)
            if number is not None and number > options.max:
                self._add_error("max", options.label, _format_bound(options.max))
        elif len(str(value)) > options.max:
            self._add_error("max-string", options.label, _format_bound(options.max))

    def _add_error(self, message_name: str, *args: Any) -> None:
        self._errors.append(ERROR_MESSAGES[message_name] % args)


def _format_bound(bound: int | float) -> str:
    return str(int(bound)) if float(bound).is_integer() else str(bound)
