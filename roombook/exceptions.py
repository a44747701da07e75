import logging
import traceback
from typing import List

from fastapi import Request, Response
from fastapi.responses import PlainTextResponse


logger = logging.getLogger(__name__)


class ValidatorConfigurationError(Exception):
    """Raised when the validator is used with a rule setup that can never work."""


class UnknownRuleError(ValidatorConfigurationError):
    def __init__(self, rule_name: str):
        self.rule_name = rule_name
        super().__init__(f"Unknown validation rule: {rule_name}")


class ValidationErrorsException(Exception):
    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__(errors)


def _short_traceback(exc: Exception) -> str:
    tb_lines = traceback.format_exception(type(exc), exc, exc.__traceback__)
    filtered_lines = [line for line in tb_lines if "roombook" in line]
    return "".join(filtered_lines) or tb_lines[-1]


async def validator_configuration_exception_handler(
    request: Request, exc: Exception
) -> Response:
    logger.error(
        "Validator misconfigured on %s %s: %s\n%s",
        request.method,
        request.url.path,
        exc,
        _short_traceback(exc),
    )
    return PlainTextResponse("Internal Server Error", status_code=500)


async def exception_handler(request: Request, exc: Exception) -> Response:
    logger.error(
        "Unhandled error on %s %s: %s\n%s",
        request.method,
        request.url.path,
        exc,
        _short_traceback(exc),
    )
    return PlainTextResponse("Internal Server Error", status_code=500)
