"""Configuration validation utilities."""

from collections.abc import Mapping
from typing import Any

from aws_lambda_powertools import Logger
from pydantic import ValidationError

from dynpaginate.models.config import PaginationConfig
from dynpaginate.models.errors import ConfigError
from dynpaginate.utils.constants import SERVICE_NAME

logger = Logger(service=SERVICE_NAME, UTC=True)


def sanitize_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Sanitize Pydantic validation errors for ConfigError details.

    Removes internal fields like:
    - url
    - ctx
    - input (may hold the caller's callback or other arbitrary objects)
    """
    sanitized: list[dict[str, str]] = []

    for err in errors:
        field = ".".join(str(x) for x in err.get("loc", [])) or "config"
        raw_msg = err.get("msg", "Invalid value")
        err_type = err.get("type", "")

        msg = raw_msg.replace("Value error,", "").strip()

        # Friendly rewrites for common cases
        if err_type == "missing":
            msg = "This field is required"
        elif err_type == "extra_forbidden":
            msg = "Unknown option"
        elif err_type == "callable_type":
            msg = "Must be callable"
        elif err_type in ("int_type", "int_parsing"):
            msg = "Must be an integer"
        elif err_type == "greater_than_equal":
            msg = "Must be a non-negative integer"

        sanitized.append(
            {
                "field": field,
                "message": msg,
            }
        )

    return sanitized


def _option_key(key: str) -> str:
    """Map a field name to the plugin's option name so both spellings collide."""
    field = PaginationConfig.model_fields.get(key)
    if field is not None and field.alias:
        return field.alias
    return key


def build_config(
    options: Mapping[str, Any] | None = None,
    **overrides: Any,
) -> PaginationConfig:
    """Merge options over the defaults and validate them.

    Args:
        options: Option mapping, using snake_case or the plugin's camelCase keys
        **overrides: Individual options that take precedence over ``options``

    Returns:
        The validated, immutable configuration

    Raises:
        ConfigError: If any option is missing, unknown or of the wrong type
    """
    data: dict[str, Any] = {}
    for key, value in [*(options or {}).items(), *overrides.items()]:
        data[_option_key(key)] = value

    try:
        return PaginationConfig.model_validate(data)

    except ValidationError as exc:
        sanitized_errors = sanitize_validation_errors(exc.errors())
        logger.warning(
            "Rejected pagination configuration",
            extra={"errors": sanitized_errors},
        )
        fields = ", ".join(err["field"] for err in sanitized_errors)
        raise ConfigError(
            message=f"Invalid pagination configuration: {fields}",
            details={"errors": sanitized_errors},
        ) from exc
