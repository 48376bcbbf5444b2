"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _is_positive_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_fetch_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate upstream and proxy parameters."""
        errors = []

        if "quote_host" in params:
            value = params["quote_host"]
            if not isinstance(value, str) or not value.startswith(("http://", "https://")):
                errors.append(ValidationError(
                    field="quote_host",
                    message="Must be an http(s) URL",
                    value=value
                ))

        if "proxy_templates" in params:
            value = params["proxy_templates"]
            if not isinstance(value, (list, tuple)) or not value:
                errors.append(ValidationError(
                    field="proxy_templates",
                    message="Must be a non-empty list of URL templates",
                    value=value
                ))
            else:
                for template in value:
                    if not isinstance(template, str) or "{url}" not in template:
                        errors.append(ValidationError(
                            field="proxy_templates",
                            message="Each template must contain a {url} placeholder",
                            value=template
                        ))

        return errors

    @staticmethod
    def validate_window_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate normalization window parameters."""
        errors = []

        if "min_density" in params:
            value = params["min_density"]
            if not _is_positive_int(value):
                errors.append(ValidationError(
                    field="min_density",
                    message="Must be a positive integer",
                    value=value
                ))

        if "max_gap_days" in params:
            value = params["max_gap_days"]
            if not _is_positive_int(value):
                errors.append(ValidationError(
                    field="max_gap_days",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_cache_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate cache TTLs."""
        errors = []

        for name in ("series_ttl_ms", "roster_ttl_ms"):
            if name in params and not _is_positive_int(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a positive integer (milliseconds)",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_downsample_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate rendering point budget."""
        errors = []

        if "max_points" in params and not _is_positive_int(params["max_points"]):
            errors.append(ValidationError(
                field="max_points",
                message="Must be a positive integer",
                value=params["max_points"]
            ))

        return errors

    @staticmethod
    def validate_refresh_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate auto-refresh timer intervals."""
        errors = []

        for name in ("update_interval_seconds", "countdown_interval_seconds"):
            if name in params and not _is_positive_number(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a positive number",
                    value=params[name]
                ))

        if "auto_update" in params and not isinstance(params["auto_update"], bool):
            errors.append(ValidationError(
                field="auto_update",
                message="Must be a boolean",
                value=params["auto_update"]
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "fetch" in config:
            errors.extend(ConfigValidator.validate_fetch_params(config["fetch"]))

        if "window" in config:
            errors.extend(ConfigValidator.validate_window_params(config["window"]))

        if "cache" in config:
            errors.extend(ConfigValidator.validate_cache_params(config["cache"]))

        if "downsample" in config:
            errors.extend(ConfigValidator.validate_downsample_params(config["downsample"]))

        if "refresh" in config:
            errors.extend(ConfigValidator.validate_refresh_params(config["refresh"]))

        return errors
