"""Configuration for the BigNumber engine.

The active configuration is an immutable ``Config`` held in a context
variable, so changes made with ``configure()`` only affect the current
thread or task, and ``local_config()`` scopes them to a ``with`` block.
Engine functions receive the configuration as an explicit argument.

Usage:
    from bignumber.config import configure, local_config

    configure(decimal_places=10, rounding_mode=RoundingMode.HALF_EVEN)

    with local_config(EXPONENTIAL_AT=(-3, 3)):
        ...
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Annotated, Any

import structlog
from pydantic import BaseModel, BeforeValidator, Field, StrictBool, ValidationError, field_validator

from bignumber.constants import MAX, RoundingMode
from bignumber.errors import BigNumberError, NotABooleanOption, OutOfRangeOption

logger = structlog.get_logger()


def _binary_digit(value: Any) -> Any:
    """Accept 0 and 1 wherever a boolean option is expected."""
    if type(value) is int and value in (0, 1):
        return bool(value)
    return value


def _symmetric_bounds(value: Any) -> Any:
    """Expand a single number n into the pair (-|n|, |n|)."""
    if isinstance(value, int) and not isinstance(value, bool):
        return (-abs(value), abs(value))
    return value


BinaryFlag = Annotated[StrictBool, BeforeValidator(_binary_digit)]
Bounds = Annotated[tuple[int, int], BeforeValidator(_symmetric_bounds)]


class FormatSpec(BaseModel):
    """Separators and group sizes used by ``BigNumber.to_format()``."""

    model_config = {"frozen": True, "populate_by_name": True}

    decimal_separator: str = Field(default=".", alias="decimalSeparator")
    group_separator: str = Field(default=",", alias="groupSeparator")
    group_size: int = Field(default=3, ge=0, alias="groupSize")
    secondary_group_size: int = Field(default=0, ge=0, alias="secondaryGroupSize")
    fraction_group_separator: str = Field(default="\xa0", alias="fractionGroupSeparator")
    fraction_group_size: int = Field(default=0, ge=0, alias="fractionGroupSize")


class Config(BaseModel):
    """Engine settings.

    Attributes:
        decimal_places: Decimal places of division, sqrt and non-decimal base
            conversion results (0 to 1e9, default 20)
        rounding_mode: Default rounding mode (0 to 8, default HALF_UP)
        exponential_at: (neg, pos) exponents at and beyond which to_string()
            uses exponential notation (default (-7, 20))
        range: (min_exp, max_exp) exponent limits; values beyond them become
            Zero or Infinity (default (-1e7, 1e7))
        errors: Raise on invalid input instead of producing NaN or ignoring it
        crypto: Use the secrets module for BigNumber.random()
        modulo_mode: Rounding mode of the quotient in mod(), 9 for Euclidean
        pow_precision: Significant digits kept by pow(); 0 means unlimited
        format: Separators and group sizes for to_format()
    """

    model_config = {"frozen": True, "populate_by_name": True}

    decimal_places: int = Field(default=20, ge=0, le=MAX, alias="DECIMAL_PLACES")
    rounding_mode: int = Field(
        default=int(RoundingMode.HALF_UP), ge=0, le=8, alias="ROUNDING_MODE"
    )
    exponential_at: Bounds = Field(default=(-7, 20), alias="EXPONENTIAL_AT")
    range: Bounds = Field(default=(-(10**7), 10**7), alias="RANGE")
    errors: BinaryFlag = Field(default=True, alias="ERRORS")
    crypto: BinaryFlag = Field(default=False, alias="CRYPTO")
    modulo_mode: int = Field(default=int(RoundingMode.DOWN), ge=0, le=9, alias="MODULO_MODE")
    pow_precision: int = Field(default=100, ge=0, le=MAX, alias="POW_PRECISION")
    format: FormatSpec = Field(default_factory=FormatSpec, alias="FORMAT")

    @field_validator("exponential_at")
    @classmethod
    def _check_exponential_at(cls, value: tuple[int, int]) -> tuple[int, int]:
        neg, pos = value
        if not (-MAX <= neg <= 0 and 0 <= pos <= MAX):
            raise ValueError(f"exponential_at bounds out of range: {value}")
        return value

    @field_validator("range")
    @classmethod
    def _check_range(cls, value: tuple[int, int]) -> tuple[int, int]:
        min_exp, max_exp = value
        if not (-MAX <= min_exp <= -1 and 1 <= max_exp <= MAX):
            raise ValueError(f"range bounds out of range: {value}")
        return value

    @property
    def exp_neg(self) -> int:
        return self.exponential_at[0]

    @property
    def exp_pos(self) -> int:
        return self.exponential_at[1]

    @property
    def min_exp(self) -> int:
        return self.range[0]

    @property
    def max_exp(self) -> int:
        return self.range[1]

    def updated(self, **options: Any) -> Config:
        """Return a copy with the given options applied.

        Options may be given by field name or by upper-case alias. Each option
        is validated on its own. An invalid option raises OutOfRangeOption or
        NotABooleanOption when errors are enabled (taking a valid ``errors``
        option in the same call into account); otherwise it is logged and the
        previous value is kept.

        Raises:
            TypeError: If an option name is unknown
        """
        named = {_field_name(key): value for key, value in options.items()}
        raise_errors = self.errors
        if "errors" in named:
            flag = _binary_digit(named["errors"])
            if isinstance(flag, bool):
                raise_errors = flag

        values = self.model_dump()
        for name, value in named.items():
            try:
                validated = Config.model_validate({**values, name: value})
            except ValidationError as exc:
                error = _option_error(name, value, exc)
                if raise_errors:
                    raise error from exc
                logger.warning("config_option_ignored", option=name, value=repr(value))
                continue
            values = validated.model_dump()

        return Config.model_validate(values)


_ALIASES = {
    field.alias: name for name, field in Config.model_fields.items() if field.alias is not None
}


def _field_name(key: str) -> str:
    if key in Config.model_fields:
        return key
    if key in _ALIASES:
        return _ALIASES[key]
    raise TypeError(f"config() unknown option: {key!r}")


def _option_error(name: str, value: Any, exc: ValidationError) -> BigNumberError:
    """Map a pydantic validation failure onto the engine's error types."""
    alias = Config.model_fields[name].alias or name
    error_type = exc.errors()[0]["type"]
    if error_type.startswith("bool"):
        return NotABooleanOption("config()", f"{alias} not a boolean or binary digit", value)
    if error_type in ("int_from_float", "int_parsing"):
        return OutOfRangeOption("config()", f"{alias} not an integer", value)
    if error_type in ("model_type", "model_attributes_type"):
        return OutOfRangeOption("config()", f"{alias} not an object", value)
    return OutOfRangeOption("config()", f"{alias} out of range", value)


# =============================================================================
# Active configuration
# =============================================================================

DEFAULT_CONFIG = Config()

_current_config: ContextVar[Config] = ContextVar("bignumber_config", default=DEFAULT_CONFIG)


def get_config() -> Config:
    """Return the configuration active in the current context."""
    return _current_config.get()


def set_config(config: Config) -> None:
    """Replace the configuration active in the current context."""
    _current_config.set(config)


def configure(**options: Any) -> Config:
    """Apply options to the active configuration and return the result.

    Example:
        configure(DECIMAL_PLACES=5, ROUNDING_MODE=RoundingMode.HALF_EVEN)
    """
    config = get_config().updated(**options)
    _current_config.set(config)
    logger.debug("config_updated", options=sorted(options))
    return config


def reset_config() -> None:
    """Restore the default configuration in the current context."""
    _current_config.set(DEFAULT_CONFIG)


@contextmanager
def local_config(config: Config | None = None, **options: Any) -> Iterator[Config]:
    """Use a configuration for the duration of a ``with`` block.

    Args:
        config: Base configuration (defaults to the active one)
        **options: Options applied on top of the base configuration
    """
    base = config if config is not None else get_config()
    token = _current_config.set(base.updated(**options) if options else base)
    try:
        yield _current_config.get()
    finally:
        _current_config.reset(token)


__all__ = [
    "Config",
    "FormatSpec",
    "DEFAULT_CONFIG",
    "get_config",
    "set_config",
    "configure",
    "reset_config",
    "local_config",
]
