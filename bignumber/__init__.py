"""BigNumber - arbitrary-precision decimal arithmetic."""

from bignumber.config import Config, FormatSpec, configure, get_config, local_config, reset_config, set_config
from bignumber.constants import EUCLID, RoundingMode
from bignumber.errors import (
    BigNumberError,
    InvalidBase,
    InvalidDigits,
    InvalidNumber,
    NotABooleanOption,
    OutOfRangeOption,
    PrecisionLoss,
)
from bignumber.number import BigNumber

__version__ = "0.1.0"
__all__ = [
    "BigNumber",
    "BigNumberError",
    "Config",
    "EUCLID",
    "FormatSpec",
    "InvalidBase",
    "InvalidDigits",
    "InvalidNumber",
    "NotABooleanOption",
    "OutOfRangeOption",
    "PrecisionLoss",
    "RoundingMode",
    "configure",
    "get_config",
    "local_config",
    "reset_config",
    "set_config",
    "__version__",
]
