from decimal import Decimal
from typing import Final

DEFAULT_INITIAL_PRODUCTION: Final[Decimal] = Decimal(0)
LOGGER_NAME: Final[str] = "prodplan"
