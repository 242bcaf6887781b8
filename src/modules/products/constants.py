"""Product catalog limits.

Shared by the model (database constraints), the input DTOs (boundary
validation) and the list endpoint (pagination bounds).
"""

from decimal import Decimal

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100

BRAND_MIN_LENGTH = 1
BRAND_MAX_LENGTH = 100

PRICE_MIN = Decimal("1")
PRICE_MAX = Decimal("1000")
PRICE_DECIMAL_PLACES = 2
PRICE_MAX_DIGITS = 6

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 5
MAX_PAGE_SIZE = 50
