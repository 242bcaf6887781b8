"""Product DTOs and boundary validation.

Framework-agnostic data transfer objects using Pydantic v2.  These are the
contracts between the API layer (Views) and the Service layer.  DTOs are
immutable (``frozen=True``).

- ``ProductInputDTO``: name, brand and price for insert / full update.
- ``PriceInputDTO``: a single price for the price-only update.
- ``PageQueryDTO``: page number and page size for listing.

The ``validate_*`` functions are the entry points used by the Views: they
never raise, and instead return the DTO (or ``None``) together with one
``FieldViolation`` per broken rule.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from modules.products.constants import (
    BRAND_MAX_LENGTH,
    BRAND_MIN_LENGTH,
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX,
    PRICE_MIN,
)

DTO = TypeVar("DTO", bound=BaseModel)

# ---------------------------------------------------------------------------
# Violations
# ---------------------------------------------------------------------------

REQUIRED = "required"
LENGTH = "length"
RANGE = "range"
INVALID = "invalid"

_CODES_BY_PYDANTIC_TYPE = {
    "missing": REQUIRED,
    "string_too_short": LENGTH,
    "string_too_long": LENGTH,
    "greater_than_equal": RANGE,
    "less_than_equal": RANGE,
}

_RULE_MESSAGES = {
    ("name", LENGTH): (
        f"Product name must be between {NAME_MIN_LENGTH} and "
        f"{NAME_MAX_LENGTH} characters."
    ),
    ("brand", LENGTH): (
        f"Brand must be between {BRAND_MIN_LENGTH} and "
        f"{BRAND_MAX_LENGTH} characters."
    ),
    ("price", RANGE): f"Price must be between {PRICE_MIN} and {PRICE_MAX}.",
    ("page", RANGE): "Page must be 1 or greater.",
    ("page_size", RANGE): f"Page size must be between 1 and {MAX_PAGE_SIZE}.",
}

_TYPE_MESSAGES = {
    "decimal_max_places": (
        f"Price must have at most {PRICE_DECIMAL_PLACES} decimal places."
    ),
}


@dataclass(frozen=True)
class FieldViolation:
    """One broken validation rule on one input field."""

    field: Optional[str]
    code: str
    detail: str

    def as_error(self) -> Dict[str, Any]:
        return {"code": self.code, "detail": self.detail, "attr": self.field}


def _input_keys(dto_class: Type[BaseModel]) -> Dict[str, str]:
    """Map every accepted input key (field name or alias) to its field name."""
    keys = {}
    for name, field in dto_class.model_fields.items():
        keys[name] = name
        if isinstance(field.validation_alias, AliasChoices):
            for choice in field.validation_alias.choices:
                if isinstance(choice, str):
                    keys[choice] = name
    return keys


def _violations_from(exc: ValidationError, keys: Dict[str, str]) -> List[FieldViolation]:
    violations = []
    for error in exc.errors():
        field = keys.get(str(error["loc"][0])) if error["loc"] else None
        code = _CODES_BY_PYDANTIC_TYPE.get(error["type"], INVALID)
        if code == REQUIRED:
            detail = f"The field '{field}' is required."
        elif error["type"] in _TYPE_MESSAGES:
            detail = _TYPE_MESSAGES[error["type"]]
        else:
            detail = _RULE_MESSAGES.get((field, code), error["msg"])
        violations.append(FieldViolation(field=field, code=code, detail=detail))
    return violations


def _validate(
    dto_class: Type[DTO], data: Any
) -> Tuple[Optional[DTO], List[FieldViolation]]:
    if not isinstance(data, Mapping):
        return None, [FieldViolation(None, INVALID, "Expected an object.")]
    keys = _input_keys(dto_class)
    payload = {key: data.get(key) for key in keys if key in data}
    try:
        return dto_class.model_validate(payload), []
    except ValidationError as exc:
        return None, _violations_from(exc, keys)


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class ProductInputDTO(BaseModel):
    """Immutable DTO for insert and full-update requests.

    Surrounding whitespace is stripped before the length rules apply.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    brand: str = Field(min_length=BRAND_MIN_LENGTH, max_length=BRAND_MAX_LENGTH)
    price: Decimal = Field(ge=PRICE_MIN, le=PRICE_MAX, decimal_places=PRICE_DECIMAL_PLACES)


class PriceInputDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    price: Decimal = Field(ge=PRICE_MIN, le=PRICE_MAX, decimal_places=PRICE_DECIMAL_PLACES)


class PageQueryDTO(BaseModel):
    """Pagination window for the product listing (``page`` is 1-based).

    The page size is accepted as ``page_size`` or ``pageSize``.
    """

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=DEFAULT_PAGE, ge=1)
    page_size: int = Field(
        default=DEFAULT_PAGE_SIZE,
        ge=1,
        le=MAX_PAGE_SIZE,
        validation_alias=AliasChoices("page_size", "pageSize"),
    )


# ---------------------------------------------------------------------------
# Validation entry points
# ---------------------------------------------------------------------------


def validate_product_input(
    data: Any,
) -> Tuple[Optional[ProductInputDTO], List[FieldViolation]]:
    return _validate(ProductInputDTO, data)


def validate_price(value: Any) -> Tuple[Optional[Decimal], List[FieldViolation]]:
    dto, violations = _validate(PriceInputDTO, {"price": value})
    return (dto.price if dto else None), violations


def validate_page_query(
    params: Mapping[str, Any],
) -> Tuple[Optional[PageQueryDTO], List[FieldViolation]]:
    return _validate(PageQueryDTO, params)
