# src/bond_yield/fixed_income/validation.py

import datetime as _dt
import math
import re
from typing import Any, Mapping, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# leading decimal number as JavaScript parseFloat reads it (no underscores)
_LEADING_NUMBER = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?)",
    re.IGNORECASE,
)


class BondInputs(BaseModel):
    """
    Calculator input state: what a user (or a lookup) has entered.

    Unlike BondParameters this carries a maturity date rather than a
    year fraction, plus the TDS rate used for the cash summary.
    """

    face_value: float
    market_price: float
    coupon_rate: float
    coupon_frequency: float
    maturity_date: _dt.date
    tds_rate: float = Field(default=10.0, description="TDS on coupons, percent.")


class BondQuote(BaseModel):
    """
    Bond record returned by an external search provider.

    Nothing here is trusted: every field is optional and loosely typed, and
    is only applied to BondInputs through merge_bond_quote.
    """

    model_config = ConfigDict(extra="ignore")

    isin: Optional[str] = None
    name: Optional[str] = None
    face_value: Any = Field(
        default=None, validation_alias=AliasChoices("face_value", "faceValue")
    )
    market_price: Any = Field(
        default=None, validation_alias=AliasChoices("market_price", "marketPrice")
    )
    coupon_rate: Any = Field(
        default=None, validation_alias=AliasChoices("coupon_rate", "couponRate")
    )
    coupon_frequency: Any = Field(
        default=None,
        validation_alias=AliasChoices("coupon_frequency", "couponFrequency"),
    )
    maturity_date: Any = Field(
        default=None, validation_alias=AliasChoices("maturity_date", "maturityDate")
    )

    @field_validator("isin", "name", mode="before")
    @classmethod
    def _label_or_none(cls, value: Any) -> Optional[str]:
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return None


def parse_number(value: Any, default: float) -> float:
    """
    Float value of ``value``, or ``default`` when missing or unparseable.

    Strings may carry trailing text ("9.5%" -> 9.5) as long as they start
    with a number. NaN falls back to the default; infinities are kept and
    left for the solver to reject.
    """
    if value is None or isinstance(value, bool):
        return default

    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return default
    elif isinstance(value, str):
        number = _leading_float(value)
        if number is None:
            return default
    else:
        return default

    return default if math.isnan(number) else number


def _leading_float(text: str) -> Optional[float]:
    match = _LEADING_NUMBER.match(text.strip())
    return float(match.group()) if match else None


def parse_maturity_date(value: Any) -> Optional[_dt.date]:
    """ISO ``YYYY-MM-DD`` string (or date) to a date; None if invalid."""
    if isinstance(value, _dt.datetime):
        return value.date()
    if isinstance(value, _dt.date):
        return value
    if not isinstance(value, str):
        return None
    try:
        return _dt.date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None


def merge_bond_quote(
    quote: Union[BondQuote, Mapping[str, Any], None], current: BondInputs
) -> BondInputs:
    """
    Apply an untrusted quote on top of the current inputs.

    Each field is taken from the quote when it parses, otherwise the
    current value is kept. The TDS rate is never taken from a quote.
    """
    if quote is None:
        return current

    if not isinstance(quote, BondQuote):
        quote = BondQuote.model_validate(dict(quote))

    maturity = parse_maturity_date(quote.maturity_date)

    return current.model_copy(
        update={
            "face_value": parse_number(quote.face_value, current.face_value),
            "market_price": parse_number(quote.market_price, current.market_price),
            "coupon_rate": parse_number(quote.coupon_rate, current.coupon_rate),
            "coupon_frequency": parse_number(
                quote.coupon_frequency, current.coupon_frequency
            ),
            "maturity_date": maturity or current.maturity_date,
        }
    )
