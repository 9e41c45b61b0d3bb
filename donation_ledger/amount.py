from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext

from .errors import InvalidAmount
from .settings import NEAR_NOMINATION_EXP, YOCTO_PER_NEAR


class Amount(int):
    """A non-negative quantity of yoctoNEAR.

    Arithmetic between amounts stays within `Amount`; a subtraction that
    would go below zero raises `InvalidAmount` rather than wrapping.
    """

    def __new__(cls, value=0):
        if isinstance(value, str):
            value = value.strip()
            if not value.isdecimal():
                raise InvalidAmount(f"{value!r} is not a whole number of yoctoNEAR")
        elif isinstance(value, float):
            raise InvalidAmount("Amounts must be integers, not floats")
        value = int(value)
        if value < 0:
            raise InvalidAmount(f"Amounts cannot be negative (got {value})")
        return super().__new__(cls, value)

    def __add__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return Amount(int(self) + int(other))

    __radd__ = __add__

    def __sub__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return Amount(int(self) - int(other))

    def __rsub__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return Amount(int(other) - int(self))

    def __floordiv__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return Amount(int(self) // int(other))

    def __repr__(self):
        return f"Amount({int(self)})"

    def __str__(self):
        return str(int(self))


ZERO = Amount(0)


def format_near(amount, frac_digits=None):
    """Render a yoctoNEAR `amount` as NEAR, e.g. 1500000000000000000000000 -> "1.5".

    With `frac_digits` the value is rounded half-up to that many decimal places.
    The integer part is grouped with commas and trailing zeros are dropped.
    """

    if frac_digits is None or frac_digits > NEAR_NOMINATION_EXP:
        frac_digits = NEAR_NOMINATION_EXP
    with localcontext() as ctx:
        ctx.prec = len(str(int(amount))) + NEAR_NOMINATION_EXP + 2
        value = Decimal(int(amount)) / YOCTO_PER_NEAR
        value = value.quantize(
            Decimal(1).scaleb(-frac_digits), rounding=ROUND_HALF_UP
        )

    whole, _, fraction = f"{value:f}".partition(".")
    whole = f"{int(whole):,}"
    fraction = fraction.rstrip("0")
    if fraction:
        return f"{whole}.{fraction}"
    return whole


def parse_near(text):
    """Convert a human NEAR amount such as "1.25" or "1,000" to an `Amount` in yoctoNEAR."""

    cleaned = str(text).strip().replace(",", "")
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        raise InvalidAmount(f"Couldn't understand {text!r} as an amount of NEAR")

    if not value.is_finite():
        raise InvalidAmount(f"{text!r} is not a finite amount of NEAR")

    with localcontext() as ctx:
        ctx.prec = len(cleaned) + NEAR_NOMINATION_EXP + 2
        yocto = value * YOCTO_PER_NEAR
    if yocto != yocto.to_integral_value():
        raise InvalidAmount(
            f"{text!r} has more than {NEAR_NOMINATION_EXP} decimal places"
        )
    return Amount(int(yocto))
