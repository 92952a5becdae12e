"""Celsius and Fahrenheit temperatures and conversions between them."""

from __future__ import annotations

import math
import sys
from decimal import Decimal


def _format_g(value: float) -> str:
    """Format ``value`` with the shortest digits, switching to exponent form outside [1e-4, 1e6)."""
    x = float(value)
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    sign = "-" if math.copysign(1.0, x) < 0 else ""
    x = abs(x)
    if x == 0:
        return sign + "0"
    _, digit_tuple, exponent = Decimal(repr(x)).as_tuple()
    all_digits = "".join(map(str, digit_tuple))
    digits = all_digits.rstrip("0")
    exponent += len(all_digits) - len(digits)
    nd = len(digits)
    dp = nd + exponent
    exp = dp - 1
    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if nd > 1 else "")
        return f"{sign}{mantissa}e{'-' if exp < 0 else '+'}{abs(exp):02d}"
    if dp <= 0:
        body = "0." + "0" * -dp + digits
    elif dp >= nd:
        body = digits + "0" * (dp - nd)
    else:
        body = digits[:dp] + "." + digits[dp:]
    return sign + body


class Celsius(float):
    """A temperature in degrees Celsius."""

    def __str__(self) -> str:
        return f"{_format_g(self)}°C"

    def __format__(self, spec: str) -> str:
        return str(self) if not spec else float.__format__(self, spec)


class Fahrenheit(float):
    """A temperature in degrees Fahrenheit."""

    def __str__(self) -> str:
        return f"{_format_g(self)}°F"

    def __format__(self, spec: str) -> str:
        return str(self) if not spec else float.__format__(self, spec)


ABSOLUTE_ZERO_C = Celsius(-273.15)
FREEZING_C = Celsius(0)
BOILING_C = Celsius(100)


def c_to_f(c: float) -> Fahrenheit:
    """Convert a Celsius temperature to Fahrenheit."""
    return Fahrenheit(c * 9 / 5 + 32)


def f_to_c(f: float) -> Celsius:
    """Convert a Fahrenheit temperature to Celsius."""
    return Celsius((f - 32) * 5 / 9)


def boiling_report() -> str:
    """Describe the boiling point of water in both scales."""
    f = Fahrenheit(212.0)
    return f"boiling point = {_format_g(f)}°F or {_format_g(f_to_c(f))}°C"


def main(argv: list[str] | None = None) -> int:
    """Convert each numeric argument both ways between the scales."""
    args = sys.argv[1:] if argv is None else list(argv)
    for arg in args:
        try:
            t = float(arg)
        except ValueError:
            print(f'cf: strconv.ParseFloat: parsing "{arg}": invalid syntax', file=sys.stderr)
            return 1
        f, c = Fahrenheit(t), Celsius(t)
        print(f"{f} = {f_to_c(f)}, {c} = {c_to_f(c)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())