#!/usr/bin/env python3
"""Evaluate a left-to-right money expression.

Examples:
  python apps/money_calc.py 19.99 add 5.01            -> 25.00
  python apps/money_calc.py "(1.99)" mul 3            -> -5.97
  python apps/money_calc.py --decimal , 12,50 pct 10  -> 1.25
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from fixed_money import (
    Money,
    MoneyError,
    Settings,
    add,
    divide,
    format_units,
    multiply,
    percent,
    subtract,
)


OPS = {
    "add": add,
    "sub": subtract,
    "mul": multiply,
    "div": divide,
    "pct": percent,
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fixed-precision money calculator.")
    parser.add_argument("amount", help="Starting amount, e.g. 19.99 or (1.99)")
    parser.add_argument("steps", nargs="*", help="Pairs of OP OPERAND; OP is one of: " + ", ".join(OPS))
    parser.add_argument("--precision", type=int, default=2, help="Fractional digits per unit")
    parser.add_argument("--decimal", default=".", help="Decimal marker in text input")
    parser.add_argument("--separator", default=",", help="Thousands separator for --display")
    parser.add_argument("--strict", action="store_true", help="Raise on unsupported input")
    parser.add_argument("--display", action="store_true", help="Print with separator and decimal marker")
    return parser.parse_args(argv)


def evaluate(amount: str, steps: List[str], settings: Settings) -> Money:
    if len(steps) % 2:
        raise ValueError(f"missing operand after {steps[-1]!r}")
    result = Money.from_amount(amount, settings)
    for op, operand in zip(steps[::2], steps[1::2]):
        if op not in OPS:
            raise ValueError(f"unknown operation {op!r} (choose from {', '.join(OPS)})")
        result = OPS[op](result, operand, settings)
    return result


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = Settings(
            separator=args.separator,
            decimal=args.decimal,
            error_on_invalid=args.strict,
            precision=args.precision,
        )
        result = evaluate(args.amount, args.steps, settings)
    except (MoneyError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    if args.display:
        print(result.format(settings))
    else:
        print(format_units(result.units, settings))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
