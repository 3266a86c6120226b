#!/usr/bin/env python3
"""
cli.py
Command-line calculator for finite field elements: fieldcalc LHS OP RHS --order P
"""

import argparse
import sys

from config import load_config, DEFAULT_CONFIG, POW_STRATEGIES
from finite_field import FieldElement
from utils import parse_log_level, setup_basic_logger

OPERATORS = ("+", "-", "*", "/", "**")


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Evaluate a single finite field operation."
    )
    p.add_argument("lhs", type=int, help="Left operand (number of the first element).")
    p.add_argument("op", choices=OPERATORS, help="Operator. For ** the right operand is a raw exponent.")
    p.add_argument("rhs", type=int, help="Right operand (number of the second element, or exponent).")
    p.add_argument(
        "--order",
        "-p",
        type=int,
        default=None,
        help="Field order. Default: default_order from config.",
    )
    p.add_argument(
        "--config",
        "-c",
        default=None,
        help="Optional JSON config file to override defaults.",
    )
    p.add_argument(
        "--strategy",
        choices=POW_STRATEGIES,
        default=None,
        help="Exponentiation strategy. Default: pow_strategy from config.",
    )
    p.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    return p


def evaluate(lhs: int, op: str, rhs: int, order: int, strategy: str = None) -> FieldElement:
    a = FieldElement(lhs, order)
    if op == "**":
        return a.pow(rhs, strategy=strategy)
    b = FieldElement(rhs, order)
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        return a * b.pow(-1, strategy=strategy)
    raise ValueError(f"unsupported operator: {op}")


def _fail(e: Exception) -> None:
    print(f"ERROR: {type(e).__name__}: {e}", file=sys.stderr)
    sys.exit(2)


def main(argv=None):
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    cfg = DEFAULT_CONFIG.copy()
    try:
        if args.config:
            cfg = load_config(args.config, base=cfg)
        level = parse_log_level("DEBUG" if args.verbose else cfg.get("log_level", "INFO"))
    except (OSError, ValueError) as e:
        _fail(e)

    log = setup_basic_logger("fieldcalc", level=level)
    # library modules log through their own module loggers
    setup_basic_logger("finite_field", level=level)

    order = args.order if args.order is not None else cfg["default_order"]
    strategy = args.strategy or cfg.get("pow_strategy")
    log.debug("evaluating %s %s %s in GF(%s) with %s pow", args.lhs, args.op, args.rhs, order, strategy)

    try:
        result = evaluate(args.lhs, args.op, args.rhs, order, strategy=strategy)
    except (ValueError, ZeroDivisionError) as e:
        # FieldElementError is a ValueError; order 0 surfaces as ZeroDivisionError
        _fail(e)

    print(repr(result))
    return result


if __name__ == "__main__":
    main()
