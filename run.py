#!/usr/bin/env python3
"""
Print a coalition report for a governing body.

Usage:
    python run.py                                  # List bodies
    python run.py BODY_ID                          # Rules for an empty selection
    python run.py BODY_ID --select a,b             # Rules for a selection
    python run.py BODY_ID --select a --rule RULE   # Also suggest coalitions
    python run.py BODY_ID --period 2021-2025       # Pick a period
    python run.py BODY_ID --verbose                # Debug logging on stderr
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from app.container import container
from settings.logging import setup_logging
from web.api.coalition import get_bodies, get_suggestions, get_summary
from web.api.errors import NotFoundError, ValidationError


def _option(args: list[str], name: str) -> str | None:
    if name in args:
        i = args.index(name)
        if i + 1 < len(args):
            return args[i + 1]
    return None


def print_bodies():
    for b in get_bodies().items:
        period = f" [{b.period}]" if b.period else ""
        print(f"{b.id}{period}: {b.name} - {b.groups} groups, {b.rules} rules")


def print_report(body_id: str, selected: list[str], rule_id: str | None, period: str | None):
    summary = get_summary(body_id, selected, period)
    print(summary.headline)
    print("Rules:")
    if not summary.rules:
        print("  No rules defined for this governing body.")
    for r in summary.rules:
        marker = " *" if rule_id and r.id == rule_id else ""
        print(f"  {r.symbol} {r.name}{marker}")

    if rule_id is None:
        return

    suggestions = get_suggestions(body_id, selected, rule_id, period)
    print(f"\nSuggested coalitions ({suggestions.rule_id}, {suggestions.metric} vs {suggestions.threshold}):")
    if not suggestions.items:
        print("  none")
    for c in suggestions.items:
        print(f"  {' + '.join(c.labels)} = {c.total}")
    if suggestions.truncated:
        print("  (search truncated)")


def main():
    args = sys.argv[1:]
    verbose = "--verbose" in args
    args = [a for a in args if a != "--verbose"]
    setup_logging("run", level="DEBUG" if verbose else "WARNING")
    container.init()

    if not args or args[0].startswith("-"):
        print_bodies()
        return

    select = _option(args, "--select")
    selected = [s for s in select.split(",") if s] if select else []

    try:
        print_report(args[0], selected, _option(args, "--rule"), _option(args, "--period"))
    except (NotFoundError, ValidationError) as e:
        print(e.message)
        sys.exit(1)


if __name__ == "__main__":
    main()
