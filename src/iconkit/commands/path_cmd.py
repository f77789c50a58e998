"""Print optimized path data for each argument."""

from __future__ import annotations

from argparse import Namespace

from iconkit.svg.path import optimize_path


def run(args: Namespace) -> None:
    """Run the path command."""
    for data in getattr(args, "data", []):
        print(optimize_path(data))
