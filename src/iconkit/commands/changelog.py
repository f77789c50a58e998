"""Print changelog text for new, fixed and renamed icons."""

from __future__ import annotations

import sys
from argparse import Namespace

from iconkit.changelog import print_changelog


def run(args: Namespace) -> None:
    """Run the changelog command."""
    print_changelog(
        getattr(args, "new", []) or [],
        getattr(args, "modified", []) or [],
        getattr(args, "renamed", []) or [],
        pretty=getattr(args, "pretty", False),
        file=sys.stdout,
    )
