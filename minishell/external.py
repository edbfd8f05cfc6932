"""Running programs outside the shell."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Sequence


def execute_external_command(argv: Sequence[str]) -> bool:
    """Run a program and wait for it; report success once it was waited for."""
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        subprocess.run(list(argv), check=False)
    except OSError as exc:
        print(f"{argv[0]}: {exc.strerror}", file=sys.stderr)
    return True