from __future__ import annotations
import sys
from mdconv.app import run_app


def main() -> int:
    """Module entrypoint for `python -m mdconv.main` or `python -m mdconv`."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
