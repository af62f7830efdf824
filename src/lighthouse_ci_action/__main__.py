"""Module entry point for `python -m lighthouse_ci_action`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
