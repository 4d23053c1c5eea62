"""Module entry point for the clickoverlay CLI."""

from .main import main

if __name__ == "__main__":
    raise SystemExit(main())
