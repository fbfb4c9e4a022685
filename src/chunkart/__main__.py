"""Entry point for running chunkart as a module."""

from .ascii_cli import main

if __name__ == "__main__":
    raise SystemExit(main())
