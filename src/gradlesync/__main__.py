"""Module entrypoint for ``python -m gradlesync``."""

from gradlesync.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
