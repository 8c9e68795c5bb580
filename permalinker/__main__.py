"""Module entrypoint for running permalinker as ``python -m permalinker``."""

from __future__ import annotations

from permalinker.cli import main


if __name__ == "__main__":
    main()
