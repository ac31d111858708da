"""Module entrypoint for ``python -m ruby_clean``."""

from __future__ import annotations

import sys

from ruby_clean.standalone import main

if __name__ == "__main__":
    sys.exit(main())
