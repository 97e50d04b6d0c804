"""Allow ``python -m errorkit``."""

from errorkit.cli import main

main()
