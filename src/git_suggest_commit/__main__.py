"""Allow running as ``python -m git_suggest_commit``."""

from .cli import main

main()
