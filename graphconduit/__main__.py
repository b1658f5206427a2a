"""Allow ``python -m graphconduit``."""

from .cli import main

main()
