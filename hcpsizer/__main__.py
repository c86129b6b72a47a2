"""Allow ``python -m hcpsizer``."""

from hcpsizer.cli import main

main()
