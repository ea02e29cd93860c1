"""Allow ``python -m pinlocator``."""

from pinlocator.app import main

main()
