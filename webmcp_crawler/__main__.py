"""Allow ``python -m webmcp_crawler``."""

from .cli import main

main()
