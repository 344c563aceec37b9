"""Allow ``python -m team_api`` to start the listener."""

from .server import main

main()
