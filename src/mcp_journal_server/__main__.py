"""Module entrypoint.

Allows:
    python -m mcp_journal_server
"""

from __future__ import annotations

from mcp_journal_server.server.journal_server import main

if __name__ == "__main__":
    main()
