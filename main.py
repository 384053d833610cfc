# =============================================================================
# main.py  -  Entry Point for the Clojars dependency MCP server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#   (or the installed console script: clojars-deps-server)
#
# WHAT HAPPENS:
#   1. .env is loaded into the environment (CLOJARS_* settings)
#   2. Settings are read and logging is configured (stderr only)
#   3. The MCP server is attached to stdin/stdout (tools/mcp_server.py)
#   4. It serves tool calls one at a time until stdin closes or SIGINT
#
# EXIT STATUS:
#   0  stdin closed (transport, then HTTP client closed) or SIGINT (HTTP
#      client closed, then the process ends without waiting on stdin)
#   1  bad CLOJARS_* settings, or anything that escaped serving (logged
#      with traceback)
#
# CONNECTING AN AGENT:
#   Point any MCP host at this script with a stdio transport, e.g.
#     {"command": "uv", "args": ["run", "python", "/path/to/main.py"]}
# =============================================================================

import asyncio
import logging
import sys

from dotenv import load_dotenv

from core.config import load_settings
from tools.mcp_server import configure_logging, serve

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the Clojars MCP server on stdio."""
    load_dotenv()

    try:
        settings = load_settings()
    except ValueError:
        configure_logging()
        logger.exception("Invalid Clojars MCP server configuration")
        sys.exit(1)

    configure_logging(settings.log_level)
    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        # SIGINT before the signal receiver was installed.
        sys.exit(0)
    except Exception:
        logger.exception("Clojars MCP server failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
