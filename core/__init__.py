# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL registry logic for the Clojars dependency server.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports the MCP SDK or knows about tool calls.
#   It parses dependency coordinates, fetches maven-metadata.xml over HTTP
#   and extracts version data from it.  The tools/ package is the only place
#   where those results are turned into protocol responses.
# =============================================================================
