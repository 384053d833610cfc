# =============================================================================
# tools/__init__.py
# =============================================================================
# This package exposes the core/ lookups as MCP tools.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between the MCP protocol and core/:
#     1. Decodes the untyped tool-call arguments into a typed model
#        (tools/arguments.py), rejecting bad input with InvalidParams
#     2. Calls a core/ lookup
#     3. Serializes the result dataclass to indented JSON text
#     4. Turns registry lookup failures into isError tool results
#
# TWO ERROR CHANNELS:
#   Protocol errors (McpError: unknown tool, bad arguments, anything
#   unexpected) abort the call and reach the host as a JSON-RPC error.
#   Lookup failures (404, network trouble) are a SUCCESSFUL call whose
#   result has isError set.  An agent can fix its input in the first case
#   and accept the absence in the second.
# =============================================================================
