# =============================================================================
# core/exceptions.py  -  Registry lookup failures
# =============================================================================
#
# Two families of failure leave core/:
#
#   RegistryLookupError (and subclasses)
#     The remote lookup itself failed: the artifact is unknown, the server
#     answered with an error status, or the network gave up.  The tools
#     layer reports these back to the agent as an error RESULT.
#
#   MetadataError
#     The registry answered successfully but the document had no version
#     marker at all.  It is not a RegistryLookupError: it
#     escapes the tool and surfaces as a protocol-level failure.
# =============================================================================

from core.models import DependencyRef


class RegistryLookupError(Exception):
    """Base class for remote lookup failures reported as tool errors."""


class DependencyNotFoundError(RegistryLookupError):
    """The registry answered 404 for the artifact's metadata."""

    def __init__(self, ref: DependencyRef):
        self.ref = ref
        super().__init__(f"Dependency {ref.coordinate} not found on Clojars")


class ClojarsAPIError(RegistryLookupError):
    """Any other HTTP-layer failure: error status, connection error, timeout."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Clojars API error: {detail}")


class MetadataError(Exception):
    """A metadata document carried neither a <release> nor a <latest> value."""
