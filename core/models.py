# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of every value that flows through a
# single tool call.  Nothing here outlives the call that created it.
#
# RESULT MODELS:
#   Each lookup returns one of the *Result dataclasses below.  The tools
#   layer serializes them with dataclasses.asdict(), so the field names
#   here ARE the JSON keys the agent sees.
# =============================================================================

from dataclasses import dataclass, field


# -----------------------------------------------------------------------------
# DependencyRef: a "group/artifact" coordinate
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class DependencyRef:
    """A Clojars coordinate split into its group and artifact parts."""

    group: str                         # e.g. "org.clojure" or "metosin"
    artifact: str                      # e.g. "clojure" or "reitit"

    @classmethod
    def parse(cls, dependency: str) -> "DependencyRef":
        """Split a "group/artifact" string.

        Only the first two segments are used: "a/b/c" names artifact "b".

        Raises:
            ValueError: if the string has no "/" separator.
        """
        if "/" not in dependency:
            raise ValueError(f"Dependency {dependency!r} is not in group/artifact form")
        segments = dependency.split("/")
        return cls(group=segments[0], artifact=segments[1])

    @property
    def coordinate(self) -> str:
        return f"{self.group}/{self.artifact}"

    @property
    def metadata_path(self) -> str:
        """Repository path of this artifact's maven-metadata.xml.

        Dots in the group become path separators, the Maven repository
        layout: org.clojure/clojure -> /org/clojure/clojure/maven-metadata.xml
        """
        group_path = self.group.replace(".", "/")
        return f"/{group_path}/{self.artifact}/maven-metadata.xml"


# -----------------------------------------------------------------------------
# Lookup results
# -----------------------------------------------------------------------------
@dataclass
class LatestVersionResult:
    """Output of the latest-version lookup."""

    dependency: str                    # "group/artifact"
    latest_version: str                # <release>, or <latest> when no release


@dataclass
class VersionCheckResult:
    """Output of the version-existence check."""

    dependency: str
    version: str                       # The version that was asked about
    exists: bool                       # Exact string match against <version> tags


@dataclass
class VersionHistoryResult:
    """Output of the version-history lookup, newest version first."""

    dependency: str
    recent_versions: list[str] = field(default_factory=list)
    total_versions: int = 0            # Count before truncation to the limit
