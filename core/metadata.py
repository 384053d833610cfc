# =============================================================================
# core/metadata.py  -  maven-metadata.xml text extraction
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Pulls version values out of the raw maven-metadata.xml body that the
#   registry returns for an artifact.  A typical document looks like:
#
#     <metadata>
#       <groupId>metosin</groupId>
#       <artifactId>reitit</artifactId>
#       <versioning>
#         <release>0.7.2</release>
#         <latest>0.8.0-alpha1</latest>
#         <versions>
#           <version>0.7.1</version>
#           <version>0.7.2</version>
#           <version>0.8.0-alpha1</version>
#         </versions>
#       </versioning>
#     </metadata>
#
# PATTERN MATCHING, NOT XML PARSING:
#   The body is scanned with regular expressions.  A tag value is whatever
#   sits between <tag> and </tag> with no nested markup.  Malformed XML
#   around the tags we care about is not an error.
# =============================================================================

import re

from core.exceptions import MetadataError

_TAG_PATTERNS: dict[str, re.Pattern[str]] = {
    tag: re.compile(rf"<{tag}>([^<]*)</{tag}>")
    for tag in ("release", "latest", "version")
}


def extract_tag(body: str, tag: str) -> str | None:
    """Return the first non-empty value of <tag> in the body, or None."""
    match = _TAG_PATTERNS[tag].search(body)
    if match is None or not match.group(1):
        return None
    return match.group(1)


def extract_versions(body: str) -> list[str]:
    """Every <version> value in document order, duplicates preserved."""
    return _TAG_PATTERNS["version"].findall(body)


def extract_latest_version(body: str) -> str:
    """The <release> value, falling back to <latest>.

    Raises:
        MetadataError: if the body has neither marker.
    """
    version = extract_tag(body, "release") or extract_tag(body, "latest")
    if version is None:
        raise MetadataError("No release or latest version found in maven-metadata.xml")
    return version
