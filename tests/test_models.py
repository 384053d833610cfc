"""Tests for dependency coordinates and the metadata path built from them."""

import pytest

from core.models import DependencyRef


class TestDependencyRef:

    def test_parse_splits_group_and_artifact(self):
        ref = DependencyRef.parse("metosin/reitit")
        assert ref.group == "metosin"
        assert ref.artifact == "reitit"
        assert ref.coordinate == "metosin/reitit"

    def test_parse_uses_first_two_segments(self):
        ref = DependencyRef.parse("group/artifact/extra")
        assert ref == DependencyRef(group="group", artifact="artifact")

    def test_parse_rejects_missing_separator(self):
        with pytest.raises(ValueError):
            DependencyRef.parse("reitit")

    def test_metadata_path_simple_group(self):
        assert DependencyRef.parse("metosin/reitit").metadata_path == "/metosin/reitit/maven-metadata.xml"

    def test_metadata_path_replaces_dots_in_group(self):
        ref = DependencyRef.parse("org.clojure/clojure")
        assert ref.metadata_path == "/org/clojure/clojure/maven-metadata.xml"

    def test_dots_in_artifact_are_kept(self):
        ref = DependencyRef.parse("com.github.user/lib.core")
        assert ref.metadata_path == "/com/github/user/lib.core/maven-metadata.xml"
