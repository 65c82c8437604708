"""
Tests for annotation lookup and member values.
"""
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from source_model_fakes import FakeAnnotation, FakeElement, stale_element
from jaxrs_lens.config.jaxrs_constants import AnnotationRole, names_for
from jaxrs_lens.jaxrs.annotation_resolver import find_annotation, has_annotation, member_value
from jaxrs_lens.utils.exceptions import ModelAccessError

JAVAX_PATH = "javax.ws.rs.Path"
JAKARTA_PATH = "jakarta.ws.rs.Path"


class TestFindAnnotation:

    def test_returns_none_without_annotations(self):
        element = FakeElement("empty")
        assert find_annotation(element, names_for(AnnotationRole.PATH)) is None
        assert has_annotation(element, names_for(AnnotationRole.PATH)) is False

    def test_returns_none_when_nothing_matches(self):
        element = FakeElement("m", [FakeAnnotation("javax.ws.rs.Produces")])
        assert find_annotation(element, names_for(AnnotationRole.PATH)) is None

    def test_finds_modern_namespace(self):
        path = FakeAnnotation(JAKARTA_PATH, {"value": "/items"})
        element = FakeElement("m", [FakeAnnotation("jakarta.ws.rs.GET"), path])
        assert find_annotation(element, names_for(AnnotationRole.PATH)) is path
        assert has_annotation(element, names_for(AnnotationRole.PATH)) is True

    def test_candidate_order_wins_over_declaration_order(self):
        jakarta = FakeAnnotation(JAKARTA_PATH, {"value": "/jakarta"})
        javax = FakeAnnotation(JAVAX_PATH, {"value": "/javax"})
        element = FakeElement("m", [jakarta, javax])

        assert find_annotation(element, [JAVAX_PATH, JAKARTA_PATH]) is javax
        assert find_annotation(element, [JAKARTA_PATH, JAVAX_PATH]) is jakarta

    def test_first_declared_wins_for_same_name(self):
        first = FakeAnnotation(JAVAX_PATH, {"value": "/first"})
        second = FakeAnnotation(JAVAX_PATH, {"value": "/second"})
        element = FakeElement("m", [first, second])
        assert find_annotation(element, [JAVAX_PATH]) is first

    def test_model_access_error_propagates(self):
        with pytest.raises(ModelAccessError):
            find_annotation(stale_element(), names_for(AnnotationRole.PATH))

    def test_other_model_failures_become_model_access_errors(self):
        element = FakeElement("broken", error=RuntimeError("handle disposed"))
        with pytest.raises(ModelAccessError) as exc_info:
            has_annotation(element, names_for(AnnotationRole.GET))
        assert isinstance(exc_info.value.__cause__, RuntimeError)


class TestMemberValue:

    def test_explicit_value(self):
        assert member_value(FakeAnnotation(JAVAX_PATH, {"value": "/users"}), "value") == "/users"

    def test_absent_annotation(self):
        assert member_value(None, "value") is None

    def test_unset_member(self):
        assert member_value(FakeAnnotation(JAVAX_PATH), "value") is None

    def test_non_literal_member(self):
        assert member_value(FakeAnnotation(JAVAX_PATH, {"value": None}), "value") is None

    def test_declared_default(self):
        annotation = FakeAnnotation("com.example.Versioned", defaults={"value": "/v1"})
        assert member_value(annotation, "value") == "/v1"

    def test_explicit_value_beats_default(self):
        annotation = FakeAnnotation("com.example.Versioned", {"value": "/v2"}, defaults={"value": "/v1"})
        assert member_value(annotation, "value") == "/v2"
