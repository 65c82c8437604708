"""
Tests for endpoint location and URL building.
"""
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from source_model_fakes import FakeAnnotation, FakeElement, stale_element
from jaxrs_lens.jaxrs import endpoint_url_builder
from jaxrs_lens.jaxrs.endpoint_locator import anchor_position, is_endpoint, is_primary
from jaxrs_lens.jaxrs.endpoint_url_builder import (
    build_url,
    get_jaxrs_application_path_value,
    get_jaxrs_path_value,
)
from jaxrs_lens.models.domain_models import HttpMethod, Position, SourceRange
from jaxrs_lens.utils.exceptions import ModelAccessError
from jaxrs_lens.utils.text_document import TextDocument

BASE_URL = "http://localhost:8080"


@pytest.fixture
def widget_resource():
    return FakeElement("WidgetResource", [
        FakeAnnotation("jakarta.ws.rs.ApplicationPath", {"value": "/api"}),
        FakeAnnotation("jakarta.ws.rs.Path", {"value": "/widgets"}),
    ])


def make_method(name, annotations, declaring_class=None, text="\n" * 10 + "@GET\n"):
    return FakeElement(name, annotations, document=TextDocument(text), declaring_class=declaring_class)


class UnnamedAnnotation(FakeAnnotation):

    def get_fully_qualified_name(self):
        raise RuntimeError("stale")


class RangelessAnnotation(FakeAnnotation):

    def get_source_range(self):
        raise RuntimeError("stale range")


class DetachedMethod(FakeElement):

    def get_document(self):
        raise RuntimeError("stale doc")


class TestPathValues:

    def test_path_value(self, widget_resource):
        assert get_jaxrs_path_value(widget_resource) == "/widgets"
        assert get_jaxrs_application_path_value(widget_resource) == "/api"

    def test_missing_values(self):
        element = FakeElement("Plain")
        assert get_jaxrs_path_value(element) is None
        assert get_jaxrs_application_path_value(element) is None


class TestEndpointLocator:

    def test_anchor_is_line_after_last_annotation(self):
        # annotation ends at offset 15: line 10, column 5
        method = make_method("create", [
            FakeAnnotation("javax.ws.rs.Path", source_range=SourceRange(0, 1)),
            FakeAnnotation("javax.ws.rs.POST", source_range=SourceRange(10, 5)),
        ], text="\n" * 10 + "@POST\n    public void create() {}\n")
        assert anchor_position(method) == Position(11, 5)

    def test_no_annotations_no_anchor(self):
        assert anchor_position(FakeElement("bare")) is None

    def test_document_failure_is_a_model_access_error(self):
        method = DetachedMethod("get", [FakeAnnotation("javax.ws.rs.GET", source_range=SourceRange(0, 4))])
        with pytest.raises(ModelAccessError) as exc_info:
            anchor_position(method)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_range_failure_is_a_model_access_error(self):
        method = make_method("get", [RangelessAnnotation("javax.ws.rs.GET")])
        with pytest.raises(ModelAccessError):
            anchor_position(method)

    def test_primary_only_for_get(self):
        assert is_primary(FakeElement("get", [FakeAnnotation("javax.ws.rs.GET")]))
        assert is_primary(FakeElement("get", [FakeAnnotation("jakarta.ws.rs.GET")]))
        assert not is_primary(FakeElement("head", [FakeAnnotation("jakarta.ws.rs.HEAD")]))
        assert not is_endpoint(FakeElement("locator", [FakeAnnotation("jakarta.ws.rs.Path")]))


class TestBuildUrl:

    def test_full_url(self, widget_resource):
        method = make_method("get", [
            FakeAnnotation("jakarta.ws.rs.GET", source_range=SourceRange(10, 4)),
            FakeAnnotation("jakarta.ws.rs.Path", {"value": "/{id}"}, source_range=SourceRange(10, 4)),
        ], declaring_class=widget_resource)

        descriptor = build_url(BASE_URL, widget_resource, method)

        assert descriptor.resolved_url == "http://localhost:8080/api/widgets/{id}"
        assert descriptor.http_method is HttpMethod.GET
        assert descriptor.is_primary is True
        assert descriptor.anchor_position == Position(11, 4)
        assert descriptor.method is method
        assert descriptor.to_dict()["class_name"] == "WidgetResource"

    def test_application_element_overrides_class(self, widget_resource):
        application = FakeElement("RestApplication", [FakeAnnotation("javax.ws.rs.ApplicationPath", {"value": "rest"})])
        method = make_method("list", [FakeAnnotation("jakarta.ws.rs.GET", source_range=SourceRange(10, 4))])

        descriptor = build_url(BASE_URL, widget_resource, method, application)

        assert descriptor.resolved_url == "http://localhost:8080/rest/widgets"

    def test_no_base_url(self, widget_resource):
        method = make_method("list", [FakeAnnotation("jakarta.ws.rs.DELETE", source_range=SourceRange(10, 4))])
        descriptor = build_url(None, widget_resource, method)
        assert descriptor.resolved_url == "/api/widgets"
        assert descriptor.is_primary is False
        assert descriptor.http_method is HttpMethod.DELETE

    def test_not_an_endpoint(self, widget_resource):
        locator = make_method("sub", [FakeAnnotation("jakarta.ws.rs.Path", {"value": "sub"})])
        options = make_method("options", [FakeAnnotation("jakarta.ws.rs.OPTIONS")])
        assert build_url(BASE_URL, widget_resource, locator) is None
        assert build_url(BASE_URL, widget_resource, options) is None

    def test_idempotent(self, widget_resource):
        method = make_method("get", [FakeAnnotation("javax.ws.rs.GET", source_range=SourceRange(10, 4))])
        assert build_url(BASE_URL, widget_resource, method) == build_url(BASE_URL, widget_resource, method)

    def test_missing_verb_is_logged_and_skipped(self, widget_resource, monkeypatch):
        monkeypatch.setattr(endpoint_url_builder, "first_http_method", lambda element: None)
        method = make_method("get", [FakeAnnotation("javax.ws.rs.GET", source_range=SourceRange(10, 4))])
        assert build_url(BASE_URL, widget_resource, method) is None

    def test_unreadable_annotation_name_raises_model_access_error(self):
        method = FakeElement("m", [UnnamedAnnotation("x")])
        with pytest.raises(ModelAccessError) as exc_info:
            build_url("http://h", FakeElement("C"), method)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_detached_document_raises_model_access_error(self, widget_resource):
        method = DetachedMethod("get", [FakeAnnotation("jakarta.ws.rs.GET")])
        with pytest.raises(ModelAccessError):
            build_url(BASE_URL, widget_resource, method)

    def test_stale_method_raises(self, widget_resource):
        with pytest.raises(ModelAccessError):
            build_url(BASE_URL, widget_resource, stale_element("get"))

    def test_failure_on_one_method_does_not_affect_the_next(self, widget_resource):
        broken = FakeElement("broken", error=RuntimeError("gone"))
        healthy = make_method("get", [FakeAnnotation("jakarta.ws.rs.GET", source_range=SourceRange(10, 4))])

        with pytest.raises(ModelAccessError):
            build_url(BASE_URL, widget_resource, broken)
        descriptor = build_url(BASE_URL, widget_resource, healthy)

        assert descriptor.resolved_url == "http://localhost:8080/api/widgets"
