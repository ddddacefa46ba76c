"""Tests for the conversion session."""

from svgxform.engine.config import EngineConfig
from svgxform.engine.session import ConversionSession, ElementRecord
from svgxform.engine.shapes import Ellipse, Rectangle
from svgxform.engine.transform_parser import TransformCache


def test_absent_transform_has_no_matrix(session):
    assert session.matrix_for(None) is None
    assert session.matrix_for("") is None


def test_path_without_transform_is_untouched(session):
    d = "m0 0 h5"
    assert session.transform_path(d, None) is d


def test_repeated_transforms_hit_the_cache(session):
    session.transform_path("M0,0 L1,1", "scale(2)")
    session.transform_path("M5,5 L6,6", "scale(2)")
    session.transform_rect(0, 0, 1, 1, "translate(1)")
    assert len(session.cache) == 2
    assert session.cache.hits == 1


def test_sessions_do_not_share_caches():
    a, b = ConversionSession(), ConversionSession()
    a.matrix_for("scale(2)")
    assert "scale(2)" in a.cache
    assert "scale(2)" not in b.cache


def test_explicit_cache_is_used():
    cache = TransformCache()
    session = ConversionSession(cache=cache)
    session.matrix_for("rotate(10)")
    assert "rotate(10)" in cache


def test_cache_can_be_disabled():
    session = ConversionSession(config=EngineConfig(cache_transforms=False))
    session.transform_path("M0,0 L1,1", "scale(2)")
    assert len(session.cache) == 0


def test_polygon_becomes_closed_path(session):
    assert session.transform_polygon("0,0 10,0 10,10", None) == "M0,0 10,0 10,10z"
    assert session.transform_polygon("0,0 10,0 10,10", "translate(1,1)") == "M 1,1 11,1 11,11z"


def test_shape_helpers(session):
    assert session.transform_rect(0, 0, 10, 10, "translate(3,4)") == Rectangle(3, 4, 10, 10)
    assert session.transform_circle(1, 1, 5, "scale(2)") == Ellipse(2, 2, 10, 10)
    assert session.transform_ellipse(0, 0, 5, 3, None) == Ellipse(0, 0, 5, 3)


def test_transform_element_rect(session):
    out = session.transform_element(
        ElementRecord("rect", {"x": "0", "y": "0", "width": "10", "height": "10", "transform": "translate(3,4)", "fill": "red"})
    )
    assert out.kind == "rect"
    assert out.attributes == {"x": "3", "y": "4", "width": "10", "height": "10", "fill": "red"}


def test_transform_element_missing_numbers_default_to_zero(session):
    out = session.transform_element(ElementRecord("rect", {"width": "2", "height": "2", "transform": "translate(1,1)"}))
    assert out.attributes["x"] == "1"
    assert out.attributes["y"] == "1"


def test_transform_element_circle_and_ellipse(session):
    circle = session.transform_element(ElementRecord("circle", {"cx": "1", "cy": "1", "r": "5", "transform": "scale(2)"}))
    assert circle.attributes == {"cx": "2", "cy": "2", "r": "10"}
    ellipse = session.transform_element(
        ElementRecord("ellipse", {"cx": "0", "cy": "0", "rx": "5", "ry": "3", "transform": "translate(2,2)"})
    )
    assert ellipse.attributes == {"cx": "2", "cy": "2", "rx": "5", "ry": "3"}


def test_transform_element_polygon_becomes_path(session):
    out = session.transform_element(ElementRecord("polygon", {"points": "0,0 4,0 2,3", "transform": "scale(2)"}))
    assert out.kind == "path"
    assert "points" not in out.attributes
    assert out.attributes["d"] == "M 0,0 8,0 4,6z"


def test_transform_element_path(session, icon_elements):
    out = session.transform_element(icon_elements[0])
    assert out.attributes["d"] == "M 5,5L 25,5L 25,25L 5,25z"
    assert out.attributes["fill"] == "#4ECDC4"
    assert "transform" not in out.attributes


def test_unknown_kind_is_returned_unchanged(session):
    line = ElementRecord("line", {"x1": "0", "transform": "scale(2)"})
    assert session.transform_element(line) is line


def test_whole_document_shares_one_cache(session, icon_elements):
    results = [session.transform_element(el) for el in icon_elements]
    assert [r.kind for r in results] == ["path", "path", "rect", "circle", "ellipse"]
    # path and polygon share "translate(5,5) scale(2)"
    assert len(session.cache) == 3
    assert session.cache.hits == 1


def test_precision_from_config():
    session = ConversionSession(config=EngineConfig(precision=2))
    assert session.transform_path("M0.12345,0", "translate(1)") == "M 1.12,0"
