from xml.etree import ElementTree as ET

import pytest

from page_notes.core.namespace import PageNamespace, qualify
from page_notes.core.outline import Outline, find_selected_outline, overlaps, overlaps_point
from page_notes.core.paragraph import Paragraph

from conftest import NS, outline_xml, page_xml


def local_names(element):
    return [child.tag.split("}")[1] for child in element]


def make_outline(x, y, width, height):
    outline = Outline()
    outline.set_all_positional_data(x, y, width, height)
    return outline


def test_new_outline_has_content_container():
    outline = Outline()
    assert local_names(outline.element) == ["OEChildren"]
    assert outline.element.tag == qualify(NS, "Outline")
    assert outline.paragraphs() == []


def test_outline_requires_namespace_when_implied():
    PageNamespace.reset()
    with pytest.raises(RuntimeError):
        Outline()
    outline = Outline(namespace="urn:other")
    assert outline.element.tag == "{urn:other}Outline"
    assert outline.oe_children.element.tag == "{urn:other}OEChildren"


def test_missing_geometry_reads_as_zero():
    outline = Outline()
    assert outline.get_position() == (0, 0)
    assert outline.get_size() == (0, 0)
    assert outline.get_all_positional_data() == (0, 0, 0, 0)


def test_position_round_trip():
    outline = Outline()
    for x, y in [(0, 0), (42, 7), (1000, 2500)]:
        outline.set_position(x, y)
        assert outline.get_position() == (x, y)

    position = outline.child("Position")
    assert position.get("x") == "1000.0"
    assert position.get("y") == "2500.0"


def test_metadata_precedes_content():
    outline = Outline()
    outline.add_content("text")
    outline.set_position(1, 2)
    assert local_names(outline.element) == ["Position", "OEChildren"]
    outline.set_size(10, 20)
    assert local_names(outline.element) == ["Size", "Position", "OEChildren"]


def test_set_size_without_height_keeps_previous_height():
    outline = Outline()
    outline.set_size(50)
    assert outline.get_size() == (50, 0)
    assert outline.child("Size").get("height") is None

    outline.set_size(60, 30)
    assert outline.get_size() == (60, 30)

    outline.set_size(80, 0)
    assert outline.get_size() == (80, 30)


def test_set_all_positional_data_is_idempotent():
    outline = Outline()
    outline.set_all_positional_data(10, 20, 30, 40)
    first = ET.tostring(outline.element)
    outline.set_all_positional_data(10, 20, 30, 40)
    assert ET.tostring(outline.element) == first
    assert len(outline.children("Position")) == 1
    assert len(outline.children("Size")) == 1


def test_malformed_geometry_defaults_to_zero():
    element = ET.fromstring(
        f'<one:Outline xmlns:one="{NS}">'
        '<one:Position x="left" y="12.9"/><one:Size width="" height="3.5"/>'
        "<one:OEChildren/></one:Outline>"
    )
    outline = Outline(element)
    assert outline.get_position() == (0, 12)
    assert outline.get_size() == (0, 3)


def test_overlap_point_edges():
    outline = make_outline(100, 50, 200, 40)
    assert overlaps_point(outline, 100, 50)
    assert overlaps_point(outline, 300, 90)
    assert outline.overlap(200, 60)
    assert not outline.overlap(301, 50)
    assert not outline.overlap(100, 91)
    assert not outline.overlap(99, 50)


def test_overlap_at_own_corner_with_zero_size():
    outline = Outline()
    outline.set_position(5, 5)
    assert outline.overlap(5, 5)
    assert not outline.overlap(6, 5)


def test_overlap_between_outlines_checks_corners():
    first = make_outline(0, 0, 100, 100)
    inside = make_outline(50, 50, 10, 10)
    far = make_outline(500, 500, 10, 10)

    assert overlaps(first, inside)
    assert overlaps(inside, first)
    assert first.overlap(inside)
    assert not first.overlap(far)


def test_crossing_outlines_without_corner_inside_do_not_overlap():
    wide = make_outline(0, 50, 300, 20)
    tall = make_outline(100, 0, 20, 300)
    assert not overlaps(wide, tall)
    assert not overlaps(tall, wide)


def test_overlap_requires_y_for_points():
    with pytest.raises(TypeError):
        Outline().overlap(3)


def test_add_content_appends_paragraphs():
    outline = Outline()
    first = outline.add_content("first")
    element = ET.Element(qualify(NS, "Table"))
    second = outline.add_content(element)

    assert isinstance(first, Paragraph)
    assert [p.text for p in outline.paragraphs()] == ["first", ""]
    assert list(second.element) == [element]


def test_add_content_amends_paragraph_by_index():
    outline = Outline()
    outline.add_content("one")
    outline.add_content("two")

    amended = outline.add_content(" more", index=0)
    assert amended.text == "one more"
    assert len(outline.paragraphs()) == 2

    image = ET.Element(qualify(NS, "Image"))
    outline.add_content(image, index=1)
    assert outline.paragraphs()[1].element[-1] is image


def test_add_content_out_of_range_returns_none():
    outline = Outline()
    outline.add_content("only")
    assert outline.add_content("nope", index=3) is None
    assert len(outline.paragraphs()) == 1


def test_wrapping_existing_outline_reuses_container():
    element = ET.fromstring(page_xml(outline_xml(texts=[("a", None)])))[1]
    outline = Outline(element)
    assert len(outline.children("OEChildren")) == 1
    assert outline.paragraphs()[0].text == "a"


def test_from_content_moves_outline_children():
    source = ET.fromstring(
        page_xml(outline_xml(position=(4, 5), size=(6, 7), texts=[("a", None), ("b", None)]))
    )[1]
    outline = Outline.from_content(source)
    assert outline.get_all_positional_data() == (4, 5, 6, 7)
    assert [p.text for p in outline.paragraphs()] == ["a", "b"]
    assert len(outline.children("OEChildren")) == 1


def test_from_content_wraps_other_elements():
    table = ET.Element(qualify(NS, "Table"))
    outline = Outline.from_content(table)
    assert outline.element[-1] is table


def test_selected_text_is_empty_without_selection():
    element = ET.fromstring(page_xml(outline_xml(texts=[("a", None), ("b", "none")])))[1]
    assert Outline(element).get_selected_text() == ""


def test_selected_text_joins_runs_in_order():
    element = ET.fromstring(
        page_xml(outline_xml(texts=[("A", "all"), ("skip", "none"), ("B", "partial")]))
    )[1]
    outline = Outline(element)
    assert outline.get_selected_text() == "A\nB"
    assert len(outline.get_selected_text_nodes()) == 2


def test_find_selected_outline():
    root = ET.fromstring(
        page_xml(
            outline_xml(position=(1, 1), selected="none"),
            outline_xml(position=(2, 2), selected="partial"),
            outline_xml(position=(3, 3), selected="all"),
        )
    )
    outline = find_selected_outline(root, NS)
    assert outline.get_position() == (2, 2)
    assert outline.is_selected


def test_find_selected_outline_absent():
    root = ET.fromstring(page_xml(outline_xml(position=(1, 1))))
    assert find_selected_outline(root, NS) is None


def test_position_and_size_views():
    outline = make_outline(3, 4, 5, 6)
    assert outline.position.x == 3
    assert outline.position.y == 4
    assert outline.size.width == 5
    assert outline.size.height == 6
    assert outline.box.right == 8
    assert outline.box.bottom == 10


def test_wrapping_outline_without_container_does_not_modify_it():
    element = ET.fromstring(page_xml(outline_xml(position=(1, 2))))[1]
    element.remove(element.find(qualify(NS, "OEChildren")))

    outline = Outline(element)
    assert outline.get_all_positional_data() == (1, 2, 0, 0)
    assert outline.paragraphs() == []
    assert outline.get_selected_text() == ""
    assert outline.add_content("amend", index=0) is None
    assert local_names(element) == ["Position"]

    outline.add_content("first")
    assert local_names(element) == ["Position", "OEChildren"]
    assert [p.text for p in outline.paragraphs()] == ["first"]


def test_from_content_detaches_children_from_source():
    source = ET.fromstring(
        page_xml(outline_xml(position=(4, 5), texts=[("a", None), ("b", None)]))
    )[1]
    outline = Outline.from_content(source)
    assert len(source) == 0
    assert local_names(outline.element) == ["Position", "OEChildren"]
    assert [p.text for p in outline.paragraphs()] == ["a", "b"]
