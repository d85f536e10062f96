"""
Door and panel calculator tests.

Reference enclosure: 1000 x 600 x 900 outside.
Cavity 960 x 560 x 860, V-slot reduction 12mm ->
front/back opening 548, side opening 948, opening height 848.
"""

import pytest

from cnc_tools.calculators import (
    BOMValidationError, DoorConfiguration, DoorType, InvalidDimension, InvalidDoorType,
    MaterialConfiguration, PanelConfiguration, StructuralDimensions, TableConfiguration,
    compute_doors, compute_panels,
)
from cnc_tools.calculators.doors import DoorCalculator
from cnc_tools.calculators.panels import PanelCalculator


def _dims(length=1000, width=600, height=900, outside=True):
    return StructuralDimensions(length=length, width=width, height=height,
                                is_outside_dimension=outside)


def _doors(door_type="STND", **faces):
    return DoorConfiguration(door_type=door_type, **faces)


def _panels_by_position(result):
    return {p.position: p for p in result.panels}


ALL_FACES = dict(top=True, bottom=True, left=True, right=True, back=True, front=True)


# --- Door type parsing ---

def test_door_type_accepts_code_and_name():
    assert DoorType.parse("STND") == DoorType.STANDARD
    assert DoorType.parse("bifold") == DoorType.BIFOLD
    assert DoorType.parse("Awng") == DoorType.AWNING
    assert DoorType.parse(DoorType.BIFOLD) == DoorType.BIFOLD


def test_door_type_rejects_unknown():
    with pytest.raises(ValueError):
        DoorType.parse("SLIDING")


# --- Doors ---

def test_standard_door_panels():
    result = DoorCalculator().calculate(_dims(), _doors(front_door=True, left_door=True))
    panels = _panels_by_position(result)

    assert result.door_type == DoorType.STANDARD
    assert result.door_count == 2
    assert panels["Front"].width_mm == 546
    assert panels["Front"].height_mm == 846
    assert panels["Left"].width_mm == 946
    assert panels["Left"].height_mm == 846
    assert panels["Front"].thickness_mm == 6


def test_standard_door_hardware_scales_with_door_count():
    result = DoorCalculator().calculate(_dims(), _doors(front_door=True, back_door=True))
    assert result.hardware == {
        "HINGE": 4,
        "HANDLE": 2,
        "T_NUT_SLIDING": 16,
        "BUTTON_HEAD_M5_8MM": 16,
        "CORNER_BRACKET": 8,
        "SPRING_LOADED_T_NUT": 30,
    }


def test_bifold_door_gives_two_leaves_per_face():
    result = DoorCalculator().calculate(_dims(), _doors("BFLD", front_door=True, back_door=True))
    positions = [p.position for p in result.panels]

    assert positions == ["Front (Left)", "Front (Right)", "Back (Left)", "Back (Right)"]
    for panel in result.panels:
        assert panel.width_mm == 271  # round(548 / 2) - 3
        assert panel.height_mm == 846
    assert result.door_count == 2


def test_bifold_door_hardware():
    result = DoorCalculator().calculate(_dims(), _doors("BFLD", front_door=True, back_door=True))
    assert result.hardware["HINGE"] == 6
    assert result.hardware["HANDLE"] == 2
    assert result.hardware["T_NUT_SLIDING"] == 24
    assert result.hardware["BUTTON_HEAD_M5_8MM"] == 24


def test_awning_door_has_larger_top_clearance():
    standard = DoorCalculator().calculate(_dims(), _doors("STND", front_door=True))
    awning = DoorCalculator().calculate(_dims(), _doors("AWNG", front_door=True))

    assert awning.panels[0].width_mm == standard.panels[0].width_mm
    assert awning.panels[0].height_mm == 842
    assert awning.panels[0].height_mm < standard.panels[0].height_mm


def test_awning_door_hardware_rounds_up():
    one = DoorCalculator().calculate(_dims(), _doors("AWNG", front_door=True))
    three = DoorCalculator().calculate(
        _dims(), _doors("AWNG", front_door=True, left_door=True, right_door=True))
    assert one.hardware["HINGE"] == 2
    assert one.hardware["T_NUT_SLIDING"] == 7    # 8 * 0.8 = 6.4 -> 7
    assert three.hardware["T_NUT_SLIDING"] == 20  # 24 * 0.8 = 19.2 -> 20


def test_doors_requested_with_no_faces_is_empty_not_error():
    config = TableConfiguration(include_doors=True, door_config=_doors())
    result = compute_doors(_dims(), config)

    assert result is not None
    assert result.door_count == 0
    assert result.panels == []
    assert all(qty == 0 for qty in result.hardware.values())


def test_doors_inside_dimensions_match_equivalent_outside():
    inside = DoorCalculator().calculate(_dims(960, 560, 900, outside=False), _doors(front_door=True))
    outside = DoorCalculator().calculate(_dims(), _doors(front_door=True))
    assert inside.panels == outside.panels


def test_compute_doors_rejects_bad_door_type():
    config = TableConfiguration(include_doors=True, door_config=_doors("SLIDING", front_door=True))
    with pytest.raises(BOMValidationError) as exc:
        compute_doors(_dims(), config)
    assert isinstance(exc.value.errors[0], InvalidDoorType)
    assert exc.value.fields == ["door_type"]


def test_compute_doors_not_requested_returns_none():
    assert compute_doors(_dims(), TableConfiguration(door_config=_doors(front_door=True))) is None


# --- Panels ---

def test_panel_sizes_for_channel_mounted_sheet():
    material = MaterialConfiguration(include_panels=True, panel_config=PanelConfiguration(**ALL_FACES))
    result = PanelCalculator().calculate(_dims(), material)
    panels = _panels_by_position(result)

    assert result.channel_mounted is True
    assert (panels["Top"].width_mm, panels["Top"].height_mm) == (548, 948)
    assert (panels["Bottom"].width_mm, panels["Bottom"].height_mm) == (548, 948)
    assert (panels["Left"].width_mm, panels["Left"].height_mm) == (948, 848)
    assert (panels["Right"].width_mm, panels["Right"].height_mm) == (948, 848)
    assert (panels["Back"].width_mm, panels["Back"].height_mm) == (548, 848)
    assert (panels["Front"].width_mm, panels["Front"].height_mm) == (548, 848)


def test_panel_total_area_is_exact_sum():
    material = MaterialConfiguration(include_panels=True, panel_config=PanelConfiguration(**ALL_FACES))
    result = PanelCalculator().calculate(_dims(), material)
    assert result.total_area_mm2 == 2 * (548 * 948 + 948 * 848 + 548 * 848)
    assert result.total_area_mm2 == sum(p.width_mm * p.height_mm for p in result.panels)


def test_panel_toggle_face_off_removes_exactly_its_area():
    calc = PanelCalculator()
    every = calc.calculate(_dims(), MaterialConfiguration(
        include_panels=True, panel_config=PanelConfiguration(**ALL_FACES)))

    for face in ALL_FACES:
        faces = dict(ALL_FACES, **{face: False})
        fewer = calc.calculate(_dims(), MaterialConfiguration(
            include_panels=True, panel_config=PanelConfiguration(**faces)))
        removed = _panels_by_position(every)[face.title()]
        assert every.total_area_mm2 - fewer.total_area_mm2 == removed.area_mm2
        assert len(fewer.panels) == 5


def test_thick_sheet_is_surface_mounted_without_inset():
    material = MaterialConfiguration(include_panels=True, thickness=10,
                                     panel_config=PanelConfiguration(top=True))
    result = PanelCalculator().calculate(_dims(), material)
    assert result.channel_mounted is False
    assert (result.panels[0].width_mm, result.panels[0].height_mm) == (560, 960)
    assert result.panels[0].thickness_mm == 10


def test_no_faces_selected_gives_zero_area():
    result = compute_panels(_dims(), MaterialConfiguration(include_panels=True))
    assert result.panels == []
    assert result.total_area_mm2 == 0


def test_compute_panels_rejects_zero_thickness():
    material = MaterialConfiguration(include_panels=True, thickness=0,
                                     panel_config=PanelConfiguration(top=True))
    with pytest.raises(BOMValidationError) as exc:
        compute_panels(_dims(), material)
    assert isinstance(exc.value.errors[0], InvalidDimension)
    assert exc.value.fields == ["thickness"]


def test_compute_panels_not_requested_returns_none():
    material = MaterialConfiguration(panel_config=PanelConfiguration(top=True))
    assert compute_panels(_dims(), material) is None


# --- Openings under 2040 top rails ---

def test_door_height_drops_with_2040_top_rails():
    """At 1500mm the top rails are 2040, so the clear height loses 20mm."""
    calc = DoorCalculator()
    small = calc.calculate(_dims(length=1499), _doors(front_door=True, left_door=True))
    large = calc.calculate(_dims(length=1500), _doors(front_door=True, left_door=True))

    assert _panels_by_position(small)["Front"].height_mm == 846
    assert _panels_by_position(large)["Front"].height_mm == 826
    assert _panels_by_position(large)["Left"].height_mm == 826
    # widths do not depend on the top rail profile
    assert _panels_by_position(large)["Front"].width_mm == 546


def test_side_panel_height_drops_with_2040_top_rails():
    material = MaterialConfiguration(include_panels=True,
                                     panel_config=PanelConfiguration(top=True, left=True, back=True))
    small = _panels_by_position(PanelCalculator().calculate(_dims(length=1499), material))
    large = _panels_by_position(PanelCalculator().calculate(_dims(length=1500), material))

    assert small["Left"].height_mm == 848
    assert large["Left"].height_mm == 828
    assert large["Back"].height_mm == 828
    assert large["Top"].height_mm == 1500 - 40 - 12


def test_door_opening_matches_vertical_post_for_large_enclosure():
    from cnc_tools.calculators.enclosure import EnclosureCalculator

    dims = _dims(length=1600)
    enclosure = EnclosureCalculator().calculate(dims)
    post = [c for c in enclosure.extrusions if c.description == "Vertical corner post"][0]
    door = DoorCalculator().calculate(dims, _doors(front_door=True)).panels[0]

    # opening = post length less the V-slot reduction; door takes 2mm clearance
    assert door.height_mm == post.length_mm - 12 - 2
