import pytest

from conceptspace.errors import InvalidPointError
from conceptspace.point import ConceptualPoint
from conceptspace.region import ConvexRegion, Hyperplane


def _pt(*coords):
    return ConceptualPoint(coords)


def _unit_square():
    region = ConvexRegion.from_prototype(_pt(0.5, 0.5))
    region.boundaries = [
        Hyperplane((1.0, 0.0), 0.0),
        Hyperplane((-1.0, 0.0), -1.0),
        Hyperplane((0.0, 1.0), 0.0),
        Hyperplane((0.0, -1.0), -1.0),
    ]
    return region


def test_unbounded_region_contains_everything():
    region = ConvexRegion.from_prototype(_pt(0.0, 0.0))
    assert region.contains(_pt(1e6, -1e6))
    assert region.member_count() == 0
    assert region.name is None


def test_with_name_and_description_copy():
    region = ConvexRegion.from_prototype(_pt(1.0))
    named = region.with_name("Birds").with_description("Feathered animals")
    assert named.name == "Birds"
    assert named.description == "Feathered animals"
    assert named.id == region.id
    assert region.name is None


def test_hyperplane_sides():
    plane = Hyperplane((1.0, 0.0), 0.0)
    assert plane.contains_positive(_pt(1.0, 5.0))
    assert not plane.contains_positive(_pt(-1.0, 5.0))
    assert plane.contains_positive(_pt(0.0, 3.0))


def test_signed_distance_flips_sign_through_origin():
    plane = Hyperplane((2.0, -3.0), 0.0)
    p = _pt(1.5, 0.25)
    q = _pt(-1.5, -0.25)
    assert plane.signed_distance(p) == -plane.signed_distance(q)


def test_signed_distance_dimension_mismatch():
    with pytest.raises(InvalidPointError):
        Hyperplane((1.0, 0.0), 0.0).signed_distance(_pt(1.0))


def test_region_contains_with_boundaries():
    region = _unit_square()
    assert region.contains(_pt(0.5, 0.5))
    assert region.contains(_pt(1.0, 0.0))
    assert not region.contains(_pt(1.5, 0.5))
    assert not region.contains(_pt(0.5, -0.1))


def test_update_prototype_empty_raises():
    region = ConvexRegion.from_prototype(_pt(0.0, 0.0))
    with pytest.raises(InvalidPointError):
        region.update_prototype([])


def test_update_prototype_centroid():
    region = ConvexRegion.from_prototype(_pt(9.0, 9.0))
    region.update_prototype([_pt(0.0, 0.0), _pt(2.0, 4.0)])
    assert region.prototype.coordinates == (1.0, 2.0)


def test_update_prototype_identical_points():
    region = ConvexRegion.from_prototype(_pt(9.0, 9.0))
    region.update_prototype([_pt(3.5, -1.25)] * 4)
    assert region.prototype.coordinates == (3.5, -1.25)


def test_is_convex_inside_square():
    region = _unit_square()
    samples = [_pt(0.1, 0.1), _pt(0.9, 0.2), _pt(0.5, 0.9)]
    assert region.is_convex(samples)


def test_is_convex_fails_across_boundary():
    region = ConvexRegion.from_prototype(_pt(0.0, 0.0))
    region.boundaries = [Hyperplane((1.0, 0.0), 0.0)]
    assert not region.is_convex([_pt(-1.0, 0.0), _pt(1.0, 0.0)])


def test_is_convex_trivial_for_single_point():
    region = _unit_square()
    assert region.is_convex([_pt(5.0, 5.0)])


def test_members():
    region = ConvexRegion.from_prototype(_pt(0.0))
    a = _pt(1.0).id
    b = _pt(2.0).id
    region.add_member(a)
    region.add_member(b)
    region.add_member(a)
    assert region.member_count() == 2
    assert region.remove_member(a) is True
    assert region.remove_member(a) is False
    assert region.member_points == {b}