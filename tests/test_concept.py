import uuid

import pytest

from conceptspace.concept import Concept
from conceptspace.errors import InvalidDimensionError, InvalidPointError


def test_new_concept_has_id_and_no_name():
    concept = Concept([1.0, 2.0])
    assert isinstance(concept.id, uuid.UUID)
    assert concept.name is None
    assert concept.description is None
    assert concept.coordinates == (1.0, 2.0)


def test_with_name_and_description():
    concept = Concept([1.0]).with_name("apple").with_description("a fruit")
    assert concept.name == "apple"
    assert concept.description == "a fruit"


def test_builders_keep_id_and_coordinates():
    base = Concept([1.0, 2.0])
    named = base.with_name("pear")
    assert named.id == base.id
    assert named.coordinates == base.coordinates
    assert base.name is None


def test_get_dimension_value():
    dim = uuid.uuid4()
    other = uuid.uuid4()
    concept = Concept([7.5, 1.0], {dim: 0, other: 1})
    assert concept.get_dimension_value(dim) == 7.5
    assert concept.get_dimension_value(other) == 1.0
    assert concept.get_dimension_value(uuid.uuid4()) is None


def test_weighted_distance_pinned():
    a = Concept([0.0, 0.0])
    b = Concept([3.0, 4.0])
    assert a.weighted_distance(b, [1.0, 1.0], 2.0) == pytest.approx(5.0)


def test_weighted_distance_symmetric():
    a = Concept([1.0, 5.0])
    b = Concept([-2.0, 0.5])
    assert a.weighted_distance(b, [2.0, 0.5], 3.0) == pytest.approx(
        b.weighted_distance(a, [2.0, 0.5], 3.0)
    )
    assert a.weighted_distance(a, [2.0, 0.5], 3.0) == 0.0


def test_weighted_distance_dimension_mismatch():
    with pytest.raises(InvalidPointError) as info:
        Concept([1.0]).weighted_distance(Concept([1.0, 2.0]), [1.0], 2.0)
    assert "Concepts have different dimensions" in str(info.value)


def test_weighted_distance_weight_mismatch():
    with pytest.raises(InvalidDimensionError) as info:
        Concept([1.0, 2.0]).weighted_distance(Concept([1.0, 2.0]), [1.0, 1.0, 1.0], 2.0)
    assert "Weight vector has incorrect length" in str(info.value)