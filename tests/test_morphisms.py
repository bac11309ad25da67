from uuid import uuid4

import pytest

from conceptspace.morphisms import (
    CrossContextMorphism,
    MorphismCollection,
    MorphismDiscoveryRule,
    MorphismKind,
    MorphismType,
)

SEMANTIC = MorphismType(MorphismKind.SEMANTIC_LINK)


def _refs():
    return ("ctx-a", uuid4()), ("ctx-b", uuid4())


def test_morphism_type_constructors_and_equality():
    assert MorphismType.hierarchy("parent", "child") == MorphismType(
        MorphismKind.HIERARCHY, ("parent", "child")
    )
    assert MorphismType.temporal("before").parameters == ("before",)
    assert MorphismType.causal("cause", "effect").kind is MorphismKind.CAUSAL
    assert MorphismType.custom("x") != MorphismType.custom("y")


def test_morphism_type_rejects_wrong_arity():
    with pytest.raises(ValueError):
        MorphismType(MorphismKind.HIERARCHY, ("only",))
    with pytest.raises(ValueError):
        MorphismType(MorphismKind.SEMANTIC_LINK, ("extra",))


def test_new_morphism_is_one_way_without_inverse():
    source, target = _refs()
    m = CrossContextMorphism(source, target, SEMANTIC, 0.5)
    assert m.bidirectional is False
    assert m.metadata is None
    assert m.inverse() is None


def test_inverse_of_bidirectional_swaps_ends():
    source, target = _refs()
    m = CrossContextMorphism.create_bidirectional(source, target, SEMANTIC, 0.8)
    inv = m.inverse()
    assert inv.source == target
    assert inv.target == source
    assert inv.strength == m.strength
    assert inv.bidirectional is True
    assert inv.id != m.id


def test_connects_contexts_and_involves_concept():
    source, target = _refs()
    m = CrossContextMorphism(source, target, SEMANTIC, 0.5)
    assert m.connects_contexts("ctx-a", "ctx-b")
    assert m.connects_contexts("ctx-b", "ctx-a")
    assert not m.connects_contexts("ctx-a", "ctx-c")
    assert m.involves_concept(source[1])
    assert m.involves_concept(target[1])
    assert not m.involves_concept(uuid4())


def test_discovery_rule_defaults_and_builders():
    rule = MorphismDiscoveryRule("rule", SEMANTIC)
    assert rule.similarity_threshold == 0.7
    assert rule.applies_to("any", "other")
    narrowed = rule.with_source_context("ctx-a").with_target_context("ctx-b")
    assert narrowed.applies_to("ctx-a", "ctx-b")
    assert not narrowed.applies_to("ctx-b", "ctx-a")
    assert narrowed.with_threshold(0.9).similarity_threshold == 0.9
    assert narrowed.make_bidirectional().bidirectional is True
    assert rule.source_context is None


def test_collection_queries():
    coll = MorphismCollection()
    assert len(coll) == 0
    source, target = _refs()
    other = ("ctx-c", uuid4())
    m1 = CrossContextMorphism(source, target, SEMANTIC, 0.4)
    m2 = CrossContextMorphism(source, other, MorphismType.custom("k"), 0.6)
    coll.add(m1)
    coll.add(m2)
    assert len(coll) == 2
    assert coll.all() == [m1, m2]
    assert coll.find_by_concept(source[1]) == [m1, m2]
    assert coll.find_by_concept(other[1]) == [m2]
    assert coll.find_between_contexts("ctx-b", "ctx-a") == [m1]
    assert coll.find_by_type(MorphismType.custom("k")) == [m2]


def test_find_strongest_respects_direction():
    coll = MorphismCollection()
    source, target = _refs()
    weak = CrossContextMorphism(source, target, SEMANTIC, 0.2)
    strong = CrossContextMorphism(source, target, SEMANTIC, 0.9)
    one_way_back = CrossContextMorphism(target, source, SEMANTIC, 1.0)
    both_ways_back = CrossContextMorphism.create_bidirectional(target, source, SEMANTIC, 0.5)
    for m in (weak, strong, one_way_back, both_ways_back):
        coll.add(m)
    assert coll.find_strongest(source[1], target[1]) is strong
    assert coll.find_strongest(target[1], source[1]) is one_way_back
    assert coll.find_strongest(source[1], uuid4()) is None


def test_find_strongest_latest_wins_ties():
    coll = MorphismCollection()
    source, target = _refs()
    first = CrossContextMorphism(source, target, SEMANTIC, 0.5)
    second = CrossContextMorphism(source, target, SEMANTIC, 0.5)
    coll.add(first)
    coll.add(second)
    assert coll.find_strongest(source[1], target[1]) is second