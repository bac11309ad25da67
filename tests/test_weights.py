import pytest

from conceptspace.weights import (
    AttentionalWeight,
    ConstantWeight,
    ContextualWeight,
    attentional,
    constant,
    contextual,
)


def test_constant_weight():
    weight = constant(0.7)
    assert weight.value(None) == 0.7
    assert weight.value("context1") == 0.7
    assert weight.value("context2") == 0.7


def test_contextual_weight():
    weight = contextual(0.5).with_context("work", 0.8).with_context("leisure", 0.3)
    assert weight.value(None) == 0.5
    assert weight.value("work") == 0.8
    assert weight.value("leisure") == 0.3
    assert weight.value("unknown") == 0.5


def test_attentional_weight():
    weight = attentional(0.5, 0.1, 0.9)
    assert weight.value(None) == 0.5

    weight.update_attention(0.7)
    assert weight.value(None) == 0.7

    weight.update_attention(1.5)
    assert weight.value(None) == 0.9

    weight.update_attention(-0.5)
    assert weight.value(None) == 0.1


def test_attentional_creation_clamping():
    assert attentional(1.5, 0.0, 1.0).value(None) == 1.0
    assert attentional(-0.5, 0.0, 1.0).value(None) == 0.0
    assert attentional(0.5, 0.0, 1.0).value(None) == 0.5


def test_update_attention_on_non_attentional():
    fixed = constant(0.5)
    fixed.update_attention(0.8)
    assert fixed.value(None) == 0.5

    ctx = contextual(0.5)
    ctx.update_attention(0.8)
    assert ctx.value(None) == 0.5


def test_complex_contextual_weight():
    weight = (
        contextual(0.5)
        .with_context("morning", 0.3)
        .with_context("afternoon", 0.6)
        .with_context("evening", 0.8)
        .with_context("night", 0.2)
    )
    assert weight.value("morning") == 0.3
    assert weight.value("afternoon") == 0.6
    assert weight.value("evening") == 0.8
    assert weight.value("night") == 0.2

    weight2 = contextual(0.5).with_context("test", 0.3).with_context("test", 0.7)
    assert weight2.value("test") == 0.7


def test_extreme_values():
    assert constant(-0.5).value(None) == -0.5
    assert constant(0.0).value(None) == 0.0
    assert constant(1000.0).value(None) == 1000.0
    assert attentional(-0.5, -1.0, 0.0).value(None) == -0.5


def test_with_context_on_non_contextual_keeps_value():
    fixed = constant(0.4).with_context("work", 0.9)
    assert fixed.value("work") == 0.4

    attention = attentional(0.5, 0.0, 1.0).with_context("work", 0.9)
    assert attention.value("work") == 0.5


def test_with_context_leaves_original_untouched():
    base = contextual(0.5)
    extended = base.with_context("work", 0.8)
    assert base.value("work") == 0.5
    assert extended.value("work") == 0.8


def test_constructors_build_expected_kinds():
    assert constant(1.0) == ConstantWeight(1.0)
    assert contextual(0.5) == ContextualWeight(0.5, {})
    assert attentional(2.0, 0.0, 1.0) == AttentionalWeight(1.0, 0.0, 1.0)


def test_attentional_rejects_inverted_range():
    with pytest.raises(ValueError):
        attentional(0.5, 1.0, 0.0)