import pytest

from ngramtrace import DepthPolicy, available_tracers, create_tracer


def test_registry_lists_named_tracers():
    assert [spec.name for spec in available_tracers()] == [
        "bigramTracer",
        "ngramTracer",
        "trigramTracer",
    ]


def test_fixed_order_tracers():
    bigram = create_tracer("bigramTracer")
    trigram = create_tracer("trigramTracer")
    assert (bigram.order, bigram.policy) == (2, DepthPolicy.CARRY)
    assert (trigram.order, trigram.policy) == (3, DepthPolicy.RESET)


def test_matching_order_is_accepted():
    assert create_tracer("trigramTracer", order=3).order == 3


def test_policy_override_is_forwarded():
    tracer = create_tracer("trigramTracer", policy=DepthPolicy.CARRY)
    assert tracer.policy is DepthPolicy.CARRY


def test_ngram_tracer_needs_order():
    assert create_tracer("ngramTracer", order=5).order == 5
    with pytest.raises(ValueError, match="explicit n-gram order"):
        create_tracer("ngramTracer")


def test_contradicting_order_is_rejected():
    with pytest.raises(ValueError, match="fixed order 2"):
        create_tracer("bigramTracer", order=3)


def test_unknown_tracer_is_rejected():
    with pytest.raises(ValueError, match="unknown tracer"):
        create_tracer("4byteTracer")


def test_each_call_returns_a_fresh_tracer():
    first = create_tracer("bigramTracer")
    first.step("A", 0)
    assert create_tracer("bigramTracer").on_result() == {}
