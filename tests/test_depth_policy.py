import pytest

from ngramtrace.policy import DepthPolicy, default_policy, parse_policy


def test_default_policy_follows_order():
    assert default_policy(2) is DepthPolicy.CARRY
    assert default_policy(3) is DepthPolicy.RESET
    assert default_policy(8) is DepthPolicy.RESET


@pytest.mark.parametrize(
    "text, expected",
    [("carry", DepthPolicy.CARRY), (" RESET ", DepthPolicy.RESET), ("Carry", DepthPolicy.CARRY)],
)
def test_parse_policy_ignores_case(text, expected):
    assert parse_policy(text) is expected


def test_parse_policy_lists_choices_on_error():
    with pytest.raises(ValueError, match="carry, reset"):
        parse_policy("drop")
