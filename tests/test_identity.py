"""Identity pass-through across every built-in target type."""

from collections import OrderedDict

import pytest

from dotcoerce import convert
from dotcoerce.registry import TargetType

IDENTITY_CASES = [
    pytest.param(True, TargetType.BOOLEAN, id="boolean"),
    pytest.param("q", TargetType.CHAR, id="char"),
    pytest.param(-7, TargetType.BYTE, id="byte"),
    pytest.param(1234, TargetType.SHORT, id="short"),
    pytest.param(2**31 - 1, TargetType.INT, id="int"),
    pytest.param(-(2**63), TargetType.LONG, id="long"),
    pytest.param(0.1, TargetType.FLOAT, id="float"),
    pytest.param(2.5e300, TargetType.DOUBLE, id="double"),
    pytest.param("text", TargetType.STRING, id="string"),
    pytest.param(OrderedDict(a=1), TargetType.MAP, id="map"),
    pytest.param([1, "two"], TargetType.LIST, id="list"),
]


class TestIdentity:
    @pytest.mark.parametrize("value, target", IDENTITY_CASES)
    def test_value_of_target_type_passes_through(self, value, target):
        assert convert(value, target) == value

    @pytest.mark.parametrize("value, target", IDENTITY_CASES)
    def test_default_not_applied(self, value, target):
        sentinel = object()
        assert convert(value, target, sentinel) is not sentinel
