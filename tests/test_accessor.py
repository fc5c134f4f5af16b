"""Chained accessor tests."""

import pytest

from dotcoerce import accessor
from dotcoerce._errors import MissingDefaultError
from dotcoerce.accessor import Accessor
from dotcoerce.registry import TargetType


@pytest.fixture
def chain(registry):
    return Accessor(registry)


class TestChaining:
    def test_from_returns_self(self, chain, document):
        assert chain.from_(document) is chain

    def test_map_node_descends(self, chain, document):
        assert chain.from_(document).map_node("server").map_node("tls").value(
            "enabled", TargetType.BOOLEAN
        ) is True

    def test_from_resets(self, chain, document):
        chain.from_(document).map_node("server")
        assert chain.from_({"port": "1"}).int_value("port") == 1

    def test_independent_instances(self, extractor):
        first = extractor.accessor()
        second = extractor.accessor()
        assert first is not second
        first.from_({"a": 1})
        assert second.broken


class TestBrokenChain:
    def test_unset_root_is_broken(self, chain):
        assert chain.broken
        assert chain.current is None

    def test_missing_key_breaks(self, chain, document):
        chain.from_(document).map_node("nope")
        assert chain.broken
        assert chain.value("port", TargetType.INT) is None

    def test_non_map_breaks(self, chain, document):
        chain.from_(document).map_node("ratio")
        assert chain.broken

    def test_stays_broken(self, chain, document):
        chain.from_(document).map_node("nope").map_node("server")
        assert chain.broken

    def test_empty_map_is_not_broken(self, chain):
        chain.from_({"empty": {}}).map_node("empty")
        assert not chain.broken
        assert chain.current == {}

    def test_broken_uses_default(self, chain):
        assert chain.value("port", TargetType.INT, 80) == 80

    def test_none_default_rejected(self, chain, document):
        with pytest.raises(MissingDefaultError):
            chain.from_(document).value("ratio", TargetType.DOUBLE, None)


class TestTypedReaders:
    @pytest.fixture
    def node(self, chain):
        return chain.from_(
            {
                "flag": "ok",
                "letter": "z",
                "small": "-5",
                "medium": "300",
                "count": "42",
                "big": "9000000000",
                "ratio": "0.5",
                "name": "svc",
                "child": {"k": "v"},
                "items": [1, 2],
            }
        )

    def test_present_values(self, node):
        assert node.bool_value("flag") is True
        assert node.char_value("letter") == "z"
        assert node.byte_value("small") == -5
        assert node.short_value("medium") == 300
        assert node.int_value("count") == 42
        assert node.long_value("big") == 9000000000
        assert node.float_value("ratio") == 0.5
        assert node.double_value("ratio") == 0.5
        assert node.str_value("name") == "svc"
        assert node.map_value("child") == {"k": "v"}
        assert node.list_value("items") == [1, 2]

    def test_zero_values_when_missing(self, node):
        assert node.bool_value("missing") is False
        assert node.char_value("missing") == "\0"
        assert node.byte_value("missing") == 0
        assert node.short_value("missing") == 0
        assert node.int_value("missing") == 0
        assert node.long_value("missing") == 0
        assert node.float_value("missing") == 0.0
        assert node.double_value("missing") == 0.0
        assert node.str_value("missing") == ""
        assert node.map_value("missing") == {}
        assert node.list_value("missing") == []

    def test_zero_values_when_unconvertible(self, node):
        assert node.byte_value("medium") == 0
        assert node.int_value("big") == 0
        assert node.list_value("child") == []

    def test_empty_containers_are_fresh(self, chain):
        first = chain.map_value("missing")
        first["added"] = 1
        assert chain.map_value("missing") == {}
        second = chain.list_value("missing")
        second.append(1)
        assert chain.list_value("missing") == []


class TestModuleLevelAccessor:
    def test_new_instance_each_call(self):
        assert accessor() is not accessor()

    def test_reads_through_default_registry(self, document):
        assert accessor().from_(document).map_node("server").int_value("port") == 8080
