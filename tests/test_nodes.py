"""
ClusterPulse Node Tests

Node descriptor types and the node formatter.
"""

import pytest

from clusterpulse.nodes import (
    NodeFormatter,
    NodeInfo,
    NodeRole,
    NodeStatus,
    get_node_formatter,
    render_concise,
    render_structured,
    reset_node_formatter,
    set_node_formatter,
)
from clusterpulse.xcontent import DocumentBuilder, DocumentBuilderError


def _structured(node, params=None):
    builder = DocumentBuilder().start_object()
    render_structured(node, builder, params)
    return builder.end_object().to_dict()


class TestNodeInfo:
    """Test NodeInfo dataclass."""

    def test_default_creation(self):
        node = NodeInfo()
        assert node.host == "localhost"
        assert node.port == 9300
        assert node.role == NodeRole.MASTER_ELIGIBLE
        assert node.status == NodeStatus.ACTIVE
        assert node.id

    def test_address(self):
        node = NodeInfo(host="192.168.1.10", port=9400)
        assert node.address == "192.168.1.10:9400"

    def test_is_master(self):
        assert NodeInfo(role=NodeRole.MASTER).is_master
        assert not NodeInfo(role=NodeRole.DATA).is_master


class TestNodeFormatter:
    """Test concise and structured rendering."""

    def test_render_concise(self, node):
        assert render_concise(node) == "[node-1][n1-uuid][10.0.0.5:9300]"

    def test_render_concise_without_name(self, bare_node):
        assert render_concise(bare_node) == "[n2-uuid][10.0.0.6:9301]"

    def test_render_structured_field_order(self, node):
        doc = _structured(node)
        assert list(doc) == [
            "id",
            "name",
            "transport_address",
            "host",
            "port",
            "master_node",
            "version",
            "attributes",
        ]
        assert doc["transport_address"] == "10.0.0.5:9300"
        assert doc["master_node"] is False
        assert list(doc["attributes"].items()) == [("rack", "r1"), ("zone", "us-east-1a")]

    def test_render_structured_skips_attributes_when_disabled(self, node):
        doc = _structured(node, {"node_attributes": False})
        assert "attributes" not in doc

    def test_render_structured_skips_empty_attributes(self, bare_node):
        assert "attributes" not in _structured(bare_node)

    def test_render_structured_returns_builder(self, node):
        builder = DocumentBuilder().start_object()
        assert NodeFormatter().render_structured(node, builder) is builder

    def test_render_structured_requires_open_object(self, node):
        with pytest.raises(DocumentBuilderError):
            render_structured(node, DocumentBuilder())


class TestGlobalFormatter:
    """Test formatter replacement."""

    def test_default_formatter(self):
        assert isinstance(get_node_formatter(), NodeFormatter)
        assert get_node_formatter() is get_node_formatter()

    def test_set_and_reset(self, node):
        class ShortFormatter(NodeFormatter):
            def render_concise(self, node):
                return node.name

        custom = ShortFormatter()
        set_node_formatter(custom)
        assert get_node_formatter() is custom
        assert render_concise(node) == "node-1"

        reset_node_formatter()
        assert render_concise(node) == "[node-1][n1-uuid][10.0.0.5:9300]"

    def test_module_functions_delegate_to_installed_formatter(self, node):
        class IdOnlyFormatter(NodeFormatter):
            def render_structured(self, node, builder, params=None):
                return builder.field("id", node.id)

        set_node_formatter(IdOnlyFormatter())
        assert _structured(node) == {"id": "n1-uuid"}
        assert render_concise.__doc__
        assert render_structured.__doc__
