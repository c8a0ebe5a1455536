import networkx as nx
import pytest

from fluidnet.grid import Grid
from fluidnet.network import ValidationError
from fluidnet.testing import make_endpoint


class TestTopology:
    def test_returns_graph(self, network, lamp):
        network.plug_in(lamp)
        assert isinstance(network.topology([lamp]), nx.Graph)

    def test_nodes_for_grids_and_endpoints(self, network, lamp, generator):
        network.plug_in(lamp)
        network.plug_in(generator)
        graph = network.topology([lamp, generator])

        assert set(graph.nodes) == {("grid", 0), ("endpoint", "lamp"), ("endpoint", "generator")}
        assert graph.nodes[("grid", 0)]["kind"] == "grid"
        assert graph.nodes[("endpoint", "lamp")]["kind"] == "endpoint"

    def test_edges_are_membership(self, network, lamp, generator):
        network.plug_in(lamp)
        graph = network.topology([lamp, generator])

        assert graph.has_edge(("endpoint", "lamp"), ("grid", 0))
        assert graph.degree(("endpoint", "generator")) == 0

    def test_grid_operating_flag(self, network, generator):
        network.plug_in(generator)
        network.update(1.0)
        graph = network.topology([generator])
        assert graph.nodes[("grid", 0)]["operating"] is True

    def test_empty_grids_are_isolated(self, network):
        network.register_grid(Grid())
        graph = network.topology([])
        assert list(nx.isolates(graph)) == [("grid", 0)]


class TestValidate:
    def test_valid_network(self, network, lamp, generator):
        network.plug_in(lamp)
        network.plug_in(generator)
        network.validate([lamp, generator])

    def test_unplugged_endpoints_are_valid(self, network, lamp):
        network.validate([lamp])

    def test_duplicate_endpoint_ids(self, network):
        with pytest.raises(ValidationError, match="Duplicate endpoint id 'twin'"):
            network.validate([make_endpoint("twin"), make_endpoint("twin")])

    def test_endpoint_in_two_grids(self, network, lamp):
        first, second = Grid(), Grid()
        network.register_grid(first)
        network.register_grid(second)
        first.plug_in(lamp)
        second.plug_in(lamp)  # bypasses the registry

        with pytest.raises(ValidationError, match="'lamp' is plugged into 2 grids: \\[0, 1\\]"):
            network.validate([lamp])

    def test_registry_keeps_one_grid_per_endpoint(self, network, lamp):
        for _ in range(3):
            network.plug_in_to(lamp, Grid())
        network.validate([lamp])
