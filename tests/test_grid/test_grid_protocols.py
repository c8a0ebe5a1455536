from fluidnet.grid import Grid, Pluggable, UtilityGrid
from fluidnet.testing import CountingGrid, PickyGrid, make_endpoint


class TestUtilityGridProtocol:
    def test_grid_satisfies_protocol(self):
        assert isinstance(Grid(), UtilityGrid)

    def test_test_grids_satisfy_protocol(self):
        assert isinstance(CountingGrid(), UtilityGrid)
        assert isinstance(PickyGrid(accepts=lambda _: True), UtilityGrid)

    def test_class_with_all_members_satisfies(self):
        class MinimalGrid:
            is_operating = True

            def can_plug_in(self, endpoint):
                return True

            def plug_in(self, endpoint):
                return True

            def is_plugged_in(self, endpoint):
                return False

            def unplug(self, endpoint):
                pass

            def tick(self):
                pass

        assert isinstance(MinimalGrid(), UtilityGrid)

    def test_class_without_tick_does_not_satisfy(self):
        class NoTick:
            is_operating = True

            def can_plug_in(self, endpoint):
                return True

            def plug_in(self, endpoint):
                return True

            def is_plugged_in(self, endpoint):
                return False

            def unplug(self, endpoint):
                pass

        assert not isinstance(NoTick(), UtilityGrid)


class TestPluggableProtocol:
    def test_endpoint_satisfies_protocol(self):
        assert isinstance(make_endpoint(), Pluggable)

    def test_class_without_can_join_does_not_satisfy(self):
        class NoJoin:
            id = "x"
            connection = None

        assert not isinstance(NoJoin(), Pluggable)
