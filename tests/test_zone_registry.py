# tests/test_zone_registry.py

"""
Unit тесты для ZoneRegistry: старение и принятие цены
"""

import pytest
from liquidity_zones.effects import ClearSelectionSummary, RemoveVisual
from liquidity_zones.zones.models import Side, Zone, ZoneLabel
from liquidity_zones.zones.registry import ZoneRegistry
from liquidity_zones.zones.selector import ZoneSelector

TICK = 0.25


def make_zone(index, side=Side.BUY, lower=99.5, upper=100.5):
    return Zone(
        creation_index=index,
        lower=lower,
        upper=upper,
        bid_volume=300.0,
        ask_volume=700.0,
        delta=400.0,
        side=side,
        label=ZoneLabel.STRONG,
        style="LimeGreen" if side == Side.BUY else "Red",
    )


class TestZoneRegistry:
    def setup_method(self):
        self.registry = ZoneRegistry()
        self.selector = ZoneSelector(self.registry)

    def purge(self, bar, price, lifespan=300, tolerance=2):
        return self.registry.purge(bar, price, TICK, lifespan, tolerance, selector=self.selector)

    def test_empty_purge(self):
        """Тест: пустой реестр -> нет эффектов"""
        assert self.purge(10, 100.0) == []

    def test_lifespan_boundary(self):
        """Тест: зона бара 10, lifespan 300 живёт до 310 включительно, удаляется на 311"""
        self.registry.add(make_zone(10))

        assert self.purge(310, 100.0) == []
        assert 10 in self.registry

        effects = self.purge(311, 100.0)

        assert effects == [RemoveVisual("LZ_ZONE_10")]
        assert len(self.registry) == 0

    def test_sell_zone_accepted_above(self):
        """Тест: Sell-зона удаляется при закрытии выше upper + tol*tick"""
        self.registry.add(make_zone(1, Side.SELL))

        assert self.purge(2, 101.0) == []  # ровно на границе
        assert self.purge(3, 101.25) == [RemoveVisual("LZ_ZONE_1")]

    def test_buy_zone_accepted_below(self):
        """Тест: Buy-зона удаляется при закрытии ниже lower - tol*tick"""
        self.registry.add(make_zone(1, Side.BUY))

        assert self.purge(2, 99.0) == []
        assert self.purge(3, 98.75) == [RemoveVisual("LZ_ZONE_1")]

    def test_acceptance_never_reversed(self):
        """Тест: Sell-зона не удаляется снизу, Buy-зона не удаляется сверху"""
        self.registry.add(make_zone(1, Side.SELL))
        self.registry.add(make_zone(2, Side.BUY))

        assert self.purge(3, 90.0) == [RemoveVisual("LZ_ZONE_2")]
        assert 1 in self.registry

        self.registry.add(make_zone(4, Side.BUY))
        assert self.purge(5, 110.0) == [RemoveVisual("LZ_ZONE_1")]
        assert 4 in self.registry

    @pytest.mark.parametrize("tolerance", [0, -3])
    def test_non_positive_tolerance_is_one_tick(self, tolerance):
        """Тест: допуск <= 0 заменяется на 1 тик"""
        self.registry.add(make_zone(1, Side.SELL))

        assert self.purge(2, 100.75, tolerance=tolerance) == []
        assert self.purge(3, 101.0, tolerance=tolerance) == [RemoveVisual("LZ_ZONE_1")]

    def test_removal_in_creation_order(self):
        """Тест: эффекты удаления идут в порядке создания"""
        for index in (1, 2, 3):
            self.registry.add(make_zone(index))

        effects = self.purge(400, 100.0)

        assert [e.id for e in effects] == ["LZ_ZONE_1", "LZ_ZONE_2", "LZ_ZONE_3"]

    def test_purge_clears_selection(self):
        """Тест: выбор удалённой зоны сбрасывается в том же цикле"""
        self.registry.add(make_zone(1, Side.SELL))
        self.registry.add(make_zone(2, Side.BUY))
        self.selector.select(1)

        effects = self.purge(3, 105.0)

        assert effects == [RemoveVisual("LZ_ZONE_1"), ClearSelectionSummary()]
        assert self.selector.selected_index is None
        assert self.selector.selected_zone() is None

    def test_purge_keeps_other_selection(self):
        """Тест: выбор другой зоны не трогается"""
        self.registry.add(make_zone(1, Side.SELL))
        self.registry.add(make_zone(2, Side.BUY))
        self.selector.select(2)

        effects = self.purge(3, 105.0)

        assert effects == [RemoveVisual("LZ_ZONE_1")]
        assert self.selector.selected_index == 2

    def test_add_same_bar_replaces(self):
        """Тест: повторная зона того же бара заменяет прежнюю"""
        self.registry.add(make_zone(5, Side.BUY))
        self.registry.add(make_zone(5, Side.SELL))

        assert len(self.registry) == 1
        assert self.registry.get(5).side == Side.SELL

    def test_clear(self):
        """Тест: очистка реестра возвращает удаления и сброс выбора"""
        self.registry.add(make_zone(1))
        self.registry.add(make_zone(2))
        self.selector.select(2)

        effects = self.registry.clear(self.selector)

        assert effects == [RemoveVisual("LZ_ZONE_1"), RemoveVisual("LZ_ZONE_2"), ClearSelectionSummary()]
        assert len(self.registry) == 0

    def test_to_dataframe(self):
        """Тест: снимок живых зон в DataFrame"""
        self.registry.add(make_zone(1, Side.BUY))
        self.registry.add(make_zone(2, Side.SELL, lower=101.0, upper=102.0))

        df = self.registry.to_dataframe()

        assert list(df["creation_index"]) == [1, 2]
        assert list(df["side"]) == ["Buy", "Sell"]
        assert df["upper"].iloc[1] == 102.0

    def test_empty_dataframe_has_columns(self):
        """Тест: пустой реестр -> пустой DataFrame с колонками"""
        df = self.registry.to_dataframe()

        assert df.empty
        assert "creation_index" in df.columns
