# tests/test_formatting.py

"""
Unit тесты для текстовых подписей зон
"""

from liquidity_zones.utils.formatting import format_selection_summary, format_volume
from liquidity_zones.zones.models import Side, Zone, ZoneLabel


class TestFormatVolume:
    def test_thousands_separator(self):
        """Тест: разделитель тысяч, дробная часть округляется"""
        assert format_volume(1234.6) == "1,235"
        assert format_volume(-11266) == "-11,266"

    def test_half_rounds_away_from_zero(self):
        """Тест: половина округляется от нуля, а не к чётному"""
        assert format_volume(2.5) == "3"
        assert format_volume(0.5) == "1"
        assert format_volume(-2.5) == "-3"
        assert format_volume(1500.5) == "1,501"

    def test_summary_uses_half_up(self):
        """Тест: сводка выбранной зоны использует то же округление"""
        zone = Zone(
            creation_index=1, lower=99.5, upper=100.5,
            bid_volume=2.5, ask_volume=7.5, delta=5.0,
            side=Side.BUY, label=ZoneLabel.EXTREME, style="LimeGreen",
        )
        assert format_selection_summary(zone) == "Buy Liquidity Zone\nBid: 3\nAsk: 8\nDelta: 5"
