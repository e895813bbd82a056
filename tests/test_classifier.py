# tests/test_classifier.py

"""
Unit тесты для classify_imbalance
"""

import pytest
from liquidity_zones.imbalance.classifier import classify_imbalance, compute_imbalance_ratio
from liquidity_zones.zones.models import Side, StyleTokens, ZoneLabel


class TestClassifyImbalance:
    def setup_method(self):
        self.styles = StyleTokens()
        self.thresholds = (0.15, 0.30, 0.45)

    def classify(self, bid, ask, enable_color_layers=True, thresholds=None):
        moderate, strong, extreme = thresholds or self.thresholds
        return classify_imbalance(bid, ask, moderate, strong, extreme,
                                  enable_color_layers=enable_color_layers, styles=self.styles)

    def test_strong_buy_scenario(self):
        """Тест: bid=300, ask=700 -> ratio 0.4 -> Strong Buy"""
        profile = self.classify(300, 700)

        assert profile.ratio == pytest.approx(0.4)
        assert profile.delta == 400
        assert profile.label == ZoneLabel.STRONG
        assert profile.side == Side.BUY
        assert profile.style == "LimeGreen"
        assert profile.highlight is None

    def test_absorption_sell_scenario(self):
        """Тест: bid=520, ask=480 -> ratio -0.04 -> Absorption Sell"""
        profile = self.classify(520, 480)

        assert profile.ratio == pytest.approx(-0.04)
        assert profile.label == ZoneLabel.ABSORPTION
        assert profile.side == Side.SELL
        assert profile.style == "DimGray"
        assert profile.highlight is None

    def test_zero_ratio_is_buy_absorption(self):
        """Тест: ratio ровно 0 -> Absorption, сторона Buy"""
        profile = self.classify(500, 500)

        assert profile.ratio == 0
        assert profile.label == ZoneLabel.ABSORPTION
        assert profile.side == Side.BUY

    def test_zero_total_has_no_style(self):
        """Тест: нулевой объём -> зона не создаётся"""
        profile = self.classify(0, 0)

        assert profile.style is None
        assert profile.has_style is False

    def test_extreme_sell_gets_highlight(self):
        """Тест: экстремальная агрессия продавцов -> красный + жёлтая обводка"""
        profile = self.classify(900, 100)

        assert profile.label == ZoneLabel.EXTREME
        assert profile.side == Side.SELL
        assert profile.style == "Red"
        assert profile.highlight == "Yellow"

    def test_strong_sell(self):
        """Тест: bid=700, ask=300 -> Strong Sell"""
        profile = self.classify(700, 300)

        assert profile.label == ZoneLabel.STRONG
        assert profile.side == Side.SELL
        assert profile.style == "Red"

    def test_moderate_uses_moderate_token(self):
        """Тест: умеренный дисбаланс -> оранжевый независимо от стороны"""
        buy = self.classify(400, 600)
        sell = self.classify(600, 400)

        assert buy.label == ZoneLabel.MODERATE
        assert sell.label == ZoneLabel.MODERATE
        assert buy.style == sell.style == "Orange"
        assert buy.side == Side.BUY
        assert sell.side == Side.SELL

    def test_threshold_equality_reaches_tier(self):
        """Тест: |ratio| равный порогу достигает уровня (>=)"""
        assert self.classify(425, 575).label == ZoneLabel.MODERATE  # 0.15
        assert self.classify(350, 650).label == ZoneLabel.STRONG  # 0.30
        assert self.classify(275, 725).label == ZoneLabel.EXTREME  # 0.45

    def test_disabled_layers_absorption_has_no_style(self):
        """Тест: без цветных слоёв поглощение не рисуется"""
        profile = self.classify(520, 480, enable_color_layers=False)

        assert profile.label == ZoneLabel.ABSORPTION
        assert profile.style is None

    def test_disabled_layers_strong_uses_absorption_token(self):
        """Тест: без цветных слоёв сильные зоны рисуются серым, а не пропадают"""
        strong = self.classify(300, 700, enable_color_layers=False)
        extreme = self.classify(100, 900, enable_color_layers=False)

        assert strong.label == ZoneLabel.STRONG
        assert strong.style == "DimGray"
        assert extreme.style == "DimGray"
        assert extreme.highlight == "Yellow"

    def test_pure_function(self):
        """Тест: одинаковый вход -> одинаковый профиль"""
        assert self.classify(123, 456) == self.classify(123, 456)

    def test_unordered_thresholds_do_not_raise(self):
        """Тест: пороги не по возрастанию обрабатываются каскадом без ошибок"""
        thresholds = (0.5, 0.2, 0.1)

        assert self.classify(300, 700, thresholds=thresholds).label == ZoneLabel.ABSORPTION
        assert self.classify(200, 800, thresholds=thresholds).label == ZoneLabel.EXTREME

    def test_compute_ratio_zero_total(self):
        """Тест: нулевой объём -> ratio 0"""
        assert compute_imbalance_ratio(0, 0) == (0, 0.0)
