"""Tests for the Aggregator frequency maps."""

from resource_ranker.aggregation import Aggregator
from resource_ranker.models import ScanMode
from resource_ranker.scanning import BlockScanner


class TestAggregator:
    def test_starts_empty(self):
        agg = Aggregator()
        assert agg.colors == {}
        assert agg.numbers == {}
        assert agg.classes == {}

    def test_colors_accumulate(self):
        agg = Aggregator()
        agg.add_colors(["0xff000000", "0xffffffff"])
        agg.add_colors(["0xff000000"])
        assert agg.colors == {"0xff000000": 2, "0xffffffff": 1}

    def test_numbers_accumulate(self):
        agg = Aggregator()
        agg.add_numbers([16, 16, 24])
        assert agg.numbers == {16: 2, 24: 1}

    def test_class_sizes_overwrite(self):
        agg = Aggregator()
        agg.record_classes([("Foo", 3), ("Bar", 5)])
        agg.record_classes([("Foo", 1)])
        assert agg.classes == {"Foo": 1, "Bar": 5}


class TestScanText:
    TEXT = "class Card { double w = 16; build() { return Box(Color(0xff1da1f3), 24); } }\n"

    def test_all_modes(self):
        agg = Aggregator()
        agg.scan_text(self.TEXT, ScanMode.default_modes())
        assert agg.colors == {"0xff1da1f3": 1}
        # 24 is followed by ")" and 3 closes the color literal
        assert agg.numbers == {3: 1, 24: 1}
        assert agg.classes == {"Card": 2}

    def test_contrast_mode_collects_colors_only(self):
        agg = Aggregator()
        agg.scan_text(self.TEXT, {ScanMode.CONTRAST})
        assert agg.colors == {"0xff1da1f3": 1}
        assert agg.numbers == {}
        assert agg.classes == {}

    def test_class_mode_only(self):
        agg = Aggregator()
        agg.scan_text(self.TEXT, {ScanMode.CLASS})
        assert agg.colors == {}
        assert agg.classes == {"Card": 2}

    def test_custom_block_scanner(self):
        agg = Aggregator(BlockScanner(strip_literals=True))
        agg.scan_text("class Foo { var s = '}'; a(); }", {ScanMode.CLASS})
        assert agg.classes == {"Foo": 2}
