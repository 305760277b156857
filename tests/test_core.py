"""End-to-end tests for ResourceRanker runs."""

import pytest

from resource_ranker import RankerConfig, ResourceRanker, ScanMode, rank_resources
from resource_ranker.exceptions import InvalidPathError
from resource_ranker.models import RankedEntry


class TestColorRanking:
    def test_top_color_with_limit(self, color_project):
        report = ResourceRanker(color_project, modes={ScanMode.COLOR}, limit=1).run()
        assert report.colors == [RankedEntry("0xffabcdef", 3)]
        assert report.files_scanned == 2
        assert report.modes == ["color"]

    def test_unlimited(self, color_project):
        report = ResourceRanker(color_project, modes={ScanMode.COLOR}, limit=0).run()
        assert report.colors == [RankedEntry("0xffabcdef", 3), RankedEntry("0xff123456", 1)]

    def test_other_categories_not_computed(self, color_project):
        report = ResourceRanker(color_project, modes={ScanMode.COLOR}).run()
        assert report.numbers == []
        assert report.classes == []
        assert report.contrast == []


class TestDefaultModes:
    def test_default_modes(self, write_sources):
        root = write_sources(
            {
                "lib/card.dart": (
                    "class Card extends StatelessWidget {\n"
                    "  Widget build(BuildContext context) {\n"
                    "    return SizedBox(height: 24, child: Text('x'));\n"
                    "  }\n"
                    "}\n"
                ),
                "lib/tile.dart": "class Tile { a(); b(); c(); }\nvar pad = EdgeInsets.all(8.0);\n",
            }
        )
        report = ResourceRanker(root).run()
        assert report.modes == ["color", "num", "class"]
        assert report.colors == []
        assert report.numbers == [RankedEntry(8, 1)]
        assert report.classes == [RankedEntry("Tile", 3), RankedEntry("Card", 1)]

    def test_limit_defaults_to_config(self, write_sources):
        root = write_sources({"a.dart": "f(10) g(20) g(20) h(30) h(30) h(30)\n"})
        report = ResourceRanker(root, modes={ScanMode.NUM}, config=RankerConfig(limit=2)).run()
        assert report.limit == 2
        assert report.numbers == [RankedEntry(30, 3), RankedEntry(20, 2)]


class TestClassRecords:
    def test_last_file_wins(self, write_sources):
        root = write_sources(
            {
                "a.dart": "class Foo { a(); b(); }",
                "b.dart": "class Foo { a(); }",
            }
        )
        report = ResourceRanker(root, modes={ScanMode.CLASS}).run()
        assert report.classes == [RankedEntry("Foo", 1)]

    def test_strip_literals_config(self, write_sources):
        root = write_sources({"a.dart": "class Foo { var s = '}'; a(); }"})
        naive = ResourceRanker(root, modes={ScanMode.CLASS}).run()
        stripped = ResourceRanker(
            root, modes={ScanMode.CLASS}, config=RankerConfig(strip_literals=True)
        ).run()
        assert naive.classes == [RankedEntry("Foo", 0)]
        assert stripped.classes == [RankedEntry("Foo", 2)]


class TestContrastMode:
    def test_contrast_only(self, write_sources):
        root = write_sources(
            {"a.dart": "a(Color(0xffffffff)); b(Color(0xffffffff)); c(Colors.red);\n"}
        )
        report = ResourceRanker(root, modes={ScanMode.CONTRAST}).run()
        assert report.modes == ["contrast"]
        assert report.colors == []
        [row] = report.contrast
        assert row.color == "0xffffffff"
        assert row.count == 2
        assert row.black_label == "AAA"
        assert row.white_label == "fail"

    def test_contrast_respects_limit(self, color_project):
        report = ResourceRanker(color_project, modes={ScanMode.CONTRAST}, limit=1).run()
        assert [row.color for row in report.contrast] == ["0xffabcdef"]


class TestFiles:
    def test_other_extensions_ignored(self, write_sources):
        root = write_sources({"a.dart": "f(16) ", "b.kt": "f(32) "})
        report = ResourceRanker(root, modes={ScanMode.NUM}).run()
        assert report.files_scanned == 1
        assert report.numbers == [RankedEntry(16, 1)]

    def test_configured_extension(self, write_sources):
        root = write_sources({"a.dart": "f(16) ", "b.kt": "f(32) "})
        report = ResourceRanker(
            root, modes={ScanMode.NUM}, config=RankerConfig(extension="kt")
        ).run()
        assert report.numbers == [RankedEntry(32, 1)]

    def test_unreadable_file_skipped(self, write_sources):
        root = write_sources({"big.dart": "f(16) " * 100, "small.dart": "f(32) "})
        config = RankerConfig(max_file_size_mb=100 / (1024 * 1024))
        report = ResourceRanker(root, modes={ScanMode.NUM}, config=config).run()
        assert report.files_scanned == 1
        assert [s.path for s in report.skipped_files] == [str(root.resolve() / "big.dart")]
        assert report.numbers == [RankedEntry(32, 1)]

    def test_missing_root(self, tmp_path):
        with pytest.raises(InvalidPathError):
            ResourceRanker(tmp_path / "missing").run()

    def test_empty_root(self, tmp_path):
        report = ResourceRanker(tmp_path).run()
        assert report.files_scanned == 0
        assert report.colors == report.numbers == report.classes == []


def test_rank_resources_accepts_keywords(color_project):
    report = rank_resources(color_project, ["color", "contrast"], limit=1)
    assert report.modes == ["color", "contrast"]
    assert report.colors == [RankedEntry("0xffabcdef", 3)]
    assert len(report.contrast) == 1


def test_no_modes_scans_nothing(color_project):
    report = ResourceRanker(color_project, modes=set()).run()
    assert report.modes == []
    assert report.colors == report.numbers == report.classes == report.contrast == []
