"""Tests for frame catalog import."""
import logging
import pytest
from lens_edge.constants import BRAND_PLACEHOLDER, EMPTY_FILE_SUMMARY
from lens_edge.ingest import (
    NOT_FOUND,
    detect_delimiter,
    parse_frames_csv,
    parse_number,
    parse_reorder,
    parse_size_token,
    parse_stock,
    resolve_columns,
)

logger = logging.getLogger(__name__)


class TestParseFramesCsv:
    """Tests for parse_frames_csv."""

    def test_plain_columns(self):
        res = parse_frames_csv("A,B,DBL\n50,40,20")
        assert res.rejected == 0
        assert len(res.records) == 1
        f = res.records[0]
        assert (f.A, f.B, f.DBL) == (50.0, 40.0, 20.0)
        assert f.brand == BRAND_PLACEHOLDER
        assert f.stock == 0 and f.reorder is False
        logger.info("A,B,DBL -> %s", f)

    def test_unparsable_geometry_rejected(self):
        res = parse_frames_csv("A,B,DBL\nabc,40,xyz")
        assert res.records == []
        assert res.rejected == 1

    def test_size_column_only(self):
        res = parse_frames_csv("サイズ\n52□18")
        assert res.rejected == 0
        f = res.records[0]
        assert (f.A, f.DBL, f.B) == (52.0, 18.0, 0.0)

    @pytest.mark.parametrize("token", ["52-18", "52x18", "52X18", "52*18", "52 18", "52 □18", "5218", "size 52-18-140"])
    def test_size_separators(self, token):
        res = parse_frames_csv(f"size\n{token}")
        assert len(res.records) == 1
        assert (res.records[0].A, res.records[0].DBL) == (52.0, 18.0)

    def test_size_only_fills_missing_values(self):
        res = parse_frames_csv("A,DBL,サイズ\n,20,52-18\n49,,52-18")
        assert [(f.A, f.DBL) for f in res.records] == [(52.0, 20.0), (49.0, 18.0)]

    def test_size_column_without_match_rejects(self):
        res = parse_frames_csv("サイズ,brand\nfree,Ray")
        assert res.records == [] and res.rejected == 1

    def test_zero_size_groups_rejected(self):
        res = parse_frames_csv("サイズ\n00-18")
        assert res.rejected == 1

    def test_non_positive_dimensions_rejected(self):
        res = parse_frames_csv("A,DBL\n0,20\n-50,20\n50,0")
        assert res.records == [] and res.rejected == 3

    def test_non_finite_rejected(self):
        res = parse_frames_csv("A,DBL\nnan,20\ninf,20")
        assert res.rejected == 2

    def test_full_width_digits_rejected(self):
        res = parse_frames_csv("A,DBL\n５２,１８")
        assert res.records == [] and res.rejected == 1

    def test_short_row_rejected(self):
        res = parse_frames_csv("A,B,DBL\n50")
        assert res.rejected == 1

    def test_blank_and_empty_cell_rows_skipped_silently(self):
        res = parse_frames_csv("A,B,DBL\n\n , , \n,,\n50,40,20\n")
        assert len(res.records) == 1
        assert res.rejected == 0

    def test_bom_and_crlf(self):
        res = parse_frames_csv("\ufeffA,DBL\r\n50,20\r\n\r\n48,18\r\n")
        assert res.header == ["A", "DBL"]
        assert [(f.A, f.DBL) for f in res.records] == [(50.0, 20.0), (48.0, 18.0)]

    def test_tab_delimited(self):
        res = parse_frames_csv("brand\tA\tB\tDBL\nRay\t50\t40\t20\n")
        assert res.header == ["brand", "A", "B", "DBL"]
        assert res.records[0].brand == "Ray"
        assert res.records[0].DBL == 20.0

    def test_comma_anywhere_forces_comma_delimiter(self):
        res = parse_frames_csv("brand\tA\tDBL\nRay, Inc\t50\t20\n")
        assert res.header == ["brand\tA\tDBL"]
        assert res.records == [] and res.rejected == 1

    def test_japanese_headers_and_optional_fields(self):
        text = "ブランド,形状,玉型横,玉型縦,ブリッジ,SKU,カラー,在庫,発注\nRound S,ラウンド,46,42,22,RS-46,BK,1,要\n"
        f = parse_frames_csv(text).records[0]
        assert (f.brand, f.shape, f.A, f.B, f.DBL) == ("Round S", "ラウンド", 46.0, 42.0, 22.0)
        assert (f.sku, f.color, f.stock, f.reorder) == ("RS-46", "BK", 1, True)

    def test_cells_are_trimmed(self):
        f = parse_frames_csv(" brand , A , DBL \n  Ray  ,  50 , 20 ").records[0]
        assert f.brand == "Ray" and f.A == 50.0

    def test_unknown_columns_ignored_and_order_irrelevant(self):
        f = parse_frames_csv("DBL,note,A\n18,hello,52").records[0]
        assert (f.A, f.DBL) == (52.0, 18.0)

    def test_unparsable_b_defaults_to_zero(self):
        f = parse_frames_csv("A,B,DBL\n50,-,20").records[0]
        assert f.B == 0.0

    def test_ids_unique_across_imports(self):
        a = parse_frames_csv("A,DBL\n50,20\n50,20")
        b = parse_frames_csv("A,DBL\n50,20")
        ids = [f.id for f in a.records + b.records]
        assert len(set(ids)) == 3

    def test_summary(self):
        res = parse_frames_csv("A,B,DBL\n50,40,20\nabc,40,xyz")
        assert res.accepted == 1
        assert res.summary() == "読み込み: 1件 / スキップ: 1件\nヘッダ: A, B, DBL"

    @pytest.mark.parametrize("text", ["", "\n\n", "  \r\n \n", "\ufeff"])
    def test_empty_document(self, text):
        res = parse_frames_csv(text)
        assert res.empty is True
        assert res.records == [] and res.rejected == 0
        assert res.summary() == EMPTY_FILE_SUMMARY

    def test_header_only(self):
        res = parse_frames_csv("A,B,DBL\n")
        assert res.empty is False
        assert res.accepted == 0 and res.rejected == 0


class TestResolveColumns:
    """Tests for resolve_columns."""

    def test_absent_fields_not_found(self):
        idx = resolve_columns(["A", "DBL"])
        assert idx["A"] == 0 and idx["DBL"] == 1
        assert idx["B"] == NOT_FOUND and idx["size"] == NOT_FOUND

    def test_first_matching_position_wins(self):
        idx = resolve_columns(["x", "玉型幅", "A"])
        assert idx["A"] == 1

    def test_case_sensitive(self):
        idx = resolve_columns(["a", "dbl", "BRAND"])
        assert idx["A"] == NOT_FOUND and idx["DBL"] == NOT_FOUND and idx["brand"] == NOT_FOUND

    def test_shared_label_resolves_both_fields(self):
        idx = resolve_columns(["型番", "A", "DBL"])
        assert idx["brand"] == 0 and idx["sku"] == 0


class TestCellParsers:
    """Tests for the per-cell helpers."""

    def test_detect_delimiter(self):
        assert detect_delimiter("a\tb") == "\t"
        assert detect_delimiter("a\tb,c") == ","
        assert detect_delimiter("a;b") == ","

    def test_size_token_ascii_digits_only(self):
        assert parse_size_token("５２□１８") == (None, None)
        assert parse_size_token("99-99") == (99.0, 99.0)

    @pytest.mark.parametrize("raw", ["５２", "٥٢", "5_2", "0x34", "nan", "1e999", "52mm"])
    def test_number_rejects_non_plain_text(self, raw):
        assert parse_number(raw) is None

    @pytest.mark.parametrize("raw,expected", [("52", 52.0), ("+52.5", 52.5), (".5", 0.5), ("5.", 5.0), ("1e2", 100.0)])
    def test_number_plain_decimal(self, raw, expected):
        assert parse_number(raw) == expected

    @pytest.mark.parametrize("raw,expected", [("3", 3), ("2.7", 2), ("-2", 0), ("abc", 0), ("", 0), (None, 0)])
    def test_stock(self, raw, expected):
        assert parse_stock(raw) == expected

    @pytest.mark.parametrize("raw", ["1", "true", "TRUE", "はい", "要", "y"])
    def test_reorder_true(self, raw):
        assert parse_reorder(raw) is True

    @pytest.mark.parametrize("raw", ["0", "True", "yes", "Y", "", "-", None, " 1"])
    def test_reorder_false(self, raw):
        assert parse_reorder(raw) is False
