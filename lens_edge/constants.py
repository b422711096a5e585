from typing import Dict, Tuple

# Lens materials: (key, display name, refractive index)
MATERIAL_ROWS: Tuple[Tuple[str, str, float], ...] = (
    ("1.60", "1.60 (MR-8等)", 1.60),
    ("1.67", "1.67 (高屈折)", 1.67),
    ("1.74", "1.74 (超高屈折)", 1.74),
    ("1.76", "1.76 (超高屈折・東海)", 1.76),
)
DEFAULT_MATERIAL_KEY = "1.67"

MANUFACTURERS: Tuple[str, ...] = ("HOYA", "東海光学", "伊藤光学")

# outer aspheric, double aspheric, progressive, mid-range, near-near
DESIGNS: Tuple[str, ...] = ("外面非球面", "両面非球面", "遠近", "中近", "近々")

# Center thickness policy (mm)
DEFAULT_BASE_CT = 1.5
SAFETY_MARGIN_DEFAULT = 0.2
SAFETY_MARGIN_RANGE = (0.0, 0.6)

# Finishing allowance added on each side of the blank (mm)
ALLOWANCE_DEFAULT = 2.0
ALLOWANCE_RANGE = (1.0, 4.0)

# Model constant: sag approximation denominator (mm -> m and the 1/2 of r²/2R)
SAG_DENOMINATOR = 2000.0

# Representative size used by the material comparison (A, B, DBL)
REPRESENTATIVE_FRAME: Tuple[float, float, float] = (50.0, 40.0, 20.0)

# Catalog import
BRAND_PLACEHOLDER = "(無名)"  # unnamed

COLUMN_SYNONYMS: Dict[str, Tuple[str, ...]] = {
    "brand": ("ブランド", "ブランド/型", "型番", "品番", "name", "brand", "モデル"),
    "shape": ("形状", "シェイプ", "shape", "形"),
    "A": ("A", "玉型横", "玉型横幅", "玉型幅", "レンズ横幅"),
    "B": ("B", "玉型縦", "玉型縦幅", "レンズ縦幅"),
    "DBL": ("DBL", "ブリッジ", "ブリッジ幅", "鼻幅", "Bridge"),
    "size": ("サイズ", "A□DBL", "表記", "規格", "size", "Size"),
    "sku": ("SKU", "sku", "型番", "品番"),
    "color": ("カラー", "color", "Color", "COL"),
    "stock": ("在庫", "在庫数", "stock", "Stock"),
    "reorder": ("発注", "発注フラグ", "reorder", "order_flag"),
}

REORDER_TRUE_TOKENS = frozenset({"1", "true", "TRUE", "はい", "要", "y"})

# Two two-digit groups, e.g. 52□18, 52-18, 52x18, 52 18
SIZE_TOKEN_PATTERN = r"(\d{2})(?:\s*□|\s*[-xX*\s])?(\d{2})"

# Report labels (consumed verbatim by the presentation layer)
REPORT_TITLE = "レンズ厚み・フレーム最適化 見積"
STORE_NAME_DEFAULT = "アオイノメガネ / AOINOMEGANE"
EMPTY_FILE_SUMMARY = "空のファイルでした"

RANKING_COLUMNS: Tuple[str, ...] = (
    "brand", "shape", "A", "B", "DBL", "sku", "color", "stock", "reorder",
    "decentration_r", "decentration_l", "ed_r", "ed_l",
    "edge_r", "edge_l", "worst",
)
