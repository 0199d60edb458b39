"""
Fixed report rules.

Column positions, delimiters and the tracked item are constants on purpose:
the input layout is a known spreadsheet export.
"""

INPUT_DELIMITER = ";"
OUTPUT_DELIMITER = ","
OUTPUT_ENCODING = "utf-8"

DEFAULT_INPUT_PATH = "orders.csv"
DEFAULT_OUTPUT_PATH = "ordersReport.csv"

# Positional columns of an input record
ITEM_COLUMN = 2
PRICE_COLUMN = 3
QUANTITY_COLUMN = 4
INPUT_COLUMNS = 5

TOTAL_HEADER = "Total"
SUM_LABEL = "Sum"
TRACKED_ITEM = "Ball Pen"
TRACKED_ITEM_LABEL = "Ball Pens"

# Spreadsheet exports that are not UTF-8 come from Western-European locales
LEGACY_ENCODINGS = ["cp1252", "latin_1"]
