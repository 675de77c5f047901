"""
Excel colors, fonts, fills, borders and alignments for catalog exports.
"""
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

# ---------------------------------------------------------------------------
# Color constants
# ---------------------------------------------------------------------------
SLATE_TEAL = "496B6D"
DARK_SLATE = "3A3A37"
LIGHT_TEAL = "F0F4F3"
HEADER_BG = "496B6D"
ALTERNATE_ROW = "F5F5F5"
WHITE = "FFFFFF"
BLACK = "000000"
GRAY_666 = "666666"
AMBER = "A87C4F"

# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------
TITLE_FONT = Font(name="Calibri", size=20, bold=True, color=DARK_SLATE)
SUBTITLE_FONT = Font(name="Calibri", size=11, italic=True, color=GRAY_666)
WARNING_FONT = Font(name="Calibri", size=10, italic=True, color=AMBER)
HEADER_FONT = Font(name="Calibri", size=11, bold=True, color=WHITE)
DATA_FONT = Font(name="Calibri", size=10, color=BLACK)
CODE_FONT = Font(name="Courier New", size=10, bold=True, color=BLACK)
SECTION_FONT = Font(name="Calibri", size=13, bold=True, color=SLATE_TEAL)

# ---------------------------------------------------------------------------
# Fills
# ---------------------------------------------------------------------------
HEADER_FILL = PatternFill(start_color=HEADER_BG, end_color=HEADER_BG, fill_type="solid")
SECTION_FILL = PatternFill(start_color=LIGHT_TEAL, end_color=LIGHT_TEAL, fill_type="solid")
ALTERNATE_FILL = PatternFill(start_color=ALTERNATE_ROW, end_color=ALTERNATE_ROW, fill_type="solid")

# ---------------------------------------------------------------------------
# Borders
# ---------------------------------------------------------------------------
THIN_BORDER = Border(
    left=Side(style="thin", color="CCCCCC"),
    right=Side(style="thin", color="CCCCCC"),
    top=Side(style="thin", color="CCCCCC"),
    bottom=Side(style="thin", color="CCCCCC"),
)
HEADER_BORDER = Border(
    left=Side(style="thin", color=SLATE_TEAL),
    right=Side(style="thin", color=SLATE_TEAL),
    top=Side(style="thin", color=SLATE_TEAL),
    bottom=Side(style="medium", color=SLATE_TEAL),
)

# ---------------------------------------------------------------------------
# Alignments
# ---------------------------------------------------------------------------
CENTER = Alignment(horizontal="center", vertical="center")
LEFT = Alignment(horizontal="left", vertical="center")
WRAP = Alignment(horizontal="left", vertical="center", wrap_text=True)
