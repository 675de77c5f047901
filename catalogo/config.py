"""
Catálogo SCIAN → BMX — Configuration: paths, field names, UI constants.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths — override with CATALOGO_DATA_DIR / CATALOGO_PUBLIC_DIR for deployment
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("CATALOGO_DATA_DIR", str(Path.cwd() / "data")))
_public_dir = Path(os.environ.get("CATALOGO_PUBLIC_DIR", str(Path.cwd() / "public")))
DATA_FOLDER = _data_dir
PUBLIC_FOLDER = _public_dir
SOURCE_CSV = _data_dir / "catalogo.csv"
CATALOG_JSON = _public_dir / "catalogo.json"
PREFERENCES_FILE = _data_dir / "preferences.json"

# ---------------------------------------------------------------------------
# Wire format — CSV headers in, JSON fields out
# ---------------------------------------------------------------------------
CATEGORY_FIELD = "DescripcionCIAN"
CODE_FIELD = "ActividadBMX"
DESCRIPTION_FIELD = "DescripcionBMX"
OUTPUT_FIELDS = [CATEGORY_FIELD, CODE_FIELD, DESCRIPTION_FIELD]

# Source exports name the code column either way; first match wins per row
CODE_SOURCE_FIELDS = ["ActividadBMXID", "ActividadBMX"]

NO_CATEGORY_LABEL = "(Sin DescripcionCIAN)"

# Derived column holding the normalized category text
CATEGORY_NORM_COL = "category_norm"

# ---------------------------------------------------------------------------
# Search UI
# ---------------------------------------------------------------------------
DEBOUNCE_MS = 250
DISPLAY_CAP_OPTIONS = (100, 200, 500, 1000)
DEFAULT_DISPLAY_CAP = 200
COPY_FEEDBACK_SECONDS = 2.0

# ---------------------------------------------------------------------------
# Display preference
# ---------------------------------------------------------------------------
THEMES = ("light", "dark")
DEFAULT_THEME = "light"
