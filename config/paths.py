"""
Project Path Configuration

Centralized path definitions for cached data and rendered figures
Bronze (raw downloads) → outputs (figures, maps)
"""

from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.parent

# ==============================================================================
# DATA
# ==============================================================================

DATA_ROOT = PROJECT_ROOT / "data"

# Bronze Layer: raw downloads, never modified after fetch
BRONZE = DATA_ROOT / "bronze"
BRONZE_TIPS = BRONZE / "tips"

DEFAULT_TIPS_FILE = BRONZE_TIPS / "tips.csv"

# ==============================================================================
# OUTPUTS
# ==============================================================================

OUTPUTS_ROOT = PROJECT_ROOT / "outputs"
FIGURES = OUTPUTS_ROOT / "figures"
MAPS = OUTPUTS_ROOT / "maps"

# ==============================================================================
# DIRECTORY INITIALIZATION
# ==============================================================================

def ensure_directories():
    """Create all necessary directories if they don't exist"""
    for directory in [BRONZE, BRONZE_TIPS, OUTPUTS_ROOT, FIGURES, MAPS]:
        directory.mkdir(parents=True, exist_ok=True)
