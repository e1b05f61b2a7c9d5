"""Configuration — variables d'environnement + valeurs par défaut."""
import os
from pathlib import Path

DATA_DIR = Path(__file__).parent.parent / "data"

DB_PATH           = os.getenv("DB_PATH", str(DATA_DIR / "mnemo.db"))
MAX_BLOCK_DEPTH   = int(os.getenv("MAX_BLOCK_DEPTH", "32"))   # 0 = plafond DEPTH_CEILING (validator.py)
UNKNOWN_PROGRAMME = os.getenv("UNKNOWN_PROGRAMME", "Unknown")
CORS_ORIGINS      = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
