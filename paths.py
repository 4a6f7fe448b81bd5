from pathlib import Path

_project_root = Path(__file__).parent

CONICS_DIR = _project_root / "conics"
CONFIG_FILE = CONICS_DIR / "conics_config.yml"
