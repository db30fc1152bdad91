import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

load_dotenv()

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yaml"

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "app": {
        "page_title": "Conflict Management Styles Quiz",
        "page_icon": "🧭",
        "layout": "centered",
    },
    "chart": {
        "color": "#F97316",
        "fill_opacity": 0.4,
        "tick_count": 4,
        "height": 420,
    },
    "logging": {
        "level": "INFO",
    },
}


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Read config.yaml (or $QUIZ_CONFIG) over the defaults, section by section."""
    cfg = copy.deepcopy(DEFAULTS)
    p = Path(path or os.getenv("QUIZ_CONFIG") or CONFIG_PATH)
    if p.exists():
        with open(p, "r", encoding="utf-8") as f:
            user = yaml.safe_load(f) or {}
        for section, values in user.items():
            if isinstance(values, dict):
                cfg.setdefault(section, {}).update(values)
            else:
                cfg[section] = values
    if os.getenv("QUIZ_LOG_LEVEL"):
        cfg["logging"]["level"] = os.getenv("QUIZ_LOG_LEVEL")
    return cfg


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
