# config_manager.py - JSON config manager

import json
import logging
import os

from ..core.bigram_model import BigramConfig, DEFAULT_CONNECTORS

logger = logging.getLogger(__name__)

DEFAULTS = {
    "corpus_path": os.path.join("res", "messages.txt"),
    "result_count": 3,
    "confidence_threshold": 0.65,
    "connectors": list(DEFAULT_CONNECTORS),
    "quit_token": "/q",
    "seed": None,
    "log_level": "WARNING",
}


class Config:
    def __init__(self, path="config.json"):
        self.path = path
        self.data = {k: (list(v) if isinstance(v, list) else v) for k, v in DEFAULTS.items()}
        self._load()

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("ignoring config %s: %s", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("ignoring config %s: expected a JSON object", self.path)
            return
        unknown = set(loaded) - set(DEFAULTS)
        if unknown:
            logger.warning("unknown config keys ignored: %s", ", ".join(sorted(unknown)))
        self.data.update({k: v for k, v in loaded.items() if k in DEFAULTS})

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def set(self, key, val):
        """Set an option, coercing strings to the default's type."""
        if key not in DEFAULTS:
            raise KeyError(f"No such option: {key}")
        ref = DEFAULTS[key]
        if isinstance(val, str) and ref is not None and not isinstance(ref, str):
            if isinstance(ref, list):
                val = [w for w in val.replace(",", " ").split() if w]
            else:
                val = type(ref)(val)
        elif key == "seed" and isinstance(val, str):
            val = int(val) if val.strip() else None
        self.data[key] = val

    def bigram_config(self) -> BigramConfig:
        return BigramConfig(
            result_count=int(self.data["result_count"]),
            confidence_threshold=float(self.data["confidence_threshold"]),
            connectors=tuple(self.data["connectors"]),
            seed=self.data["seed"],
        )

