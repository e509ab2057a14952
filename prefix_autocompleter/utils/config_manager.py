# config_manager.py - JSON config manager

import json
import os

from prefix_autocompleter.utils.logger_utils import LOG, norm_level

DEFAULT_CONFIG_PATH = "config.json"

DEFAULTS = {
    "top_k": 5,                 # suggestions per query
    "terms_path": os.path.join("data", "sample_terms.txt"),
    "log_level": "WARNING",
    "log_path": os.path.join("logs", "autocompleter.log"),
    "log_color": True,
    "bench_runs": 200,
    "bench_warmup": 20,
    "show_weights": True,       # weight column in the CLI table
}

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def _non_negative(v):
    if v < 0:
        raise ValueError(f"must be >= 0, got {v}")
    return v


# per-key checks run after type coercion; they may normalise the value
VALIDATORS = {
    "top_k": _non_negative,
    "bench_runs": _non_negative,
    "bench_warmup": _non_negative,
    "log_level": norm_level,
}


def _coerce_key(key, val):
    """Coerce val to the type of DEFAULTS[key], then apply that key's validator."""
    out = _coerce(DEFAULTS[key], val)
    check = VALIDATORS.get(key)
    return check(out) if check else out


def _coerce(default, val):
    """Convert val to the type of default (bool needs its own parsing)."""
    if isinstance(default, bool):
        if isinstance(val, bool):
            return val
        s = str(val).strip().lower()
        if s in _TRUE:
            return True
        if s in _FALSE:
            return False
        raise ValueError(f"not a boolean: {val!r}")
    return type(default)(val)


class Config:
    def __init__(self, path=DEFAULT_CONFIG_PATH, autosave=True):
        self.path = path
        self.autosave = autosave
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, ValueError) as e:
                LOG.warning(f"[Config] could not read {self.path}, using defaults: {e}")
                return
            if not isinstance(loaded, dict):
                LOG.warning(f"[Config] {self.path} is not a JSON object, using defaults")
                return
            for k, v in loaded.items():
                if k not in DEFAULTS:
                    LOG.warning(f"[Config] ignoring unknown option {k!r}")
                    continue
                try:
                    self.data[k] = _coerce_key(k, v)
                except (TypeError, ValueError):
                    LOG.warning(f"[Config] bad value for {k!r}: {v!r}, keeping default")
        elif self.autosave:
            self.save()

    def save(self):
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def __getitem__(self, key):
        return self.data[key]

    def items(self):
        return self.data.items()

    def set(self, key, val):
        """Set an existing option, coercing to its type. Raises KeyError/ValueError."""
        if key not in self.data:
            raise KeyError(f"No such option: {key}")
        self.data[key] = _coerce_key(key, val)
        if self.autosave:
            self.save()
        return self.data[key]
