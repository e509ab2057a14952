# metrics_tracker.py

import json, os
from collections import defaultdict

from prefix_autocompleter.utils.logger_utils import LOG


class Metrics:
    """Running sum/count per key. path=None keeps everything in memory."""

    def __init__(self, path=None):
        self.path = path
        self.m = defaultdict(float)
        self.n = defaultdict(int)
        self._load()

    def _load(self):
        if self.path and os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    d = json.load(f)
                for k, v in d.items():
                    self.m[k] = float(v["sum"])
                    self.n[k] = int(v["count"])
            except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
                LOG.warning(f"[Metrics] ignoring unreadable {self.path}: {e}")
                self.m.clear()
                self.n.clear()

    def save(self):
        if not self.path:
            return
        d = {k: {"sum": self.m[k], "count": self.n[k]} for k in self.m}
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(d, f, indent=2)

    def record(self, key, val):
        self.m[key] += val
        self.n[key] += 1
        self.save()

    def count(self, key):
        return self.n.get(key, 0)

    def avg(self, key):
        if self.n.get(key, 0) == 0: return 0.0
        return self.m[key] / self.n[key]

    def summary(self):
        """key -> (count, avg), sorted by key."""
        return {k: (self.n[k], self.avg(k)) for k in sorted(self.m)}

    def reset(self):
        self.m.clear()
        self.n.clear()
        self.save()
