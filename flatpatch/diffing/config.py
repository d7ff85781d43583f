
from ..log import set_flatpatch_log_level


class DiffConfig:
    """Set of predicates/atomic paths/other configs to pass around"""

    def __init__(self, *, predicates=None, atomic_paths=None, strict_types=True):
        from .generic import default_predicates
        defaults = default_predicates(strict_types)
        if predicates is not None:
            defaults.update(predicates)

        self.predicates = defaults
        self.strict_types = strict_types
        self._atomic_paths = set(atomic_paths or ())

    @classmethod
    def from_config(cls, name="diff"):
        """Create a DiffConfig from the flatpatch config files.

        Also applies the configured log level to the flatpatch logger.
        """
        from ..config import build_config
        config = build_config(name)
        set_flatpatch_log_level(config["log_level"], set_main=False)
        return cls(
            atomic_paths=config["atomic_paths"],
            strict_types=config["strict_types"],
        )

    def compare(self, x, y, path):
        "Return True if the leaf values x and y at path are considered equal."
        return self.predicates[path](x, y)

    def is_atomic(self, x, path=None):
        "Return True for values that diff should treat as a single leaf value."
        if path in self._atomic_paths:
            return True
        if isinstance(x, (dict, list)):
            return not x
        return True
