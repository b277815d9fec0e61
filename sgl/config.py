import yaml


class Config:
    """
    Package-wide settings. Defaults live here, a YAML file can override them.
    """
    def __init__(self):
        # print traces of in-place moves
        self.VERBOSE = False
        # default absolute tolerance for approximate coordinate comparison
        self.TOLERANCE = 1e-9
        # default relative tolerance, scaled by the larger magnitude
        self.RELATIVE_TOLERANCE = 1e-9

    def load(self, path):
        """
        Override settings from a YAML mapping, e.g.

            verbose: true
            tolerance: 1.0e-6

        Keys are case-insensitive but must name an existing setting, and
        values must have the type of that setting's default.
        """
        with open(path, 'r') as file:
            settings = yaml.load(file, Loader=yaml.FullLoader)
        if settings is None:
            return self
        if not isinstance(settings, dict):
            raise ValueError(f"Expected a mapping of settings in {path}, got {type(settings).__name__}")
        for key, value in settings.items():
            name = str(key).upper()
            if not hasattr(self, name):
                raise KeyError(f"Unknown setting: {key}")
            setattr(self, name, self._checked(name, value))
        return self

    def _checked(self, name, value):
        default = getattr(self, name)
        if isinstance(default, bool):
            if not isinstance(value, bool):
                raise ValueError(f"Setting {name} must be true or false, got {value!r}")
            return value
        # bool is an int, but not a tolerance
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Setting {name} must be a number, got {value!r}")
        if value < 0:
            raise ValueError(f"Setting {name} must not be negative, got {value!r}")
        return float(value)


CONFIG = Config()


def verboseprint(*args, **kwargs):
    if CONFIG.VERBOSE:
        print(*args, **kwargs)
