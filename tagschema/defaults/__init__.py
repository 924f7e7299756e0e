from .apply_defaults import apply_defaults as apply_defaults
