"""Constants used for YAML generator configuration."""

# Top-level section key
GENERATOR_KEY = "generator"

# Primary element roll keys
TRANSITION_THRESHOLD_KEY = "transition_threshold"
ROLL_MAX_KEY = "roll_max"

# Paired atom count keys
PAIRED_ATOMS_KEY = "paired_atoms"
MIN_KEY = "min"
MAX_KEY = "max"

# Retry policy key
MAX_ATTEMPTS_KEY = "max_attempts"

# Automatically export all constants (those that don't start with underscore)
__all__ = [name for name in globals() if not name.startswith('_') and name.isupper()]
