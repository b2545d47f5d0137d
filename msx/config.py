# This is where the defaults and non-secret configuration values are stored.

# Strings longer than this are rejected before they are matched.
MAX_INPUT_LENGTH: int = 100

# Style used when the format options do not say otherwise.
DEFAULT_LONG: bool = False
