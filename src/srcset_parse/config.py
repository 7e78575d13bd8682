"""Central configuration for the srcset-parse project."""

# Descriptors
WIDTH_DESCRIPTOR = "w"
DENSITY_DESCRIPTOR = "x"

# Value used when a descriptor number cannot be read as a float
DEFAULT_DESCRIPTOR_VALUE = 0.0

# HTML extraction
IMAGE_TAGS = ("img", "source")
SRCSET_ATTRIBUTES = ("srcset", "data-srcset")

# Scheme given to protocol-relative image URLs
DEFAULT_IMAGE_SCHEME = "https"
