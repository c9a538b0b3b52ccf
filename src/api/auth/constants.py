"""
Constants shared by both API key hosting adapters.
"""

# Header carrying the API key
API_KEY_HEADER_NAME = "x-api-key"

# Query parameters that may carry the API key when enabled
API_KEY_QUERY_PARAMS = ("token", "api_key")

# Configuration section holding the expected key
API_KEY_SECTION_NAME = "Authentication:ApiKey"

# Rejection texts written by the global middleware
MIDDLEWARE_MISSING_MESSAGE = "API key is missing."
MIDDLEWARE_INVALID_MESSAGE = "Invalid API Key."

# Rejection texts written by the per-route filter
FILTER_MISSING_MESSAGE = "API Key missing."
FILTER_INVALID_MESSAGE = "Invalid API Key."
