"""Configuration for the MPN MCP server."""

import os

# Server settings
HTTP_PORT = int(os.getenv("HTTP_PORT", "8080"))
RATE_LIMIT_REQUESTS = int(os.getenv("RATE_LIMIT_REQUESTS", "100"))
RATE_LIMIT_WINDOW = float(os.getenv("RATE_LIMIT_WINDOW", "60"))
# Upper bound on addresses the rate limiter tracks at once
RATE_LIMIT_MAX_CLIENTS = int(os.getenv("RATE_LIMIT_MAX_CLIENTS", "10000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Similarity profile used when a tool call does not name one
DEFAULT_PROFILE = os.getenv("DEFAULT_PROFILE", "REPLACEMENT").upper()

# Input limits
MAX_MPN_LENGTH = 100
MAX_TEXT_LENGTH = int(os.getenv("MAX_TEXT_LENGTH", "10000"))
