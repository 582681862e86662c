#!/usr/bin/env python3
"""Constants for poll client timing and retry configuration.

These constants control how often the client polls and the exponential
backoff behavior when the server cannot be reached.
"""

# Seconds between polls, matching the reader page.
POLL_INTERVAL: float = 3.0

# Timeout for a single poll request in seconds.
REQUEST_TIMEOUT: float = 10.0

# Retry parameters for exponential backoff reconnection.
# Initial delay between connection attempts in seconds.
INITIAL_WAIT: float = 1.0

# Maximum delay between connection attempts in seconds.
MAX_WAIT: float = 60.0

# Multiplier for exponential backoff (delay = initial * multiplier^attempt).
WAIT_MULTIPLIER: float = 2.0
