"""Constants for license-checker."""

import re

# Exit codes
EXIT_SUCCESS = 0  # Every checked file carries the license
EXIT_ISSUES = 1  # Missing/partial licenses or per-file errors remain
EXIT_ERROR = 2  # Scan failed due to error

# Directories matching this are entered by default (skips dependency folders)
DEFAULT_DIR_PATTERN = "^(?!node_modules).+"

# References shaped like a URL are fetched over HTTP(S)
URL_PATTERN = re.compile(
    r"^((([A-Za-z]{3,9}:(?://)?)(?:[\-;:&=+$,\w]+@)?[A-Za-z0-9.\-]+"
    r"|(?:www\.|[\-;:&=+$,\w]+@)[A-Za-z0-9.\-]+)"
    r"((?:/[+~%/.\w\-_]*)?\??(?:[\-+=&;%@.\w_]*)#?(?:[.!/\\\w]*))?)$"
)

# References shaped like /pattern/flags are compiled as regular expressions.
# Only known flag letters qualify, so paths like /usr/share/licenses/MIT do not.
REGEX_PATTERN = re.compile(r"^/(.+)/([gimsux]*)$", re.DOTALL)

# Timeout for fetching a license over the network
FETCH_TIMEOUT_SECONDS = 30.0
