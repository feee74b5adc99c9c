# -*- coding: utf-8 -*-
# NontonAPI
# Project by https://github.com/rix1337

# ==============================================================================
# UPSTREAM HOSTS
# ==============================================================================

# Catalog site, also sent as "origin" to the lokal video host
DEFAULT_BASE_URL = "https://s7.nontonanimeid.boats/"

# Lokal video host issuing tokens and download manifests
DEFAULT_DOWNLOAD_HOST = "https://s2.kotakanimeid.link"

TOKEN_PATH = "/video/get-token.php"
MANIFEST_PATH = "/video/get-download.php"

# ==============================================================================
# REQUEST IDENTITY
# ==============================================================================

FALLBACK_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/140.0.0.0 Safari/537.36"

# The lokal host accepts a constant placeholder here
DEFAULT_FINGERPRINT = "dummy-fingerprint"

# ==============================================================================
# TIMING & SERVER
# ==============================================================================

# Seconds per upstream call, 0 disables the timeout
DEFAULT_TIMEOUT = 30

DEFAULT_REDIRECT_WORKERS = 1

DEFAULT_PORT = 3000

IP_API_URL = "http://ip-api.com/json"
IP_API_TIMEOUT = 5

# ==============================================================================
# USER-FACING MESSAGES
# ==============================================================================

ERROR_HOME = "Failed to fetch home data."
ERROR_SEARCH = "Failed to perform search."
ERROR_DETAIL = "Failed to fetch anime detail."
ERROR_DOWNLOAD = "Failed to fetch download links."
ERROR_RESOLUTION = "Failed to resolve final links from the local server."
NO_LOKAL_SERVER = "No lokal server found"
