"""Shared constants for pfreporter."""

# Performance farm host serving /pf/{test}/{plant} report pages
DEFAULT_UPSTREAM_URL = "http://140.211.11.131:8080"

# Seconds to wait on the upstream before giving up on a request
DEFAULT_FETCH_TIMEOUT = 30.0

# External links embedded in rendered pages
DEFAULT_BUILDBOT_URL = "http://140.211.11.131:8010"
DEFAULT_POSTGRES_COMMIT_URL = "https://github.com/postgres/postgres/commit/"

# Config file picked up from the working directory when none is given
DEFAULT_CONFIG = "pfreporter.yaml"

# Column order consumed downstream; names differ from the record fields
CSV_HEADER = ["branch", "revision", "scale", "ctime", "metric"]
