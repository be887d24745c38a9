API_VERSION_HEADER = "X-School-Credits-Version"
REQUEST_ID_HEADER = "X-Request-ID"

# JWT Configuration
JWT_ALGORITHM = "HS256"

# Authentication endpoints configuration
SKIP_AUTH_PATHS = {
    "/openapi.json",
    "/docs",
    "/redoc",
    "/health",
    "/health/liveness",
    "/",
    "/v1/credits/packages",
    "/v1/documents/costs",
}

SKIP_AUTH_PATTERNS: list = [
    ("GET", r"^/v1/documents/costs/[A-Za-z0-9_\-]+/?$"),
]

# Pagination
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 30

# Largest batch a single generation request may cover
MAX_DOCUMENTS_PER_REQUEST = 500
