"""Global variables."""

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": "Session cookie issuance and logout",
    },
    {
        "name": "Food Listings",
        "description": "Search, browse and manage donated food listings",
    },
    {
        "name": "Food Requests",
        "description": "Request listings and review your requests",
    },
    {
        "name": "Health",
        "description": "Application health check endpoints",
    },
]

STORAGE_ERROR_MESSAGE: str = "Internal storage error"
