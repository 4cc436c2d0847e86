import os
from typing import Any, Dict, List

from containerview.inventory.queries import QueryMode, clamp_page_size


def _csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _query_mode(value: Any) -> str:
    try:
        return QueryMode(str(value).lower()).value
    except ValueError:
        choices = ", ".join(mode.value for mode in QueryMode)
        raise ValueError(f"Invalid query_mode {value!r}, expected one of: {choices}") from None


class Config:
    inventory_url = os.getenv("CONTAINERVIEW_INVENTORY_URL", "http://localhost:8001/c8y")
    tenant = os.getenv("CONTAINERVIEW_TENANT", "")
    user = os.getenv("CONTAINERVIEW_USER", "")
    password = os.getenv("CONTAINERVIEW_PASSWORD", "")
    token = os.getenv("CONTAINERVIEW_TOKEN", "")
    http_timeout_seconds = float(os.getenv("CONTAINERVIEW_HTTP_TIMEOUT_SECONDS", "15"))

    # Inventory query behaviour
    query_mode = _query_mode(os.getenv("CONTAINERVIEW_QUERY_MODE", "strict"))
    page_size = clamp_page_size(os.getenv("CONTAINERVIEW_PAGE_SIZE", "100"))

    cors_origins = _csv(os.getenv("CONTAINERVIEW_CORS_ORIGINS", "http://localhost:3000"))

    def update(self, values: Dict[str, Any]) -> None:
        """Override settings from a mapping, e.g. a parsed config file."""
        for key, value in values.items():
            if not hasattr(Config, key) or key.startswith("_") or callable(getattr(Config, key)):
                raise ValueError(f"Unknown configuration key: {key}")
            if key == "page_size":
                value = clamp_page_size(value)
            elif key == "query_mode":
                value = _query_mode(value)
            elif key == "cors_origins" and isinstance(value, str):
                value = _csv(value)
            setattr(self, key, value)

    def auth(self):
        """Basic auth tuple for the inventory, or None when a token or no user is set."""
        if self.token or not self.user:
            return None
        username = f"{self.tenant}/{self.user}" if self.tenant else self.user
        return (username, self.password)

    def headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

config = Config()
