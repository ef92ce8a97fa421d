"""Health-check payload used by the API."""


def get_health_status(service: str) -> dict:
    """Report the service as up; there are no downstream dependencies to probe."""
    return {"status": "ok", "service": service}
