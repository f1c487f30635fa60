"""
Health endpoints.

- /health: overall status from all registered checks
- /health/ready: readiness probe (timezone database loaded, startup done)
- /health/live: liveness probe (process alive)
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

# --- Types ---


class HealthStatus(str, Enum):
    """Health check status values."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


@dataclass
class CheckResult:
    """Result of a single health check."""

    name: str
    status: HealthStatus
    message: str = ""
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status.value,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }


class HealthCheck(Protocol):
    """Protocol for health checks."""

    name: str

    def check(self) -> CheckResult:
        """Run the health check and return result."""
        ...


# --- Startup Tracker ---


class StartupTracker:
    """Tracks application startup time for uptime calculation."""

    _start_time: float | None = None

    @classmethod
    def mark_started(cls) -> None:
        cls._start_time = time.time()

    @classmethod
    def reset(cls) -> None:
        cls._start_time = None

    @classmethod
    def get_uptime_seconds(cls) -> float:
        if cls._start_time is None:
            return 0.0
        return time.time() - cls._start_time

    @classmethod
    def is_started(cls) -> bool:
        return cls._start_time is not None


# --- Registry ---


class HealthCheckRegistry:
    """Registry of health checks to run."""

    def __init__(self) -> None:
        self._checks: list[HealthCheck] = []

    def register(self, check: HealthCheck) -> None:
        self._checks.append(check)

    def run_all(self) -> list[CheckResult]:
        return [check.check() for check in self._checks]

    def clear(self) -> None:
        self._checks = []


_registry = HealthCheckRegistry()


def get_health_registry() -> HealthCheckRegistry:
    """Get the global health check registry."""
    return _registry


# --- Built-in Checks ---


class StartupCheck:
    """Passes once the lifespan handler has finished startup."""

    name = "startup"

    def check(self) -> CheckResult:
        if StartupTracker.is_started():
            return CheckResult(self.name, HealthStatus.HEALTHY, "Startup complete")
        return CheckResult(self.name, HealthStatus.UNHEALTHY, "Startup not complete")


class TimezoneDatabaseCheck:
    """Passes when the timezone database snapshot is non-empty."""

    name = "timezone_database"

    def __init__(self, count_zones: Callable[[], int]) -> None:
        self._count_zones = count_zones

    def check(self) -> CheckResult:
        try:
            count = self._count_zones()
        except Exception as e:
            return CheckResult(self.name, HealthStatus.UNHEALTHY, f"Timezone database error: {e!s}")

        if count == 0:
            return CheckResult(self.name, HealthStatus.UNHEALTHY, "No timezones available")
        return CheckResult(
            self.name,
            HealthStatus.HEALTHY,
            "Timezone database loaded",
            details={"zones": count},
        )


# --- FastAPI Router ---


def _overall(results: list[CheckResult]) -> HealthStatus:
    if all(r.status == HealthStatus.HEALTHY for r in results):
        return HealthStatus.HEALTHY
    return HealthStatus.UNHEALTHY


def create_health_router(
    version: str = "0.0.0",
    registry: HealthCheckRegistry | None = None,
) -> APIRouter:
    """
    Create FastAPI router for health endpoints.

    Args:
        version: Application version string
        registry: Health check registry (uses global if None)
    """
    router = APIRouter(tags=["Health"])
    reg = registry or get_health_registry()

    @router.get(
        "/health",
        response_model=None,
        responses={
            200: {"description": "Service is healthy"},
            503: {"description": "Service is unhealthy"},
        },
    )
    def health_check() -> JSONResponse:
        """Overall status based on all registered checks."""
        results = reg.run_all()
        overall = _overall(results)
        return JSONResponse(
            content={
                "status": overall.value,
                "version": version,
                "uptime_seconds": StartupTracker.get_uptime_seconds(),
                "checks": [r.to_dict() for r in results],
            },
            status_code=(
                status.HTTP_200_OK
                if overall == HealthStatus.HEALTHY
                else status.HTTP_503_SERVICE_UNAVAILABLE
            ),
        )

    @router.get("/health/ready", response_model=None)
    def readiness_check() -> JSONResponse:
        """Ready once every check passes."""
        results = reg.run_all()
        is_ready = _overall(results) == HealthStatus.HEALTHY
        return JSONResponse(
            content={"ready": is_ready, "checks": [r.to_dict() for r in results]},
            status_code=status.HTTP_200_OK if is_ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    @router.get("/health/live", response_model=None)
    def liveness_check() -> JSONResponse:
        """Always 200 while the process answers."""
        return JSONResponse(
            content={"alive": True, "uptime_seconds": StartupTracker.get_uptime_seconds()},
            status_code=status.HTTP_200_OK,
        )

    return router


def setup_default_health_checks(
    count_zones: Callable[[], int],
    registry: HealthCheckRegistry | None = None,
) -> None:
    """Register the startup and timezone database checks (idempotent)."""
    reg = registry or get_health_registry()
    reg.clear()
    reg.register(StartupCheck())
    reg.register(TimezoneDatabaseCheck(count_zones))


def mark_startup_complete() -> None:
    """Mark application startup as complete."""
    StartupTracker.mark_started()
