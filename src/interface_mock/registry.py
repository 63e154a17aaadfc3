"""Project registry — binds stored interface text to mock endpoints.

Projects live in memory only. Every operation takes the registry lock, so a
single registry can be shared between request handlers.
"""

import logging
import secrets
import string
import threading
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Literal

from pydantic import BaseModel, Field, ValidationError

from interface_mock.config import MockConfig
from interface_mock.errors import (
    InvalidCountError,
    InvalidInterfaceError,
    InvalidProjectUpdateError,
    InterfaceMockError,
    ProjectNotFoundError,
    RegistryFullError,
)
from interface_mock.generator.mock import generate_mock_data
from interface_mock.parser.interface import parse_interface

logger = logging.getLogger(__name__)

HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]

ID_ALPHABET = string.ascii_lowercase + string.digits
ID_LENGTH = 26


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CreateProjectRequest(BaseModel):
    name: str
    description: str | None = None
    interface_code: str
    method: HttpMethod = "GET"
    expected_status_codes: list[int] = Field(default_factory=lambda: [200])
    expiration_hours: float | None = Field(default=None, gt=0)


class ApiProject(BaseModel):
    """A registered interface with its mock endpoint."""

    id: str
    name: str
    description: str | None = None
    interface_code: str
    endpoint: str  # /api/mock/{id}
    method: HttpMethod = "GET"
    expected_status_codes: list[int] = Field(default_factory=lambda: [200])
    expires_at: datetime
    created_at: datetime
    updated_at: datetime
    is_active: bool = True


class ApiResponse(BaseModel):
    """Envelope returned by mock endpoints."""

    success: bool
    data: Any = None
    error: str | None = None
    timestamp: str = Field(default_factory=lambda: _utcnow().isoformat())

    @classmethod
    def ok(cls, data: Any) -> "ApiResponse":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "ApiResponse":
        return cls(success=False, error=error)


def _validate_interface(interface_code: str) -> None:
    try:
        parse_interface(interface_code)
    except InterfaceMockError as e:
        raise InvalidInterfaceError(str(e)) from e


def parse_count(raw: Any, maximum: int = 100) -> int | None:
    """Parse a requested record count.

    ``None`` or an empty string means no count was given. Anything else must
    be an integer between 1 and ``maximum``.
    """
    if raw is None or raw == "":
        return None
    if isinstance(raw, bool):
        raise InvalidCountError(raw, maximum)
    try:
        count = int(raw)
    except (TypeError, ValueError):
        raise InvalidCountError(raw, maximum) from None
    if isinstance(raw, float) and raw != count:
        raise InvalidCountError(raw, maximum)
    if not 1 <= count <= maximum:
        raise InvalidCountError(raw, maximum)
    return count


class ProjectRegistry:
    """In-memory store of mock API projects."""

    def __init__(self, config: MockConfig | None = None, clock: Callable[[], datetime] | None = None):
        self.config = config or MockConfig()
        self.clock = clock or _utcnow
        self._projects: dict[str, ApiProject] = {}
        self._lock = threading.Lock()

    def create_project(self, request: CreateProjectRequest) -> ApiProject:
        """Validate the interface text and register a new project."""
        _validate_interface(request.interface_code)

        with self._lock:
            now = self.clock()
            active = sum(1 for p in self._projects.values() if self._is_available(p, now))
            if active >= self.config.max_projects:
                raise RegistryFullError(self.config.max_projects)

            project_id = self._new_id()
            hours = request.expiration_hours or self.config.default_expiration_hours
            project = ApiProject(
                id=project_id,
                name=request.name,
                description=request.description,
                interface_code=request.interface_code,
                endpoint=f"/api/mock/{project_id}",
                method=request.method,
                expected_status_codes=request.expected_status_codes,
                expires_at=now + timedelta(hours=hours),
                created_at=now,
                updated_at=now,
            )
            self._projects[project_id] = project

        logger.info("Created project %s (%s), expires %s", project_id, request.name, project.expires_at)
        return project

    def get_project(self, project_id: str) -> ApiProject | None:
        """Return the project, or None if it is missing, inactive or expired."""
        with self._lock:
            project = self._projects.get(project_id)
            if project is None or not self._is_available(project, self.clock()):
                return None
            return project

    def update_project(self, project_id: str, **updates: Any) -> ApiProject | None:
        """Apply ``updates`` to an active project.

        New interface text is parsed and the updated project is validated
        before anything is stored.
        """
        if "interface_code" in updates:
            _validate_interface(updates["interface_code"])

        with self._lock:
            project = self._projects.get(project_id)
            if project is None or not project.is_active:
                return None
            updates.pop("id", None)
            try:
                updated = ApiProject.model_validate(
                    {**project.model_dump(), **updates, "updated_at": self.clock()}
                )
            except ValidationError as e:
                raise InvalidProjectUpdateError(project_id, str(e)) from e
            self._projects[project_id] = updated
            return updated

    def deactivate_project(self, project_id: str) -> bool:
        with self._lock:
            project = self._projects.get(project_id)
            if project is None:
                return False
            self._projects[project_id] = project.model_copy(
                update={"is_active": False, "updated_at": self.clock()}
            )
        logger.info("Deactivated project %s", project_id)
        return True

    def generate_mock_response(self, project_id: str, count: int | None = None) -> Any:
        """Parse the project's interface and generate mock data for it."""
        project = self.get_project(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)

        parsed = parse_interface(project.interface_code)
        return generate_mock_data(parsed, count, options=self.config.generator)

    def list_active_projects(self) -> list[ApiProject]:
        with self._lock:
            now = self.clock()
            return [p for p in self._projects.values() if self._is_available(p, now)]

    def cleanup_expired_projects(self) -> int:
        """Drop expired projects and return how many were removed."""
        with self._lock:
            now = self.clock()
            expired = [pid for pid, p in self._projects.items() if p.expires_at <= now]
            for pid in expired:
                del self._projects[pid]
        if expired:
            logger.info("Removed %d expired projects", len(expired))
        return len(expired)

    def get_project_stats(self) -> dict[str, int]:
        with self._lock:
            now = self.clock()
            active = sum(1 for p in self._projects.values() if self._is_available(p, now))
            return {
                "total": len(self._projects),
                "active": active,
                "expired": len(self._projects) - active,
            }

    def mock_url(self, project: ApiProject) -> str:
        return self.config.base_url.rstrip("/") + project.endpoint

    def _new_id(self) -> str:
        while True:
            project_id = "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))
            if project_id not in self._projects:
                return project_id

    @staticmethod
    def _is_available(project: ApiProject, now: datetime) -> bool:
        return project.is_active and project.expires_at > now


def respond(registry: ProjectRegistry, project_id: str, raw_count: Any = None) -> tuple[int, ApiResponse]:
    """Serve one mock request, returning an HTTP status and the envelope."""
    try:
        count = parse_count(raw_count, registry.config.max_count)
        data = registry.generate_mock_response(project_id, count)
    except ProjectNotFoundError as e:
        return 404, ApiResponse.fail(str(e))
    except (InvalidCountError, InvalidInterfaceError) as e:
        return 400, ApiResponse.fail(str(e))
    return 200, ApiResponse.ok(data)
