"""
Main API module for Course Platform.

Responsibilities:
    - Expose REST endpoints for users (signup, current profile) and courses (CRUD)
    - Gate course mutations behind HTTP Basic auth and course ownership
    - Map domain errors to HTTP responses in one place

Request flow for mutating routes:
    1. Required-field validation  -> 400 {"errors": [...]}
    2. Basic-auth verification    -> 401 {"message": "Access Denied"}
    3. Ownership check            -> 400 {"message": "Course not found"}
    4. Persistence + success response

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - In-memory Storage by default; PostgreSQL via COURSE_STORAGE_BACKEND=postgres.
    - Managers hold the resource rules; routes only parse, authenticate and shape responses.
"""

import logging
from typing import List, Optional

from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from fastapi.security import HTTPBasicCredentials

from auth.config import ACCESS_DENIED_MESSAGE, AUTH_REALM
from auth.dependencies import Authenticator, get_credentials
from auth.schemas import UserCreate, UserOut, UserProfile
from course_platform.config import settings
from course_platform.errors import AuthDenied, ResourceNotFound, ValidationFailed
from course_platform.manager import COURSE_FIELDS, CourseManager, UserManager, ensure_valid
from course_platform.schemas import CourseIn, CourseOut
from course_platform.storage import BaseStorage, get_storage


def create_app(storage: Optional[BaseStorage] = None) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        storage (Optional[BaseStorage]): Backend to use. When omitted, the
            storage factory picks one from the environment.

    Returns:
        FastAPI: A fully configured application instance with its own
                 storage and managers.

    Why an app factory?
        - Enables per-test isolation in pytest.
        - Encourages dependency injection and easy swapping of implementations.
        - Avoids accidental global state across workers/processes.
    """
    app = FastAPI(
        title="Course Platform",
        description="Users and courses behind HTTP Basic auth with owner-only mutations",
        docs_url="/docs",
    )
    log = logging.getLogger("course_platform")

    if not logging.getLogger().handlers:
        logging.basicConfig(level=settings.LOG_LEVEL)

    # ----------------------------------------------------------------
    # Per-app instances (isolated for tests, swappable for production)
    # ----------------------------------------------------------------
    if storage is None:
        storage = get_storage()
    authenticator = Authenticator(storage)
    user_manager = UserManager(storage)
    course_manager = CourseManager(storage)

    log.info("Course storage backend: %s", type(storage).__name__)

    # ----------------------------------------------------------------
    # Error mapping
    # ----------------------------------------------------------------
    @app.exception_handler(ValidationFailed)
    async def handle_validation_failed(_: Request, exc: ValidationFailed):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": exc.errors})

    @app.exception_handler(AuthDenied)
    async def handle_auth_denied(_: Request, exc: AuthDenied):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"message": ACCESS_DENIED_MESSAGE},
            headers={"WWW-Authenticate": f'Basic realm="{AUTH_REALM}"'},
        )

    @app.exception_handler(ResourceNotFound)
    async def handle_not_found(_: Request, exc: ResourceNotFound):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        log.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal Server Error"},
        )

    # Health check
    @app.get("/health")
    def health():
        return {"status": "ok"}

    # ----------------------------------------------------------------
    # Users
    # ----------------------------------------------------------------
    @app.get("/users", response_model=UserProfile)
    def current_user(
        credentials: Optional[HTTPBasicCredentials] = Depends(get_credentials),
    ) -> UserProfile:
        """Return the authenticated user's name and email."""
        user = authenticator.require(credentials)
        return UserProfile(**user)

    @app.post("/users", status_code=status.HTTP_201_CREATED, response_model=UserOut)
    def create_user(response: Response, payload: Optional[UserCreate] = None) -> UserOut:
        """
        Sign up a new user.

        Raises:
            ValidationFailed: Missing fields (all listed) or email already in use.
        """
        user = user_manager.register(payload.to_payload() if payload else {})
        response.headers["Location"] = "/"
        return UserOut(**user)

    # ----------------------------------------------------------------
    # Courses
    # ----------------------------------------------------------------
    @app.get("/courses", response_model=List[CourseOut])
    def list_courses(
        credentials: Optional[HTTPBasicCredentials] = Depends(get_credentials),
    ) -> List[CourseOut]:
        """
        List courses. Anonymous callers see every course; signed-in callers
        see only their own.
        """
        user = authenticator.optional(credentials)
        return [CourseOut.from_record(c) for c in course_manager.list_courses(user)]

    @app.post("/courses", status_code=status.HTTP_201_CREATED, response_model=CourseOut)
    def create_course(
        response: Response,
        payload: Optional[CourseIn] = None,
        credentials: Optional[HTTPBasicCredentials] = Depends(get_credentials),
    ) -> CourseOut:
        """Create a course owned by the caller and point Location at it."""
        fields = payload.to_payload() if payload else {}
        ensure_valid(fields, COURSE_FIELDS)
        user = authenticator.require(credentials)

        course = course_manager.create_course(user, fields)
        response.headers["Location"] = f"/courses/{course['id']}"
        return CourseOut.from_record(course)

    @app.get("/courses/{course_id}", response_model=CourseOut)
    def get_course(
        course_id: int,
        credentials: Optional[HTTPBasicCredentials] = Depends(get_credentials),
    ) -> CourseOut:
        """
        Fetch one course. A signed-in caller only sees courses they own;
        anything else is reported as not found.
        """
        user = authenticator.optional(credentials)
        return CourseOut.from_record(course_manager.get_course(course_id, user))

    @app.put("/courses/{course_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
    def update_course(
        course_id: int,
        payload: Optional[CourseIn] = None,
        credentials: Optional[HTTPBasicCredentials] = Depends(get_credentials),
    ) -> Response:
        fields = payload.to_payload() if payload else {}
        ensure_valid(fields, COURSE_FIELDS)
        user = authenticator.require(credentials)

        course = course_manager.update_course(user, course_id, fields)
        return Response(
            status_code=status.HTTP_204_NO_CONTENT,
            headers={"Location": f"/courses/{course['id']}"},
        )

    @app.delete("/courses/{course_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
    def delete_course(
        course_id: int,
        credentials: Optional[HTTPBasicCredentials] = Depends(get_credentials),
    ) -> Response:
        user = authenticator.require(credentials)
        course_manager.delete_course(user, course_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return app


# Backward compatibility for uvicorn and legacy imports:
# `uvicorn main:app --reload` and `from main import app` continue to work.
app = create_app()
