"""Translation backends."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, Optional

from ..config import TranslatorConfig
from ..download import create_http_session
from ..errors import AuthError
from ..session import Credentials, SessionStore
from .batch import BatchTranslator, HttpFactory, JobCompleteCallback
from .request import TranslationJob


class BackendType(Enum):
    """Known translation backends."""
    ICHIGO = "ichigo"
    MANGA_IMAGE_TRANSLATOR = "manga-image-translator"


class TranslationBackend(ABC):
    """Abstract base class for image translation backends."""

    @abstractmethod
    def authenticate(self) -> None:
        """Acquire whatever credentials the backend needs.

        Raises:
            AuthError: If authentication failed.
        """
        pass

    @abstractmethod
    def translate(
        self,
        jobs: Iterable[TranslationJob],
        on_job_complete: Optional[JobCompleteCallback] = None
    ) -> None:
        """Translate each job's source image into its destination path.

        Raises:
            TranslatorError: If any job failed.
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for this backend."""
        pass


class IchigoBackend(TranslationBackend):
    """Ichigo Reader translation backend."""

    def __init__(
        self,
        credentials: Credentials,
        fingerprint: str,
        client_uuid: str,
        config: Optional[TranslatorConfig] = None,
        http_factory: Optional[HttpFactory] = None
    ):
        """Initialize the backend. No network call is made until authenticate().

        Args:
            credentials: Account credentials.
            fingerprint: Client device identifier.
            client_uuid: Client instance identifier.
            config: Client configuration.
            http_factory: Creates HTTP sessions; defaults to configured requests sessions.
        """
        self.credentials = credentials
        self.fingerprint = fingerprint
        self.client_uuid = client_uuid
        self.config = config or TranslatorConfig()
        self.http_factory = http_factory
        self._store: Optional[SessionStore] = None

    @property
    def store(self) -> SessionStore:
        """Session store of an authenticated backend."""
        if self._store is None:
            raise AuthError("backend is not authenticated")
        return self._store

    def authenticate(self) -> None:
        factory = self.http_factory or (lambda: create_http_session(self.config))
        http = factory()
        try:
            self._store = SessionStore.create(
                self.credentials,
                self.fingerprint,
                self.client_uuid,
                self.config,
                http
            )
        finally:
            http.close()

    def translate(
        self,
        jobs: Iterable[TranslationJob],
        on_job_complete: Optional[JobCompleteCallback] = None
    ) -> None:
        batch = BatchTranslator(self.store, self.config, self.http_factory)
        batch.translate(jobs, on_job_complete)

    @property
    def name(self) -> str:
        return "ichigo"


def get_backend(
    backend_type: BackendType,
    credentials: Credentials,
    fingerprint: str,
    client_uuid: str,
    config: Optional[TranslatorConfig] = None,
    http_factory: Optional[HttpFactory] = None
) -> TranslationBackend:
    """Create an unauthenticated backend of the given type.

    Raises:
        NotImplementedError: For backends this client does not support.
    """
    if backend_type == BackendType.ICHIGO:
        return IchigoBackend(credentials, fingerprint, client_uuid, config, http_factory)
    raise NotImplementedError(f"backend '{backend_type.value}' is not supported")
