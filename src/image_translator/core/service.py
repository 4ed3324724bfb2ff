"""Translator handle exposed to callers."""

import threading
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from ..config import TranslatorConfig
from ..session import Credentials
from ..translation import BackendType, TranslationBackend, TranslationJob, get_backend
from ..translation.batch import HttpFactory

JobLike = Union[TranslationJob, tuple[Union[str, Path], Union[str, Path]]]
ProgressCallback = Callable[[int, int, TranslationJob], None]


class TranslationService:
    """Authenticated handle that translates batches of images."""

    def __init__(self, backend: TranslationBackend):
        """Initialize the service around an authenticated backend.

        Args:
            backend: Backend that has already authenticated.
        """
        self.backend = backend

    @classmethod
    def connect(
        cls,
        backend_type: BackendType,
        username: str,
        password: str,
        client_uuid: str,
        fingerprint: str,
        config: Optional[TranslatorConfig] = None,
        http_factory: Optional[HttpFactory] = None
    ) -> "TranslationService":
        """Create a backend of the given type and log in.

        Raises:
            AuthError: If login failed.
            NotImplementedError: If the backend type is not supported.
        """
        backend = get_backend(
            backend_type,
            Credentials(username=username, password=password),
            fingerprint,
            client_uuid,
            config,
            http_factory
        )
        backend.authenticate()
        return cls(backend)

    @classmethod
    def ichigo(
        cls,
        username: str,
        password: str,
        client_uuid: str,
        fingerprint: str,
        config: Optional[TranslatorConfig] = None,
        http_factory: Optional[HttpFactory] = None
    ) -> "TranslationService":
        """Log in to Ichigo Reader and return a ready handle.

        Raises:
            AuthError: If login failed.
        """
        return cls.connect(
            BackendType.ICHIGO,
            username,
            password,
            client_uuid,
            fingerprint,
            config,
            http_factory
        )

    def translate(
        self,
        jobs: Iterable[JobLike],
        progress_callback: Optional[ProgressCallback] = None
    ) -> None:
        """Translate every job, writing results to their destinations.

        Args:
            jobs: TranslationJob objects or (source, destination) pairs.
            progress_callback: Optional callback called with
                (completed, total, job) after each written result.

        Raises:
            TranslatorError: If any job failed.
        """
        job_list = [TranslationJob.coerce(job) for job in jobs]
        total = len(job_list)
        completed = 0
        lock = threading.Lock()

        on_job_complete = None
        if progress_callback:
            def on_job_complete(job: TranslationJob):
                nonlocal completed
                # Called from both streams
                with lock:
                    completed += 1
                    progress_callback(completed, total, job)

        self.backend.translate(job_list, on_job_complete)


def translate(service: TranslationService, jobs: Iterable[JobLike]) -> None:
    """Translate a batch of jobs with an authenticated service.

    Raises:
        TranslatorError: If any job failed.
    """
    service.translate(jobs)
