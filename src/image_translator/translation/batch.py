"""Batch translation split across two concurrent streams."""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Iterable, Optional

import requests

from ..config import TranslatorConfig
from ..download import Downloader, create_http_session
from ..errors import ImageIOError, NetworkError
from ..session import SessionStore
from .request import TranslationJob, build_translate_request

logger = logging.getLogger(__name__)

# Number of streams a batch is split into
STREAM_COUNT = 2


JobCompleteCallback = Callable[[TranslationJob], None]
HttpFactory = Callable[[], requests.Session]


def partition_jobs(
    jobs: Iterable[TranslationJob]
) -> tuple[list[TranslationJob], list[TranslationJob]]:
    """Split jobs by the parity of their position.

    Args:
        jobs: Jobs in submission order.

    Returns:
        Tuple of (jobs at even positions, jobs at odd positions), each
        keeping the original relative order.
    """
    even = []
    odd = []
    for index, job in enumerate(jobs):
        if index % 2 == 0:
            even.append(job)
        else:
            odd.append(job)
    return even, odd


def write_result(destination: Path, data: bytes) -> None:
    """Write a translated result, creating or truncating the file.

    Raises:
        ImageIOError: If the file cannot be written.
    """
    try:
        with open(destination, 'wb') as f:
            f.write(data)
    except OSError as e:
        raise ImageIOError(f"cannot write {destination}: {e}", path=Path(destination)) from e


class StreamTranslator:
    """Translates a list of jobs one after another."""

    def __init__(
        self,
        store: SessionStore,
        config: TranslatorConfig,
        http: requests.Session,
        on_job_complete: Optional[JobCompleteCallback] = None
    ):
        """Initialize the stream.

        Args:
            store: Session shared with the other stream.
            config: Client configuration.
            http: HTTP session owned by this stream.
            on_job_complete: Optional callback called after each written result.
        """
        self.store = store
        self.config = config
        self.downloader = Downloader(http, config.max_attempts, config.timeout)
        self.on_job_complete = on_job_complete

    def _build_request(self, job: TranslationJob) -> requests.Request:
        """Build the HTTP request for one job."""
        session = self.store.snapshot()
        body = build_translate_request(job.source, session.fingerprint, session.client_uuid)
        return requests.Request(
            "POST",
            self.config.translate_url,
            json=body.to_json(),
            headers={"Cookie": session.cookie}
        )

    def translate_job(self, job: TranslationJob) -> None:
        """Translate a single job and write its result.

        Raises:
            ImageIOError: If the source cannot be read or the result written.
            NetworkError: If the translate call failed on every attempt.
        """
        request = self._build_request(job)

        try:
            data = self.downloader.download(request)
        except NetworkError as e:
            raise NetworkError(
                f"translating {job.source} failed after {e.attempts} attempts: {e}",
                attempts=e.attempts,
                status_code=e.status_code
            ) from e

        write_result(job.destination, data)

        if self.on_job_complete:
            self.on_job_complete(job)

    def run(self, jobs: list[TranslationJob]) -> None:
        """Translate every job in order, stopping at the first failure."""
        for job in jobs:
            logger.debug("Translating %s -> %s", job.source, job.destination)
            self.translate_job(job)


class BatchTranslator:
    """Splits a batch of jobs into two streams and runs them concurrently."""

    def __init__(
        self,
        store: SessionStore,
        config: Optional[TranslatorConfig] = None,
        http_factory: Optional[HttpFactory] = None
    ):
        """Initialize the batch translator.

        Args:
            store: Authenticated session.
            config: Client configuration. Uses defaults if not provided.
            http_factory: Creates the HTTP session of each stream.
        """
        self.store = store
        self.config = config or TranslatorConfig()
        self.http_factory = http_factory or (lambda: create_http_session(self.config))

    def _run_stream(
        self,
        name: str,
        jobs: list[TranslationJob],
        on_job_complete: Optional[JobCompleteCallback]
    ) -> None:
        """Run one stream on its own HTTP session."""
        logger.info("Stream %s: %d job(s)", name, len(jobs))
        http = self.http_factory()
        try:
            StreamTranslator(self.store, self.config, http, on_job_complete).run(jobs)
        finally:
            http.close()
        logger.info("Stream %s finished", name)

    def translate(
        self,
        jobs: Iterable[TranslationJob],
        on_job_complete: Optional[JobCompleteCallback] = None
    ) -> None:
        """Translate a batch of jobs.

        Jobs at even positions form the first stream and jobs at odd
        positions the second. A batch of one job runs on the calling
        thread. Both streams are always awaited; if the first stream
        failed its error is raised, otherwise the second stream's.

        Args:
            jobs: Jobs to translate.
            on_job_complete: Optional callback called after each written
                result. It may be called from worker threads.

        Raises:
            TranslatorError: The error of the first failing stream.
        """
        first, second = partition_jobs(TranslationJob.coerce(job) for job in jobs)

        if not first:
            return

        if not second:
            self._run_stream("A", first, on_job_complete)
            return

        with ThreadPoolExecutor(max_workers=STREAM_COUNT) as executor:
            future_a = executor.submit(self._run_stream, "A", first, on_job_complete)
            future_b = executor.submit(self._run_stream, "B", second, on_job_complete)

        future_a.result()
        future_b.result()
