"""Translation requests, batching and backends."""

from .batch import BatchTranslator, StreamTranslator, partition_jobs
from .engine import BackendType, IchigoBackend, TranslationBackend, get_backend
from .request import TranslateRequest, TranslationJob, build_translate_request

__all__ = [
    "BatchTranslator",
    "StreamTranslator",
    "partition_jobs",
    "BackendType",
    "IchigoBackend",
    "TranslationBackend",
    "get_backend",
    "TranslateRequest",
    "TranslationJob",
    "build_translate_request",
]
