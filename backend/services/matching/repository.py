"""Data-layer boundary for the matching orchestrator.

The matching core never talks to a database directly; it goes through a
:class:`MatchingRepository`. :class:`InMemoryMatchingRepository` backs the
HTTP app and the tests.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from models.schemas.records import Application, Candidate, Job

logger = logging.getLogger(__name__)


class MatchingRepository(ABC):
    """Records the orchestrator needs to read, and the one write it makes."""

    @abstractmethod
    async def get_candidate(self, candidate_id: str) -> Candidate | None:
        """Return the candidate, or None if unknown."""

    @abstractmethod
    async def get_candidates(self, candidate_ids: Sequence[str]) -> list[Candidate]:
        """Return the known candidates among ``candidate_ids``, in request order."""

    @abstractmethod
    async def get_job(self, job_id: str) -> Job | None:
        """Return the job with its locations, or None if unknown."""

    @abstractmethod
    async def get_applications_for_job(self, job_id: str) -> list[Application]:
        """Return every application submitted to ``job_id``."""

    @abstractmethod
    async def get_application(self, application_id: str) -> Application | None:
        """Return the application, or None if unknown."""

    @abstractmethod
    async def save_application(self, application: Application) -> None:
        """Persist the application's ``custom_fields``."""


class InMemoryMatchingRepository(MatchingRepository):

    def __init__(
        self,
        candidates: Iterable[Candidate] = (),
        jobs: Iterable[Job] = (),
        applications: Iterable[Application] = (),
    ) -> None:
        self.candidates: dict[str, Candidate] = {c.id: c for c in candidates}
        self.jobs: dict[str, Job] = {j.id: j for j in jobs}
        self.applications: dict[str, Application] = {a.id: a for a in applications}

    def add_candidate(self, candidate: Candidate) -> None:
        self.candidates[candidate.id] = candidate

    def add_job(self, job: Job) -> None:
        self.jobs[job.id] = job

    def add_application(self, application: Application) -> None:
        self.applications[application.id] = application

    async def get_candidate(self, candidate_id: str) -> Candidate | None:
        return self.candidates.get(candidate_id)

    async def get_candidates(self, candidate_ids: Sequence[str]) -> list[Candidate]:
        return [self.candidates[cid] for cid in candidate_ids if cid in self.candidates]

    async def get_job(self, job_id: str) -> Job | None:
        return self.jobs.get(job_id)

    async def get_applications_for_job(self, job_id: str) -> list[Application]:
        return [a for a in self.applications.values() if a.job_id == job_id]

    async def get_application(self, application_id: str) -> Application | None:
        return self.applications.get(application_id)

    async def save_application(self, application: Application) -> None:
        self.applications[application.id] = application
        logger.debug("Saved application %s", application.id)
