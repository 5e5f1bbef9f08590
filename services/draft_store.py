"""Onboarding draft storage.

Before an account exists, the profile being filled in (and a plan generated
from it) is held as a draft that survives restarts. Drafts live behind the
`DraftStore` interface and are never read by the plan service, which only
receives complete profiles.
"""

import json
import os
import tempfile
from typing import Optional, Protocol

from pydantic import BaseModel, ValidationError

from core.logger import get_logger
from schemas.plan_schema import ComprehensivePlan
from schemas.profile_schema import Profile

logger = get_logger("services.draft_store")


class OnboardingDraft(BaseModel):
    profile: Optional[Profile] = None
    plan: Optional[ComprehensivePlan] = None


class DraftStore(Protocol):
    def get(self) -> Optional[OnboardingDraft]:
        ...

    def set(self, draft: OnboardingDraft) -> None:
        ...

    def clear(self) -> None:
        ...


class JsonFileDraftStore:
    """Keeps a single draft in a JSON file; writes replace the file atomically."""

    def __init__(self, path: str):
        self.path = path

    def get(self) -> Optional[OnboardingDraft]:
        if not os.path.exists(self.path):
            return None
        try:
            with open(self.path, encoding="utf-8") as fh:
                return OnboardingDraft.model_validate(json.load(fh))
        except (ValueError, ValidationError) as exc:
            logger.warning("Discarding unreadable draft at %s: %s", self.path, exc)
            return None

    def set(self, draft: OnboardingDraft) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(draft.model_dump_json(by_alias=True))
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def clear(self) -> None:
        if os.path.exists(self.path):
            os.remove(self.path)
