"""Detector protocol shared by the analyzers and the risk scorer."""

from typing import Protocol

from phishscope.models.scoring import SubScore
from phishscope.schemas.email import EmailData


class BaseDetector(Protocol):
    name: str

    def analyze(self, email: EmailData) -> SubScore:
        ...


__all__ = ["BaseDetector"]
