from typing import Dict, List, Optional

from pydantic import Field

from noaa_weather.models.base import NwsModel
from noaa_weather.models.unions import JsonLdContext


class GlossaryTerm(NwsModel):
    term: Optional[str] = None
    definition: Optional[str] = None


class Glossary(NwsModel):
    context: Optional[JsonLdContext] = Field(default=None, alias="@context")
    glossary: List[GlossaryTerm] = []

    def find(self, text: str) -> List[GlossaryTerm]:
        """Термины, в названии которых встречается text (без учёта регистра)."""
        needle = text.lower()
        return [item for item in self.glossary if item.term and needle in item.term.lower()]


class IconDescription(NwsModel):
    description: str


class IconsSummary(NwsModel):
    context: Optional[JsonLdContext] = Field(default=None, alias="@context")
    icons: Dict[str, IconDescription] = {}


class ProblemDetail(NwsModel):
    """Описание ошибки API в формате RFC 7807."""

    type: Optional[str] = None
    title: Optional[str] = None
    status: Optional[int] = None
    detail: Optional[str] = None
    instance: Optional[str] = None
    correlation_id: Optional[str] = None
