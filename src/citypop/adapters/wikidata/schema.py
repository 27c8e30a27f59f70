"""Pydantic models describing SPARQL JSON result payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SparqlBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class SparqlTerm(SparqlBaseModel):
    type: str
    value: str
    datatype: str | None = None
    language: str | None = Field(default=None, alias="xml:lang")


class SparqlResults(SparqlBaseModel):
    bindings: list[dict[str, SparqlTerm]] = Field(default_factory=list[dict[str, SparqlTerm]])


class SparqlResponse(SparqlBaseModel):
    results: SparqlResults

    def first_value(self, variable: str) -> str | None:
        if not self.results.bindings:
            return None
        term = self.results.bindings[0].get(variable)
        if term is None:
            return None
        return term.value
