from pydantic import BaseModel

from occupation_browser.schemas.occupation import Occupation


class SearchMatch(BaseModel):
    key: str  # occupation field name
    value: str
    indices: list[tuple[int, int]]  # (start, end) inclusive, into value

    @property
    def fragments(self) -> list[str]:
        return [self.value[start:end + 1] for start, end in self.indices]


class SearchResult(BaseModel):
    occupation: Occupation
    score: float
    matches: list[SearchMatch] = []
    breadcrumb: str = ""

    def match_for(self, key: str) -> SearchMatch | None:
        for match in self.matches:
            if match.key == key:
                return match
        return None


class SearchFilters(BaseModel):
    isco_major_groups: frozenset[str] = frozenset()
    occupation_types: frozenset[str] = frozenset()

    @property
    def is_empty(self) -> bool:
        return not self.isco_major_groups and not self.occupation_types


class AvailableFilters(BaseModel):
    isco_major_groups: list[str]
    occupation_types: list[str]
