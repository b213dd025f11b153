from pathlib import Path
from typing import Iterable

from occupation_browser.config import Settings
from occupation_browser.schemas.occupation import GroupNode, Occupation
from occupation_browser.schemas.search import AvailableFilters, SearchFilters, SearchResult
from occupation_browser.services.loader_service import load_occupations
from occupation_browser.services.search_service import SearchIndex
from occupation_browser.services.taxonomy_service import build_taxonomy


class OccupationCatalog:
    """
    One loaded occupation set with its tree and search index.

    Everything is built up front and never mutated; to refresh the data,
    build a new catalog.
    """

    def __init__(self, occupations: Iterable[Occupation], config: Settings | None = None):
        if occupations is None:
            raise TypeError("occupations must be an iterable of Occupation, not None")
        self.occupations: tuple[Occupation, ...] = tuple(occupations)
        self._tree = tuple(build_taxonomy(self.occupations))
        self._index = SearchIndex(self.occupations, config)

    @classmethod
    def from_csv(cls, path: Path | None = None, config: Settings | None = None) -> "OccupationCatalog":
        return cls(load_occupations(path or (config.data_path if config else None)), config)

    @staticmethod
    def is_search_mode(query: str | None) -> bool:
        return bool(query and query.strip())

    def browse(self) -> list[GroupNode]:
        return list(self._tree)

    def search(self, query: str, filters: SearchFilters | None = None, limit: int | None = None) -> list[SearchResult]:
        return self._index.query(query, filters, limit)

    def available_filters(self) -> AvailableFilters:
        return self._index.available_filters()
