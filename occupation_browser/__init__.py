from occupation_browser.schemas.occupation import Occupation, GroupNode, OccupationLeaf, TaxonomyNode
from occupation_browser.schemas.search import SearchMatch, SearchResult, SearchFilters, AvailableFilters
from occupation_browser.services.taxonomy_service import build_taxonomy
from occupation_browser.services.search_service import SearchIndex
from occupation_browser.services.category_service import breadcrumb, group_name
from occupation_browser.services.catalog_service import OccupationCatalog
from occupation_browser.services.loader_service import load_occupations, read_occupations_csv
from occupation_browser.utils.codes import CodePrefixes, parse_code
from occupation_browser.utils.highlight import highlight_matches

__all__ = [
    "Occupation", "GroupNode", "OccupationLeaf", "TaxonomyNode",
    "SearchMatch", "SearchResult", "SearchFilters", "AvailableFilters",
    "build_taxonomy", "SearchIndex", "breadcrumb", "group_name",
    "OccupationCatalog", "load_occupations", "read_occupations_csv",
    "CodePrefixes", "parse_code", "highlight_matches",
]
