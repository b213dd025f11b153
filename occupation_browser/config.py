from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    data_path: Path = Path("occupations.csv")
    # Allowed Levenshtein edits per query character: 0 = exact, 1 = match anything
    search_threshold: float = 0.4
    min_match_char_length: int = 2
    default_limit: int = 100
    # Raw fuzzy candidates requested per result, leaving room for re-ranking.
    candidate_multiplier: int = 2
    field_weights: dict[str, float] = {
        "preferred_label": 0.40,
        "code": 0.30,
        "alternate_designations": 0.20,
        "description": 0.15,
        "definition": 0.10,
        "isco_tax_included": 0.08,
        "scope_note": 0.05,
        "occupation_type": 0.03,
    }
    label_boost: float = 1.3
    code_boost: float = 1.2
    word_boundary_boost: float = 1.1

    # partial_ratio cutoff used to narrow columns before the edit-distance check
    @property
    def score_cutoff(self) -> float:
        return round((1 - self.search_threshold) * 100, 6)

    model_config = {"env_prefix": "OCCUPATIONS_"}


settings = Settings()
