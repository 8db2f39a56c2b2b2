"""Analysis configuration."""

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_TOP_N = 10


class AnalysisConfig(BaseModel):
    """Settings for one analysis run."""

    source_path: Path
    top_n: int = Field(default=DEFAULT_TOP_N, ge=1)  # number of top words to report
