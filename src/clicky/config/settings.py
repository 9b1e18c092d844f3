"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    project_root: Path = Field(
        default=Path(),
        description="Directory containing the .clicky board directory",
    )

    board_dir: str = Field(
        default=".clicky",
        description="Name of the per-project board directory",
    )

    board_file: str = Field(
        default="board.json",
        description="Board document filename inside board_dir",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "CLICKY_",
    }
