"""Pydantic configuration models for htmlplain."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field


class ConversionConfig(BaseModel):
    """Configuration for HTML to plain text conversion."""

    show_links: bool = Field(
        True,
        description="Append the URL in parentheses after links to absolute URLs",
    )
    parser: Literal["lxml", "html5lib", "html.parser"] = Field(
        "lxml",
        description="BeautifulSoup tree builder used to parse the markup",
    )

    model_config = {"extra": "forbid", "frozen": True}


class HtmlPlainConfig(BaseModel):
    """
    Root configuration model for htmlplain.

    Example:
        config = HtmlPlainConfig(
            conversion=ConversionConfig(show_links=False),
            log_level="DEBUG",
        )

    YAML format:
        conversion:
          show_links: false
          parser: html5lib
        log_level: INFO
    """

    conversion: ConversionConfig = Field(default_factory=ConversionConfig)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "WARNING",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(None, description="Log file path")

    model_config = {"extra": "forbid"}

    def to_yaml(self) -> str:
        """Serialize config to YAML string."""
        import yaml

        return yaml.dump(self.model_dump(mode="json", exclude_none=True), default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "HtmlPlainConfig":
        """Load config from YAML string."""
        import yaml

        data = yaml.safe_load(yaml_str)
        return cls.model_validate(data or {})

    @classmethod
    def from_yaml_file(cls, path: Path) -> "HtmlPlainConfig":
        """Load config from YAML file."""
        return cls.from_yaml(path.read_text())
