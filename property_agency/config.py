"""Configuration management for property-agency."""

from dataclasses import dataclass, field
from pathlib import Path

from property_agency.exceptions import ConfigurationError

DEFAULT_AGENCY_NAME = "VancoVista"


@dataclass
class DataFilesConfig:
    """Locations of the pipe-delimited input files."""

    address_file: Path = field(default_factory=lambda: Path("address_data.txt"))
    property_file: Path = field(default_factory=lambda: Path("property_data.txt"))
    encoding: str = "utf-8"


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class AgencyConfig:
    """Main configuration for property-agency."""

    name: str = DEFAULT_AGENCY_NAME
    data: DataFilesConfig = field(default_factory=DataFilesConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "AgencyConfig":
        """Create config from environment variables."""
        import os

        data = DataFilesConfig(
            address_file=Path(os.getenv("ADDRESS_FILE", "address_data.txt")),
            property_file=Path(os.getenv("PROPERTY_FILE", "property_data.txt")),
        )

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        seed_str = os.getenv("SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as exc:
            raise ConfigurationError(f"SEED must be an integer, got {seed_str!r}") from exc

        return cls(
            name=os.getenv("AGENCY_NAME", DEFAULT_AGENCY_NAME),
            data=data,
            output=output,
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
