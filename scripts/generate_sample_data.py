#!/usr/bin/env python3
"""Generate a matching pair of sample address and property files.

The files use the pipe-delimited layout the agency loader reads, so they
can be fed straight to ``property-agency --address-file ... --property-file ...``.
Defaults for the seed, agency name and logging come from the environment
(``SEED``, ``AGENCY_NAME``, ``LOG_LEVEL``, ``LOG_FORMAT``).
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from property_agency.config import AgencyConfig
from property_agency.generators import PropertyGenerator
from property_agency.ingestion import load_agency, write_data_files
from property_agency.logging import setup_logging
from property_agency.store import Agency

DEFAULT_SEED = 42


def main(argv: list[str] | None = None) -> None:
    """Generate sample data files and verify they load."""
    config = AgencyConfig.from_env()
    default_seed = config.seed if config.seed is not None else DEFAULT_SEED

    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--count", type=int, default=25, help="Number of properties")
    parser.add_argument(
        "--seed",
        type=int,
        default=default_seed,
        help=f"Random seed (env SEED, default: {default_seed})",
    )
    parser.add_argument("--output-dir", type=Path, default=project_root / "local")
    args = parser.parse_args(argv)

    setup_logging(level=config.log_level, format_type=config.log_format)
    args.output_dir.mkdir(parents=True, exist_ok=True)
    address_path = args.output_dir / config.data.address_file.name
    property_path = args.output_dir / config.data.property_file.name

    print("=" * 60)
    print(f"Generating Sample Agency Data  |  seed={args.seed}")
    print("=" * 60)

    generator = PropertyGenerator(seed=args.seed)
    write_data_files(generator.generate_batch(args.count), address_path, property_path)

    agency = Agency(name=config.name)
    load_agency(agency, address_path, property_path)

    print(f"\nFiles written to: {args.output_dir}")
    for property_type, count in agency.summary().items():
        print(f"  {property_type}: {count}")
    print(f"  total value (USD): {agency.get_total_property_values():,}")


if __name__ == "__main__":
    main()
