"""Interactive property search and command-line entry point."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Iterable

from property_agency.config import AgencyConfig
from property_agency.exceptions import AgencyError
from property_agency.ingestion import load_agency
from property_agency.logging import setup_logging
from property_agency.models import PropertyType
from property_agency.sinks import JsonFileSink
from property_agency.store import Agency

logger = logging.getLogger(__name__)

NO_RESULTS = "No matching properties found."


class SearchShell:
    """Menu-driven search over an agency's properties.

    Parameters
    ----------
    agency : Agency
        Agency to query.
    input_fn : Callable[[], str] | None
        Source of user input, one token per call. Defaults to ``input``.
    output : Callable[[str], Any] | None
        Sink for displayed text. Defaults to ``print``.
    """

    def __init__(
        self,
        agency: Agency,
        input_fn: Callable[[], str] | None = None,
        output: Callable[[str], Any] | None = None,
    ) -> None:
        self.agency = agency
        self._input = input_fn or input
        self._output = output or print

    def run(self) -> None:
        """Show the main menu until the user exits or input runs out."""
        handlers = {
            1: self.handle_general_queries,
            2: self.handle_residence_queries,
            3: self.handle_commercial_queries,
            4: self.handle_retail_queries,
        }
        try:
            while True:
                self._menu(
                    "Welcome to our Property search.",
                    [
                        "General Queries",
                        "Residence Queries",
                        "Commercial Queries",
                        "Retail Queries",
                        "Exit",
                    ],
                )
                choice = self._read_int()
                if choice == 5:
                    break
                handler = handlers.get(choice)
                if handler is None:
                    self._output("Invalid choice. Please try again.")
                else:
                    handler()
        except EOFError:
            logger.debug("Input closed")
        self._output("Goodbye for now!")

    def handle_general_queries(self) -> None:
        while True:
            self._menu("General Queries", ["By Property ID", "By Street", "By Price", "By Type", "Back"])
            choice = self._read_int()
            if choice == 1:
                prop = self.agency.get_property(self._prompt("Enter the property ID:"))
                self._show([prop] if prop is not None else [])
            elif choice == 2:
                self._show(self.agency.get_properties_on(self._prompt("Enter the street:")))
            elif choice == 3:
                min_price = self._prompt_number("Enter the min price:", float)
                max_price = self._prompt_number("Enter the max price:", float)
                if min_price is not None and max_price is not None:
                    self._show(self.agency.get_properties_between(min_price, max_price))
            elif choice == 4:
                self._show(self.agency.get_properties_of_type(self._prompt("Enter the type:")))
            elif choice == 5:
                return

    def handle_residence_queries(self) -> None:
        while True:
            self._menu("Residence Queries", ["By Pool", "By Bedroom", "By Strata", "Back"])
            choice = self._read_int()
            if choice == 1:
                self._show(self.agency.get_properties_with_pools())
            elif choice == 2:
                min_bedrooms = self._prompt_number("Enter the minimum number of bedrooms:", int)
                max_bedrooms = self._prompt_number("Enter the maximum number of bedrooms:", int)
                if min_bedrooms is not None and max_bedrooms is not None:
                    matches = self.agency.get_properties_with_bedrooms(min_bedrooms, max_bedrooms)
                    self._show(matches.values())
            elif choice == 3:
                self._show(self.agency.get_properties_with_strata())
            elif choice == 4:
                return

    def handle_commercial_queries(self) -> None:
        while True:
            self._menu("Commercial Queries", ["By Loading Dock", "By Highway Access", "Back"])
            choice = self._read_int()
            if choice == 1:
                self._show(self.agency.get_properties_with_loading_docks())
            elif choice == 2:
                self._show(self.agency.get_properties_with_highway_access())
            elif choice == 3:
                return

    def handle_retail_queries(self) -> None:
        while True:
            self._menu("Retail Queries", ["By Square Footage", "By Customer Parking", "Back"])
            choice = self._read_int()
            if choice == 1:
                square_footage = self._prompt_number("Enter the square footage:", int)
                if square_footage is not None:
                    self._show(self.agency.get_properties_square_footage(square_footage))
            elif choice == 2:
                self._show(self.agency.get_properties_with_customer_parking())
            elif choice == 3:
                return

    def _menu(self, title: str, options: list[str]) -> None:
        self._output(" ")
        self._output(title)
        self._output("\n".join(f"{number}. {option}" for number, option in enumerate(options, 1)))

    def _read_int(self) -> int | None:
        try:
            return int(self._input().strip())
        except ValueError:
            return None

    def _prompt(self, message: str) -> str:
        self._output(message)
        return self._input().strip()

    def _prompt_number(self, message: str, kind: Callable[[str], Any]) -> Any:
        raw = self._prompt(message)
        try:
            return kind(raw)
        except ValueError:
            self._output(f"Invalid number: {raw}")
            return None

    def _show(self, results: Iterable[Any]) -> None:
        shown = 0
        for result in results:
            self._output(str(result))
            shown += 1
        if not shown:
            self._output(NO_RESULTS)


def export_listings(agency: Agency, sink: JsonFileSink) -> dict[str, int]:
    """Write every property, grouped by type, through ``sink``.

    Returns
    -------
    dict[str, int]
        Number of records written per type.
    """
    counts = {}
    for property_type in PropertyType:
        listings = agency.get_properties_of_type(property_type)
        sink.write_batch(property_type.value, listings)
        counts[property_type.value] = len(listings)
    return counts


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="property-agency",
        description="Load an agency portfolio and search it interactively",
    )
    parser.add_argument("--name", help="Agency name (env AGENCY_NAME)")
    parser.add_argument("--address-file", type=Path, help="Address data file (env ADDRESS_FILE)")
    parser.add_argument("--property-file", type=Path, help="Property data file (env PROPERTY_FILE)")
    parser.add_argument(
        "--export",
        type=Path,
        metavar="DIR",
        help="Write per-type JSON listings to DIR instead of starting the search",
    )
    parser.add_argument("--pretty", action="store_true", help="Pretty-print exported JSON")
    parser.add_argument("--log-level", help="Log level (env LOG_LEVEL)")
    parser.add_argument("--log-format", choices=["standard", "json"], help="Log format (env LOG_FORMAT)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config = AgencyConfig.from_env()
    if args.name:
        config.name = args.name
    if args.address_file:
        config.data.address_file = args.address_file
    if args.property_file:
        config.data.property_file = args.property_file
    if args.export:
        config.output.json_output_dir = args.export
    if args.pretty:
        config.output.pretty_json = True
    if args.log_level:
        config.log_level = args.log_level
    if args.log_format:
        config.log_format = args.log_format

    setup_logging(level=config.log_level, format_type=config.log_format)

    try:
        agency = Agency(name=config.name)
        load_agency(
            agency,
            config.data.address_file,
            config.data.property_file,
            encoding=config.data.encoding,
        )
    except (AgencyError, OSError) as exc:
        logger.error("Could not load agency data: %s", exc)
        return 1

    if args.export:
        try:
            sink = JsonFileSink(config.output.json_output_dir, pretty=config.output.pretty_json)
            try:
                export_listings(agency, sink)
            finally:
                sink.close()
        except (AgencyError, OSError) as exc:
            logger.error("Export failed: %s", exc)
            return 1
        return 0

    SearchShell(agency).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
