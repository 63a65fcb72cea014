"""Output sinks for exporting query results."""

from property_agency.sinks.json_file import JsonFileSink

__all__ = ["JsonFileSink"]
