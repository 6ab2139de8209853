"""Enumerations for the batch processor."""

from enum import Enum


class GrobidService(str, Enum):
    """Named GROBID operations a batch can be run against.

    The member name is what users type on the command line; the value is
    the URL suffix appended to the API base.
    """

    FULLTEXT = "processFulltextDocument"
    HEADER = "processHeaderDocument"
    REFERENCES = "processReferences"

    @property
    def cli_name(self) -> str:
        """Lower-case name used on the command line and in config files."""
        return self.name.lower()

    @classmethod
    def from_name(cls, name: str) -> "GrobidService":
        """Look up a service by its CLI name or its URL suffix.

        Raises:
            ValueError: If no service matches.
        """
        for service in cls:
            if name.lower() == service.cli_name or name == service.value:
                return service
        choices = ", ".join(s.cli_name for s in cls)
        raise ValueError(f"Unknown GROBID service {name!r} (choose from: {choices})")


class JobStatus(str, Enum):
    """Outcome of a single submit-and-save job."""

    SUCCEEDED = "succeeded"
    SKIPPED = "skipped"  # output already present
    FAILED = "failed"
