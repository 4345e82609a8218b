"""Parser for ``sdkmanager --list`` output.

The tool prints a loosely formatted, human-oriented report with three
sections (installed packages, available packages, available updates).
Each record starts with an unindented package path line followed by
indented ``Key: Value`` lines, and records are usually separated by a
blank line::

    Installed packages:
    --------------------------------------
    platforms;android-30
        Description:        Android SDK Platform 30
        Version:            3
        Installed Location: /sdk/platforms/android-30

There is no schema or escaping, so parsing is a single forward pass over
the lines driven by a small state machine: section headers switch the
current section, value lines are buffered, and a delimiter turns the
buffer into a typed record.
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from sdkmgr.models.listing import ListingResult
from sdkmgr.models.package import AvailablePackage, AvailableUpdate, InstalledPackage

logger = logging.getLogger(__name__)


class Section(Enum):
    """Section of the listing currently being read."""

    NONE = "none"
    INSTALLED = "installed"
    AVAILABLE = "available"
    UPDATES = "updates"


# Header substrings, matched case-insensitively
_SECTION_HEADERS: tuple[tuple[str, Section], ...] = (
    ("installed packages:", Section.INSTALLED),
    ("available packages:", Section.AVAILABLE),
    ("available updates:", Section.UPDATES),
)

_IDENTIFIER_PATTERN = re.compile(r"^[a-z]", re.IGNORECASE)

# Keys of table headers, separators and id/path echoes that carry no field
_NOISE_KEY_MARKERS: tuple[str, ...] = ("path", "id", "------")

_DEPENDENCIES_MARKER = "dependencies"

# Separator inside a section that ends the pending record
_RECORD_END_MARKER = "installed updates:"

# Field names in the order values are buffered; flushing pops them in reverse
_SECTION_FIELDS: dict[Section, tuple[str, ...]] = {
    Section.INSTALLED: ("path", "description", "version", "location"),
    Section.AVAILABLE: ("path", "description", "version"),
    Section.UPDATES: ("path", "installed_version", "available_version"),
}


@dataclass
class _ParseState:
    """Mutable state of a single parse pass."""

    result: ListingResult = field(default_factory=ListingResult)
    section: Section = Section.NONE
    buffer: list[str] = field(default_factory=list)
    skipping_dependencies: bool = False


class ListingParser:
    """Convert captured ``sdkmanager --list`` output into a ListingResult.

    The parser holds no state between calls; every call to :meth:`parse`
    starts a fresh pass, so one instance can be reused.

    Example:
        >>> result = ListingParser().parse(output.splitlines())
        >>> for pkg in result.installed_packages:
        ...     print(pkg.path, pkg.version)
    """

    def parse(self, lines: Iterable[str]) -> ListingResult:
        """Parse the complete output of a listing invocation.

        Malformed or incomplete records are dropped silently; this method
        never raises on unexpected input.

        Args:
            lines: Output lines, consumed once and in order.

        Returns:
            ListingResult with the records in the order they were printed.
        """
        state = _ParseState()

        for raw_line in lines:
            self._feed(state, raw_line.rstrip("\r\n"))

        if state.buffer:
            self._flush(state)

        return state.result

    def _feed(self, state: _ParseState, line: str) -> None:
        """Advance the state machine by one line."""
        lowered = line.lower()

        for marker, section in _SECTION_HEADERS:
            if marker in lowered:
                if state.buffer:
                    self._flush(state)
                state.section = section
                state.skipping_dependencies = False
                return

        if state.section is Section.NONE:
            return

        if _RECORD_END_MARKER in lowered:
            if state.buffer:
                self._flush(state)
            return

        if _DEPENDENCIES_MARKER in lowered:
            state.skipping_dependencies = True
            return

        if not line.strip():
            if state.buffer:
                self._flush(state)
            state.skipping_dependencies = False
            return

        if _IDENTIFIER_PATTERN.match(line):
            # Update records are not always followed by a blank line
            if state.section is Section.UPDATES and state.buffer:
                self._flush(state)
            state.skipping_dependencies = False
            state.buffer.append(line)
            return

        key, sep, value = line.partition(":")
        if not sep or state.skipping_dependencies:
            return

        key = key.lower()
        if any(marker in key for marker in _NOISE_KEY_MARKERS):
            return

        state.buffer.append(value)

    def _flush(self, state: _ParseState) -> None:
        """Turn the buffered fragment into a record of the current section.

        The newest values are assigned first, in reverse field order. A
        fragment with too few values is discarded; values older than the
        ones consumed are discarded as well.
        """
        fields = _SECTION_FIELDS.get(state.section)
        fragment = state.buffer
        state.buffer = []

        if fields is None:
            return

        if len(fragment) < len(fields):
            logger.debug(
                "Dropping incomplete %s record (%d of %d values): %r",
                state.section.value,
                len(fragment),
                len(fields),
                fragment,
            )
            return

        if len(fragment) > len(fields):
            logger.debug(
                "Discarding %d surplus value(s) in %s record: %r",
                len(fragment) - len(fields),
                state.section.value,
                fragment[: len(fragment) - len(fields)],
            )

        values = {name: fragment.pop().strip() for name in reversed(fields)}

        if not values["path"]:
            logger.debug("Dropping %s record without a path", state.section.value)
            return

        if state.section is Section.INSTALLED:
            state.result.installed_packages.append(InstalledPackage(**values))
        elif state.section is Section.AVAILABLE:
            state.result.available_packages.append(AvailablePackage(**values))
        else:
            state.result.available_updates.append(AvailableUpdate(**values))


def parse_listing(lines: Iterable[str]) -> ListingResult:
    """Parse ``sdkmanager --list`` output lines.

    Convenience wrapper around :class:`ListingParser`.

    Args:
        lines: Output lines of a listing invocation.

    Returns:
        ListingResult with installed packages, available packages and updates.
    """
    return ListingParser().parse(lines)
