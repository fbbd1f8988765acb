"""Variables such as ``#{var=name}#`` found in template files, and their values."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from genco import cli_query
from genco.file_reader import read_all_bytes
from genco.string_helper import to_str

_START_PATTERN = b"#{"
_END_PATTERN = b"}#"
_VARIABLE_START = _START_PATTERN + b"var="


@dataclass(frozen=True)
class VariableInstantiation:
    """Where a variable appears: a file and the byte range ``[start, end)``."""

    file: Path
    byte_range: tuple[int, int]

    def __post_init__(self) -> None:
        object.__setattr__(self, "file", Path(self.file))
        if not self.file.is_file():
            raise FileNotFoundError(
                "Trying to create VariableInstantiation with invalid file"
            )
        start, end = self.byte_range
        if start > end:
            raise ValueError(
                "Trying to create VariableInstantiation with invalid bytes "
                f"({start},{end})"
            )


@dataclass
class VariableUsage:
    """Every place a variable is used, plus the value it will take."""

    var_id: str
    instantiations: list[VariableInstantiation] = field(default_factory=list)
    raw_user_input_value: str | None = None
    overridden_value: str | None = None

    def merge(self, new_usage: VariableUsage) -> None:
        """Add the places where ``new_usage`` appears to this usage."""
        for instantiation in new_usage.instantiations:
            self._add_instantiation(instantiation)

    def override(self, variable_value: str) -> None:
        """Fix the value regardless of what the user typed."""
        self.overridden_value = variable_value

    def value(self) -> str | None:
        """The overridden value if any, else the value the user typed."""
        if self.overridden_value is not None:
            return self.overridden_value
        return self.raw_user_input_value

    def _add_instantiation(self, instantiation: VariableInstantiation) -> None:
        start, end = instantiation.byte_range
        if start >= end:
            raise ValueError(
                "Bytes added to user input must have start_byte less than end_byte"
            )
        self.instantiations.append(
            VariableInstantiation(instantiation.file, instantiation.byte_range)
        )


class UserInput:
    """The variables of a set of files, merged by variable name."""

    def __init__(self) -> None:
        self.variables: dict[str, VariableUsage] = {}
        self.config_files_used: set[str] = set()

    @classmethod
    def from_file(cls, file: str | os.PathLike) -> UserInput:
        """Collect the variables used in ``file``."""
        user_input = cls()
        user_input.add_variables_from(file)
        return user_input

    def add_variables_from(self, new_file: str | os.PathLike) -> None:
        """Collect the variables of ``new_file`` unless it was already read."""
        key = str(Path(new_file))
        if key in self.config_files_used:
            return
        self._merge(_get_variables(Path(new_file)))
        self.config_files_used.add(key)

    def request_missing_user_input(self) -> None:
        """Ask the user for the value of every variable."""
        for variable_id, usage in self.variables.items():
            usage.raw_user_input_value = cli_query.ask_input(
                f'Please, insert the content for variable "{variable_id}":'
            )

    def override_value(self, variable_id: str, variable_value: str) -> None:
        """Fix the value of a known variable."""
        try:
            usage = self.variables[variable_id]
        except KeyError:
            raise KeyError(
                f'Variable to override value not found "{variable_id}"'
            ) from None
        usage.override(variable_value)

    def _merge(self, usages: dict[str, VariableUsage]) -> None:
        for var_id, usage in usages.items():
            existing = self.variables.get(var_id)
            if existing is None:
                self.variables[var_id] = usage
            else:
                existing.merge(usage)


def _parse_variable_name(pattern: str) -> str | None:
    inner = pattern[len(_START_PATTERN) : len(pattern) - len(_END_PATTERN)]
    pieces = inner.split("=")
    if len(pieces) != 2:
        raise ValueError(f'Invalid parse_user_input_var for pattern "{pattern}"')
    var_type, var_value = pieces
    return var_value if var_type == "var" else None


def _find_variables(content: bytes):
    """Yield the byte ranges of each ``#{var=...}#`` in ``content``."""
    position = 0
    while True:
        start = content.find(_VARIABLE_START, position)
        if start < 0:
            return
        end = content.find(_END_PATTERN, start)
        if end < 0:
            return
        position = end + len(_END_PATTERN)
        yield start, position


def _get_variables(file: Path) -> dict[str, VariableUsage]:
    content = read_all_bytes(file)
    to_str(content)
    result: dict[str, VariableUsage] = {}
    for start, end in _find_variables(content):
        pattern = to_str(content[start:end])
        var_name = _parse_variable_name(pattern)
        if var_name is None:
            raise ValueError(f"Invalid var_usage in file {str(file)!r}")
        usage = VariableUsage(
            var_id=var_name,
            instantiations=[VariableInstantiation(file, (start, end))],
        )
        existing = result.get(var_name)
        if existing is None:
            result[var_name] = usage
        else:
            existing.merge(usage)
    return result