"""Named text transformations that user input variables can be passed through."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from genco import string_helper


def to_lowercase_with_hyphens(upper_camel_case_str: str) -> str:
    """Turn ``UpperCamelCase`` into ``upper-camel-case``."""
    return string_helper.to_lowercase_with_hyphens(upper_camel_case_str)


def to_lowercase_space_separated(upper_camel_case_str: str) -> str:
    """Turn ``UpperCamelCase`` into ``upper camel case``."""
    return string_helper.to_lowercase_space_separated(upper_camel_case_str)


def to_medial_case(upper_camel_case_str: str) -> str:
    """Turn ``UpperCamelCase`` into ``upperCamelCase``."""
    return string_helper.to_medial_case(upper_camel_case_str)


_FUNCTIONS: dict[str, Callable[[str], str]] = {
    "to_lowercase_with_hyphens": to_lowercase_with_hyphens,
    "to_lowercase_space_separated": to_lowercase_space_separated,
    "to_medial_case": to_medial_case,
}


@dataclass(frozen=True)
class UserInputFunction:
    """A call such as ``to_medial_case(var_id)`` written in a template."""

    raw_function_pattern: str
    function_name: str
    function_parameter: str
    function: Callable[[str], str]

    @classmethod
    def parse(cls, raw_function_pattern: str) -> UserInputFunction:
        """Parse ``name(parameter)`` into a function call description."""
        pieces = raw_function_pattern.split("(")
        if len(pieces) != 2 or not pieces[1].endswith(")"):
            raise ValueError(f'Invalid UserInputFunction "{raw_function_pattern}"')
        function_name, parameter_with_parenthesis = pieces
        try:
            function = _FUNCTIONS[function_name]
        except KeyError:
            raise ValueError(f'Invalid function "{function_name}"') from None
        return cls(
            raw_function_pattern=raw_function_pattern,
            function_name=function_name,
            function_parameter=parameter_with_parenthesis[:-1],
            function=function,
        )

    def apply(self, value: str) -> str:
        """Apply the named transformation to ``value``."""
        return self.function(value)