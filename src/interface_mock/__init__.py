"""Generate mock API data from interface definitions."""

from interface_mock.generator.mock import MockGenerator, generate_mock_data
from interface_mock.generator.options import GeneratorOptions
from interface_mock.parser.base import ParsedInterface, TypeInfo
from interface_mock.parser.interface import parse_interface

__all__ = [
    "GeneratorOptions",
    "MockGenerator",
    "ParsedInterface",
    "TypeInfo",
    "generate_mock_data",
    "parse_interface",
]
