"""Functions for loading and working with streams (e.g. yaml)

Some of the stuff are stored in the stream, like e.g. yaml and are reused in several places.
This module encapsulates such functions, so they can be used in CLI, in tests, in configs.
"""
from __future__ import annotations

# Standard Imports
from typing import TextIO, Any
import io
import os

# Third-Party Imports
from ruamel.yaml import YAML

# Asymptote Imports
from asymptote.utils import log


def safely_load_yaml_from_file(yaml_file: str) -> dict[Any, Any]:
    """
    :param str yaml_file: name of the yaml file
    :return: loaded yaml or empty dictionary if the file does not exist or is malformed
    """
    if not os.path.exists(yaml_file):
        log.warn(f"yaml source file '{yaml_file}' does not exist")
        return {}

    with open(yaml_file, "r") as yaml_handle:
        return safely_load_yaml_from_stream(yaml_handle)


def safely_load_yaml_from_stream(yaml_stream: TextIO | str) -> dict[Any, Any]:
    """
    :param str yaml_stream: stream in the yaml format (or not)
    :return: loaded yaml or empty dictionary if the stream is malformed or is not a mapping
    """
    try:
        loaded_yaml = YAML().load(yaml_stream)
    except Exception as exc:
        log.warn(f"malformed yaml stream: {exc}")
        return {}

    if loaded_yaml is None:
        return {}
    if not isinstance(loaded_yaml, dict):
        log.warn(f"yaml stream is not a mapping but '{type(loaded_yaml).__name__}'")
        return {}
    return loaded_yaml


def yaml_to_string(dictionary: dict[Any, Any]) -> str:
    """Converts the dictionary representing the YAML into string

    :param dict dictionary: yaml stored as dictionary
    :return: string representation of the yaml
    """
    string_stream = io.StringIO()
    yaml_dumper = YAML()
    yaml_dumper.dump(dictionary, string_stream)
    string_stream.seek(0)
    return "".join([" " * 4 + s for s in string_stream.readlines()])
