"""Config is a module for storing and managing local and runtime configurations.

Config provides instances of Configuration objects, for both runtime and local types. Stored
configurations are in YAML format.

There are two types of config: local, stored in the ``asymptote.yml`` file in the current working
directory (or any other file passed from the command line), and runtime, containing the options
for one execution of asymptote, not stored anywhere. When looking up the keys, the runtime config
takes precedence over the local one, and if neither of them sets the key, the built-in defaults
are used.

The following keys are recognized:

  .. code-block:: yaml

      output:
        dir: analytics
        filename: benchmark.png
      chart:
        width: 800
        height: 600
      sampler:
        collect_garbage: true
"""
from __future__ import annotations

# Standard Imports
from typing import Any, Iterable, Optional
import copy
import dataclasses
import os
import re

# Third-Party Imports

# Asymptote Imports
from asymptote.utils import decorators, exceptions, log, streams

LOCAL_CONFIG_FILE: str = "asymptote.yml"
DEFAULTS: dict[str, Any] = {
    "output": {
        "dir": "analytics",
        "filename": "benchmark.png",
    },
    "chart": {
        "width": 800,
        "height": 600,
    },
    "sampler": {
        "collect_garbage": True,
    },
}


def is_valid_key(key: str) -> bool:
    """Validation function for key representing one option in config section.

    Validates that the given string key is in form of dot separated (.) strings. Each delimited
    string represents one subsection, with last string representing the option.

    :param str key: string we are validating
    :returns: true if the given key is in correct key format
    """
    valid_key_pattern = re.compile(r"^[a-zA-Z0-9_]+(\.[a-zA-Z0-9_]+)*$")
    return valid_key_pattern.match(key) is not None


@dataclasses.dataclass
class Config:
    """Config represents one instance of configuration of given type.

    Configurations are represented by their type and dictionary containing (possibly nested)
    section with concrete keys, such as the following::

        {
            'output': {
                'dir': 'analytics',
                'filename': 'benchmark.png'
            },
            'chart': {
                'width': 800,
                'height': 600
            }
        }

    The path records the file the config was loaded from. Modifications made during the run are
    kept in memory only and are never written back to the file.
    """

    __slots__ = ["type", "path", "data"]

    type: str
    path: str
    data: dict[str, Any]

    @decorators.validate_arguments(["key"], is_valid_key)
    def set(self, key: str, value: Any) -> None:
        """Overrides the value of the key in the config.

        :param str key: list of sections separated by dots
        :param object value: value we are writing to the key at config
        """
        *sections, last_section = key.split(".")
        _locate_section_from_query(self.data, sections)[last_section] = value

    def safe_get(self, key: str, default: Any) -> Any:
        """Safely returns the value of the key; i.e. in case it is missing default is used

        :param str key: key we are looking up
        :param object default: default value of the key, which is used if we did not find the
            value for the key
        :return: value of the key in the config or default
        """
        try:
            return self.get(key)
        except exceptions.MissingConfigSectionException:
            return default

    @decorators.validate_arguments(["key"], is_valid_key)
    def get(self, key: str) -> Any:
        """Returns the value of the key stored in the config.

        :param str key: list of section separated by dots
        :returns value: retrieved value of the key at config
        :raises exceptions.MissingConfigSectionException: if the key is not present in the config
        """
        section_iterator = self.data
        for section in key.split("."):
            section_iterator = _ascend_by_section_safely(section_iterator, section)
        return section_iterator


def _locate_section_from_query(config_data: dict[str, Any], sections: list[str]) -> dict[str, Any]:
    """Locates the section in the config data, creating the missing sections on the way

    :param dict config_data: configuration data
    :param list sections: list of sections leading to the option
    :returns: the innermost section
    """
    section_iterator = config_data
    for section in sections:
        if section not in section_iterator.keys():
            section_iterator[section] = {}
        section_iterator = section_iterator[section]
    return section_iterator


def _ascend_by_section_safely(section_iterator: dict[str, Any], section_key: str) -> Any:
    """Ascends by one level in the nested configuration

    :param dict section_iterator: dictionary of nested keys
    :param str section_key: section of keys in the stream of nested dictionaries
    :returns: dictionary or the key after ascending by one section key
    :raises exceptions.MissingConfigSectionException: when the given section_key is not found in
        the configuration object.
    """
    if not isinstance(section_iterator, dict) or section_key not in section_iterator:
        raise exceptions.MissingConfigSectionException(section_key)
    return section_iterator[section_key]


@decorators.singleton_with_args
def local(path: str) -> Config:
    """Returns the configuration corresponding to the local configuration file at @p path.

    If the file does not exist, an empty configuration is returned (and it is not stored).

    :param str path: path to the configuration file
    :returns config: local Config from the given path
    """
    if os.path.isfile(path):
        return Config("local", path, streams.safely_load_yaml_from_file(path))

    log.msg_to_file(f"local configuration file at {path} does not exist", log.VERBOSE_DEBUG)
    return Config("local", "", {})


@decorators.singleton
def runtime() -> Config:
    """
    Returns the configuration corresponding to the one runtime of asymptote, not stored anywhere
    and serving as a temporary shared storage through various functions. Moreover, this is also
    used to temporary rewrite some options looked-up in the recursive manner.

    runtime = {
        'config_file': 'asymptote.yml'
        'output': {
            'dir': 'analytics'
        }
    }

    :returns: runtime temporary config
    """
    return Config("runtime", "", {})


def defaults() -> Config:
    """
    :returns: config with the built-in default values
    """
    return Config("defaults", "", copy.deepcopy(DEFAULTS))


def local_config_path() -> str:
    """Returns the path to the local config, either set in the runtime config or the default one

    :returns: path to the local configuration file
    """
    return runtime().safe_get("config_file", os.path.join(os.getcwd(), LOCAL_CONFIG_FILE))


def get_hierarchy() -> Iterable[Config]:
    """Iteratively yields the configurations of asymptote in order in which they should be looked
    up.

    First we check the runtime/temporary configuration, then the local configuration and last the
    built-in defaults.

    :returns: iterable stream of configurations in the priority order
    """
    yield runtime()
    yield local(local_config_path())
    yield defaults()


def lookup_key_recursively(key: str, default: Optional[Any] = None) -> Any:
    """Recursively looks up the key first in the runtime config, then in the local and defaults.

    :param str key: key we are looking up
    :param object default: default value, if key is not located in the hierarchy
    :raises exceptions.MissingConfigSectionException: if the key is not found and no default is
        given
    """
    for config_instance in get_hierarchy():
        try:
            return config_instance.get(key)
        except exceptions.MissingConfigSectionException:
            continue
    # If we have provided default value of the key return this, otherwise we raise an exception
    if default is not None:
        return default
    raise exceptions.MissingConfigSectionException(key)


def effective() -> dict[str, Any]:
    """Merges the hierarchy of the configurations into one dictionary

    Keys of configurations with higher priority override the keys of the lower ones.

    :returns: merged configuration data
    """
    merged: dict[str, Any] = {}
    for config_instance in reversed(list(get_hierarchy())):
        _merge_into(merged, config_instance.data)
    return merged


def _merge_into(target: dict[str, Any], source: dict[str, Any]) -> None:
    """Recursively merges the source dictionary into the target one

    :param dict target: dictionary that is updated
    :param dict source: dictionary with the values of higher priority
    """
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge_into(target[key], value)
        else:
            target[key] = copy.deepcopy(value)
