"""
Configuration file handling.

Settings come from YAML files layered on top of each other: the package
defaults in data/config.yml, the system-wide SYSTEM_CONFIG, the defaults for
the action being run (data/config_<action>.yml), and finally any file given
explicitly.  Later layers override earlier ones key by key.
"""
import logging
import collections.abc
from pathlib import Path
import yaml.parser
from .util import yaml_load
from .identifier import GRAMMARS
from .report import ON_ERROR

SYSTEM_CONFIG = "/etc/illumina_coordinates.yml"

# Allowed values for settings that have a fixed set of choices
CHOICES = {
    "grammar": list(GRAMMARS),
    "on_error": ON_ERROR}

LOGGER = logging.getLogger(__name__)

# Adapted from
# https://stackoverflow.com/a/3233356
def update_tree(tree_orig, tree_new):
    """Recursively update one dict with another.

    Note that the original is modified in place."""
    for key, val in tree_new.items():
        if isinstance(val, collections.abc.Mapping):
            tree_orig[key] = update_tree(tree_orig.get(key, {}), val)
        else:
            tree_orig[key] = val
    return tree_orig

def layer_configs(paths):
    """Load configuration for each path given, merging all options.

    The later paths take priority.  Empty/None entries are ignored, and
    paths that don't exist are logged and skipped."""
    config = {}
    for path in paths:
        if not path:
            continue
        if Path(path).exists():
            try:
                cfg = yaml_load(path)
                LOGGER.info("Configuration loaded from %s", path)
            except yaml.parser.ParserError:
                LOGGER.critical("Configuration parse error while loading %s", path)
                raise
        else:
            LOGGER.info("Configuration file not found at %s", path)
            cfg = {}
        update_tree(config, cfg)
    return config

def path_for_config(suffix=None):
    """Return config file path relative to package data directory."""
    if suffix:
        name = "config_%s.yml" % suffix
    else:
        name = "config.yml"
    path = Path(__file__).parent / "data" / name
    return path

def check_config(config):
    """Raise ValueError if a setting with fixed choices has some other value."""
    for key, choices in CHOICES.items():
        val = config.get(key)
        if val is not None and val not in choices:
            raise ValueError('%s should be one of %s, not "%s"' % (
                key, ", ".join(choices), val))
    return config

def load_config(action=None, path=None, overrides=None):
    """Layer the configuration for an action and check the result.

    action: name of the action-specific defaults to include, if any
    path: extra configuration file to layer on last
    overrides: dictionary applied on top of everything (e.g. from
               command-line options); None values are ignored
    """
    paths = [path_for_config(), SYSTEM_CONFIG, path_for_config(action), path]
    if not action:
        paths[2] = None
    config = layer_configs(paths)
    overrides = {key: val for key, val in (overrides or {}).items() if val is not None}
    update_tree(config, overrides)
    return check_config(config)
