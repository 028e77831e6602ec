# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Settings for richdelta, read from richdelta_config.json files.

Files are looked up in the directories listed in $RICHDELTA_CONFIG_PATH,
then the current directory, then the Jupyter config path. Earlier
directories win. Each file holds one section per configurable class:

    {"PrettyPrint": {"use_color": false}, "Global": {"log_level": "DEBUG"}}
"""

import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Enum, Integer, Bool, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .log import warning


CONFIG_BASENAME = 'richdelta_config'
CONFIG_PATH_ENV = 'RICHDELTA_CONFIG_PATH'


class DeltaConfigurable(HasTraits):
    pass


def class_defaults(cls):
    """Default values of the config traits defined on cls itself."""
    instance = cls()
    return {
        name: getattr(instance, name)
        for name in cls.class_own_traits(config=True)
    }


def config_search_path():
    "Directories searched for config files, highest priority first."
    path = [p for p in os.environ.get(CONFIG_PATH_ENV, '').split(os.pathsep) if p]
    path.append(os.getcwd())
    path.extend(jupyter_config_path())
    return path


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    None values will delete their keys.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            if k not in target:
                target[k] = {}
            recursive_update(target[k], v, include_none)
            if not include_none and not target[k]:
                # Prune empty subdicts
                del target[k]

        elif not include_none and v is None:
            target.pop(k, None)

        else:
            target[k] = v


def load_disk_config(path, include_none=False):
    """Merge all config files found on path into one dict of sections."""
    merged = {}
    # path is in descending priority order, so load files backwards
    for directory in reversed(path):
        loader = JSONFileConfigLoader(CONFIG_BASENAME + '.json', path=directory)
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            continue
        for section in config:
            if section not in configurable_names():
                warning("Ignoring unknown section %r in %s", section, loader.full_filename)
        recursive_update(merged, config, include_none)
    return merged


def build_config(entrypoint, include_none=False, path=None):
    """Merge trait defaults and config files for an entrypoint into a dict.

    Classes are applied in MRO order, so subclasses override
    the settings of the classes they derive from.
    """
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    if path is None:
        path = config_search_path()
    disk_config = load_disk_config(path, include_none)

    config = {}
    for c in reversed(entrypoint_configurables[entrypoint].mro()):
        if issubclass(c, DeltaConfigurable) and c is not DeltaConfigurable:
            recursive_update(config, class_defaults(c), include_none)
            recursive_update(config, disk_config.get(c.__name__, {}), include_none)

    return config


class Global(DeltaConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class PrettyPrint(Global):

    use_color = Bool(
        True,
        help="whether to color the op markers when printing deltas.",
    ).tag(config=True)

    max_text_width = Integer(
        60,
        min=0,
        help="truncate inserted text longer than this when printing "
             "deltas. 0 disables truncation.",
    ).tag(config=True)


entrypoint_configurables = {
    'richdelta': Global,
    'prettyprint': PrettyPrint,
}


def configurable_names():
    names = set()
    for cls in entrypoint_configurables.values():
        names.update(c.__name__ for c in cls.mro() if issubclass(c, DeltaConfigurable))
    return names


class Namespace(object):
    def __init__(self, adict):
        self.__dict__.update(adict)
