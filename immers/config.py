# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Enum, Bool, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound


class ImmersConfigurable(HasTraits):

    @classmethod
    def own_defaults(cls):
        "Default values of the config traits declared on cls itself."
        instance = _defaults_instances.get(cls)
        if instance is None:
            instance = _defaults_instances[cls] = cls()
        return {name: getattr(instance, name)
                for name in cls.class_own_traits(config=True)}


_defaults_instances = {}


def _iter_config_files(path):
    """Yield the immers_config.json contents found along path.

    path is in descending priority order, so files are yielded
    lowest priority first.
    """
    for directory in reversed(path):
        loader = JSONFileConfigLoader('immers_config.json', path=directory)
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            continue
        if config:
            yield config


def merge_config(target, new):
    """Merge new into target, descending into sections.

    A None value removes its key, sections left empty are dropped.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            section = target.setdefault(k, {})
            merge_config(section, v)
            if not section:
                del target[k]
        elif v is None:
            target.pop(k, None)
        else:
            target[k] = v


def config_search_path():
    "Directories searched for immers_config.json, highest priority first."
    path = jupyter_config_path()
    path.insert(0, os.getcwd())
    return path


_built_cache = {}
def build_config(entrypoint):
    """Merge trait defaults with config files for entrypoint.

    Sections of the file are named after the configurable classes,
    a section applies to its class and every subclass of it.

    Results are cached, call clear_config_cache() after
    changing config files or the working directory.
    """
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))
    if entrypoint in _built_cache:
        return dict(_built_cache[entrypoint])

    disk_config = {}
    for c in _iter_config_files(config_search_path()):
        merge_config(disk_config, c)

    config = {}
    for cls in reversed(entrypoint_configurables[entrypoint].mro()):
        if issubclass(cls, ImmersConfigurable) and cls is not ImmersConfigurable:
            merge_config(config, cls.own_defaults())
            merge_config(config, disk_config.get(cls.__name__, {}))

    _built_cache[entrypoint] = config
    return dict(config)


def clear_config_cache():
    _built_cache.clear()


class Global(ImmersConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class Patching(Global):

    atomic = Bool(
        False,
        help="Apply record patches to a scratch copy and only keep the result "
             "if every field applied. By default fields applied before a "
             "failing field keep their new values.",
    ).tag(config=True)

    validate = Bool(
        False,
        help="Check the structure of a patch against its type before applying it.",
    ).tag(config=True)


class PrettyPrint(Global):

    use_color = Bool(
        True,
        help="Color added and removed values when printing patches.",
    ).tag(config=True)


entrypoint_configurables = {
    'global': Global,
    'patching': Patching,
    'prettyprint': PrettyPrint,
}
