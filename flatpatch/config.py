
import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Unicode, Enum, Bool, List, HasTraits, TraitError, validate
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound


class FlatpatchConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def _load_config_files(basefilename, path=None):
    """Load config files (json) by filename and path.

    yield each config object in turn.
    """

    if not isinstance(path, list):
        path = [path]
    for path in path[::-1]:
        # path list is in descending priority order, so load files backwards:
        loader = JSONFileConfigLoader(basefilename+'.json', path=path)
        config = None
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            pass
        if config:
            yield config


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


def build_config(name, include_none=False):
    """Build the configuration of the named section.

    Defaults come from the configurable classes, and are overridden by
    flatpatch_config.json files in the jupyter config path and the
    current directory, the latter having the highest priority.
    """
    if name not in section_configurables:
        raise ValueError('Config for section name %r is not defined! Accepted values are %r.' % (
            name, list(section_configurables.keys())
        ))

    # Get config from disk:
    disk_config = {}
    path = jupyter_config_path()
    path.insert(0, os.getcwd())
    for c in _load_config_files('flatpatch_config', path=path):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = section_configurables[name]
    for c in reversed(configurable.mro()):
        if issubclass(c, FlatpatchConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


class Global(FlatpatchConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class Diff(Global):

    atomic_paths = List(
        Unicode(),
        default_value=[],
        help="path patterns whose values are compared as a whole instead "
             "of being flattened. List entries are matched with `*`, "
             "e.g. `/cells/*/outputs`.",
    ).tag(config=True)

    strict_types = Bool(
        True,
        help="whether booleans are considered different from the numbers "
             "they compare equal to (`true` vs. `1`).",
    ).tag(config=True)

    @validate('atomic_paths')
    def _validate_atomic_paths(self, proposal):
        for path in proposal['value']:
            if not path.startswith('/'):
                raise TraitError('atomic paths need to start with `/`')
        return proposal['value']


section_configurables = {
    'diff': Diff,
}
