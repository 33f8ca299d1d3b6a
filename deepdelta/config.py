
import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Unicode, Enum, Bool, HasTraits, List, TraitError
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .log import LOG_LEVELS


# Config files are named <CONFIG_BASENAME>.json
CONFIG_BASENAME = 'deepdelta_config'


class DeltaConfigurable(HasTraits):
    """Base of the classes whose config traits can be set in config files.

    Config file sections are named after the class declaring the traits.
    """

    def configured_traits(self, cls):
        """Current values of the config traits declared directly on cls."""
        return {name: getattr(self, name)
                for name in cls.class_own_traits(config=True)}


_instances = {}

def config_instance(cls):
    """Shared instance of cls, holding the trait defaults."""
    if cls not in _instances:
        _instances[cls] = cls()
    return _instances[cls]


def _load_config_files(basefilename, paths):
    """Yield the non-empty configs stored as basefilename.json in paths.

    paths are in descending priority, so the configs are yielded
    starting with the least important one.
    """
    for path in reversed(paths):
        loader = JSONFileConfigLoader(basefilename + '.json', path=path)
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            continue
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Merge the dict new into target, recursing into nested dicts.

    Unless include_none is true, None values remove their key from
    target and nested dicts that end up empty are dropped.
    """
    for key, value in new.items():
        if isinstance(value, dict):
            sub = target.setdefault(key, {})
            recursive_update(sub, value, include_none)
            if not sub and not include_none:
                del target[key]
        elif value is None and not include_none:
            target.pop(key, None)
        else:
            target[key] = value


def build_config(entrypoint, include_none=False):
    """Resolve the flat config dict of a command.

    Defaults and config file sections are merged class by class, from
    the most generic base to the command's own class, so that sections
    of derived classes win. Files in the working directory take
    precedence over the jupyter config path.
    """
    try:
        configurable = entrypoint_configurables[entrypoint]
    except KeyError:
        raise ValueError('No config defined for entry point %r, expected one of %r.' % (
            entrypoint, sorted(entrypoint_configurables)))

    from_files = {}
    paths = [os.getcwd()] + jupyter_config_path()
    for loaded in _load_config_files(CONFIG_BASENAME, paths):
        recursive_update(from_files, loaded, include_none)

    config = {}
    for cls in reversed(configurable.mro()):
        if not issubclass(cls, DeltaConfigurable):
            continue
        recursive_update(config, config_instance(cls).configured_traits(cls), include_none)
        recursive_update(config, from_files.get(cls.__name__, {}), include_none)
    return config


class Global(DeltaConfigurable):

    log_level = Enum(
        LOG_LEVELS,
        'INFO',
        help="Log level name of the deepdelta commands.",
    ).tag(config=True)


class IgnorePaths(List):
    """List of paths on the form /key/*/key."""

    def validate_elements(self, obj, value):
        value = super(IgnorePaths, self).validate_elements(obj, value)
        for path in value:
            if not path.startswith('/'):
                raise TraitError('ignored path %r does not start with `/`' % path)
        return value


class _Diffing(DeltaConfigurable):

    order_independent = Bool(
        False,
        help="Compare arrays as unordered collections.",
    ).tag(config=True)

    ignore = IgnorePaths(
        Unicode(),
        default_value=[],
        help="Paths left out of diffs. A * segment matches any array index.",
    ).tag(config=True)


class Printing(DeltaConfigurable):

    use_color = Bool(
        True,
        help="Color the terminal output with ANSI escapes.",
    ).tag(config=True)


class DeltaDiff(Global, _Diffing, Printing):
    pass

class DeltaPatch(Global, Printing):
    pass


entrypoint_configurables = {
    'deltadiff': DeltaDiff,
    'deltapatch': DeltaPatch,
}
