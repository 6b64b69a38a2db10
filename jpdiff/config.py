
import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Enum, Bool, HasTraits, TraitError
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .diffing.config import KEY_ORDERS
from .log import LOG_LEVELS


# Base name of the json config files, looked up in the
# current directory and in the jupyter config path
CONFIG_BASENAME = 'jpdiff_config'


class JpdiffConfigurable(HasTraits):

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


def validate_section(cls, section):
    """Check the values of a config file section against the traits of cls.

    Raises TraitError for a value the trait does not accept.
    """
    traits = cls.class_own_traits(config=True)
    instance = config_instance(cls)
    for name, value in section.items():
        if name in traits and value is not None:
            try:
                traits[name].validate(instance, value)
            except TraitError as e:
                raise TraitError("%s.%s: %s" % (cls.__name__, name, e)) from e


def config_search_path():
    "Directories searched for config files, highest priority first."
    path = jupyter_config_path()
    path.insert(0, os.getcwd())
    return path


def build_config(entrypoint, include_none=False):
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    # Get config from disk:
    disk_config = {}
    for c in _load_config_files(CONFIG_BASENAME, path=config_search_path()):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, JpdiffConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                validate_section(c, disk_config[c.__name__])
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(JpdiffConfigurable):

    log_level = Enum(
        LOG_LEVELS,
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class Diff(JpdiffConfigurable):

    key_order = Enum(
        KEY_ORDERS,
        'document',
        help="Order of add/remove/replace operations on object keys: "
             "'document' follows key order in the input files, "
             "'sorted' sorts by key.",
    ).tag(config=True)


class PrettyPrint(JpdiffConfigurable):

    use_color = Bool(
        False,
        help="whether to color operation lines with ANSI escapes.",
    ).tag(config=True)


class JpDiff(Diff, PrettyPrint, Global):
    pass


entrypoint_configurables = {
    'jpdiff': JpDiff,
}
