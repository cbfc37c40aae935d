"""Configuration and miscellaneous helpers."""
import functools
import logging
import os
import yaml

logger = logging.getLogger(__name__)

CONFIG_FILENAME = 'cmhomog.yml'

DEFAULT_PRECISION = 4


def load_config() -> dict:
    for path in os.curdir, os.path.expanduser('~'):
        filename = os.path.join(path, CONFIG_FILENAME)
        try:
            with open(filename, 'rt') as file:
                config = yaml.load(file, Loader=yaml.FullLoader)
        except FileNotFoundError:
            continue
        logger.debug('Loaded configuration from %s.', filename)
        # An empty file loads as None.
        return config or {}
    return {}


@functools.lru_cache(maxsize=None)
def get_config() -> dict:
    """Configuration loaded on first use. Call get_config.cache_clear() to reload."""
    return load_config()


def get_precision(config: dict = None) -> int:
    """Number of significant digits used when formatting values."""
    if config is None:
        config = get_config()
    precision = int(config.get('precision', DEFAULT_PRECISION))
    if precision < 1:
        raise ValueError('precision must be positive, got %d.'%precision)
    return precision


class Delegate:
    """Read-only attribute forwarded to an attribute of another field."""
    # Inspired by https://gist.github.com/dubslow/b8996308fc6af2437bef436fa28e86fa.
    def __init__(self, field: str, subfield: str):
        self.field = field
        self.subfield = subfield

    def __get__(self, instance, cls):
        if instance is None:
            return self
        return getattr(getattr(instance, self.field), self.subfield)

    def __set__(self, instance, value):
        raise AttributeError('%s is read-only.'%self.subfield)
