"""
Utils package.
"""

import logging as _logging
import functools as _functools
import pprint

from collections.abc import Container as _Container
from collections.abc import Mapping as _Mapping


logging_defaults = dict(
    level=_logging.DEBUG,
    filemode='w',
    format='%(levelname)-8s%(name)s:\t%(message)s',
)

def init_logging(filename_or_stream, **kwargs):
    """Configures the root logger, e.g. from a script or a test session.

    The library never calls it by itself."""
    init_dict = dict(logging_defaults, **kwargs)

    is_string = isinstance(filename_or_stream, str)
    init_dict['filename' if is_string else 'stream'] = filename_or_stream
    if not is_string:
        init_dict.pop('filemode', None)

    _logging.basicConfig(**init_dict)


def get_extended_logger(name):
    return extend_logger(_logging.getLogger(name))

def extend_logger(logger):
    logger.dump = _functools.partial(logger_dump, logger)
    logger.wrap = _functools.partial(logger_wrap, logger)
    return logger


def logger_wrap(logger, func, width=60):
    msg = ' {func.__name__} '.format(**locals())
    header = '---{msg:-<{width}}'.format(**locals())
    footer = '{msg:->{width}}---'.format(**locals())

    @_functools.wraps(func)
    def decorated(*args, **kwargs):
        logger.debug(header)
        try:
            return func(*args, **kwargs)
        finally:
            logger.debug(footer)

    return decorated


def logger_dump(logger, target, attrs=None):
    if not logger.isEnabledFor(_logging.DEBUG):
        return

    if isinstance(attrs, str):
        attrs = attrs.split()
    if attrs is None:
        try:
            attrs = target._dump_attrs
        except AttributeError:
            attrs = [attr for attr in dir(target) if not attr.startswith('_')]

    logger.debug('%r', target)
    for attr in attrs:
        try:
            obj = getattr(target, attr)
        except AttributeError as e:
            obj = e
        else:
            obj = _log_dump_normalize(obj)

        try:
            obj_len = len(obj)
        except TypeError:
            msg = '.{0}:'.format(attr)
        else:
            msg = '.{0}: (len={1})'.format(attr, obj_len)

        logger.debug('\t||%s', msg)
        for line in pprint.pformat(obj).splitlines():
            logger.debug('\t||\t\t%s', line)


def _log_dump_normalize(obj):
    if isinstance(obj, _Mapping):
        obj = dict((k, _log_dump_normalize(v)) for k, v in obj.items())
    elif isinstance(obj, _Container) and not isinstance(obj, str):
        obj = sorted(obj, key=repr)
    return obj
