import inspect
import functools
import logging

sentinel = object()


def default(x, y):
    if x is None:
        return y
    else:
        return x


def quoted(value):
    '''
    Render strings in double quotes and anything else with `str`, the way
    collection descriptions show their elements.
    '''
    if isinstance(value, str):
        return '"' + value + '"'
    return str(value)


def type_name(ty):
    return getattr(ty, '__qualname__', None) or repr(ty)


trace_logger = logging.getLogger('trace')
_trace_indent = 0

def format_args(boundargs):
    '''
    Format the bound arguments object as Python code.

    :type boundargs: inspect.BoundArguments
    '''

    kw = ', '.join('{}={!r}'.format(k, v)
                   for (k, v) in boundargs.kwargs.items())
    args = ', '.join(map(repr, boundargs.args))

    if kw and args:
        return args + ', ' + kw
    elif args:
        return args
    elif kw:
        return kw
    else:
        return ''

def trace(func):
    sig = inspect.signature(func)
    @functools.wraps(func)
    def wrapper(*args, **kw):
        global _trace_indent
        if not trace_logger.isEnabledFor(logging.DEBUG):
            return func(*args, **kw)
        ind = '  ' * _trace_indent
        name = '{}({})'.format(func.__qualname__, format_args(sig.bind(*args, **kw)))
        trace_logger.debug(ind + 'entering %s', name)
        _trace_indent += 1
        try:
            result = func(*args, **kw)
        except BaseException as exc:
            trace_logger.debug(ind + '  exception %r', exc)
            raise
        else:
            trace_logger.debug(ind + '  returned %r', result)
            return result
        finally:
            _trace_indent -= 1
            trace_logger.debug(ind + 'exiting %s', name)

    return wrapper
