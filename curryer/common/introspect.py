import logging

from multipledispatch import dispatch

from curryer.common.errors import NotSupported
from curryer.common.report import InfoReport
from curryer.utils.curry import DeferredCall, Mode

namespace = dict()


@dispatch(DeferredCall, namespace=namespace)
def info(fun):
    """Report on a deferred call without touching it.

    Everything comes from the fields the call carries, so the argument values
    themselves are never looked at.
    """
    logging.getLogger(InfoReport.__name__).debug("Inspecting %r", fun)
    return InfoReport(fun.target, Mode.label(fun.mode), fun.arity, len(fun.collected))


@dispatch(object, namespace=namespace)
def info(fun):
    raise NotSupported("{0!r} was not produced by curry or partial".format(fun))
