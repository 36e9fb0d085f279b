from curryer.common.errors import CurryError, ArityMismatch, NotSupported
from curryer.common.introspect import info
from curryer.common.report import InfoReport
from curryer.utils.curry import DeferredCall, Mode, curry, curried, partial, next_step, function_arity

__all__ = ['curry', 'curried', 'partial', 'next_step', 'function_arity', 'info',
           'DeferredCall', 'Mode', 'InfoReport', 'CurryError', 'ArityMismatch', 'NotSupported']
