from __future__ import annotations

import inspect
import logging
from typing import Callable, Generic, Optional, Tuple, TypeVar, Union

from curryer.common.errors import ArityMismatch, NotSupported
from curryer.utils.constant import Const

ReturnType = TypeVar("ReturnType")


class Mode(Const):
    CURRY = ('curry', 'Currying')
    PARTIAL = ('partial', 'Partial application')

    @staticmethod
    def tag(mode):
        return mode[0]

    @staticmethod
    def label(mode):
        return mode[1]

    @staticmethod
    def from_tag(tag: str):
        for mode in (Mode.CURRY, Mode.PARTIAL):
            if Mode.tag(mode) == tag:
                return mode
        raise ValueError("unknown mode {0!r}".format(tag))

    @staticmethod
    def resolve(mode):
        if mode == Mode.CURRY or mode == Mode.PARTIAL:
            return mode
        if isinstance(mode, str):
            return Mode.from_tag(mode)
        raise ValueError("unknown mode {0!r}".format(mode))


def function_arity(target: Callable) -> int:
    """Number of positional arguments ``target`` needs before it can be invoked.

    Parameters with defaults are left to their defaults. Variadic targets, and
    targets with required keyword-only parameters, cannot be accumulated
    positionally and raise NotSupported.
    """
    try:
        signature = inspect.signature(target)
    except (TypeError, ValueError) as e:
        raise NotSupported("cannot discover the arity of {0!r}".format(target)) from e
    arity = 0
    for param in signature.parameters.values():
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            raise NotSupported("variadic parameter {0} in {1!r}".format(param, target))
        if param.default is not param.empty:
            continue
        if param.kind == param.KEYWORD_ONLY:
            raise NotSupported("required keyword-only parameter {0} in {1!r}".format(param, target))
        arity += 1
    return arity


def _resolve_arity(target: Callable, arity: Optional[int]) -> int:
    if arity is None:
        return function_arity(target)
    if arity < 0:
        raise ValueError("arity must be >= 0, got {0}".format(arity))
    return arity


class StepSignature:
    """``__signature__`` of a step: one positional-only parameter per expected argument.

    Looked up on the class itself it gives None, so ``inspect`` falls back to
    the constructor.
    """

    def __get__(self, instance, owner):
        if instance is None:
            return None
        params = [inspect.Parameter("arg{0}".format(i), inspect.Parameter.POSITIONAL_ONLY)
                  for i in range(1, instance.expected + 1)]
        return inspect.Signature(params)


class DeferredCall(Generic[ReturnType]):
    """A step in an accumulation chain.

    Holds the target, its total arity, the arguments collected so far and the
    mode of the chain. Calling it never changes it: every call either invokes
    the target or hands back a new DeferredCall.
    """

    __signature__ = StepSignature()

    def __init__(self, target: Callable[..., ReturnType], arity: int, collected: Tuple, mode) -> None:
        collected = tuple(collected)
        if len(collected) >= arity:
            # a full argument list is invoked, never deferred
            raise ArityMismatch(arity, len(collected))
        self._target = target
        self._arity = arity
        self._collected = collected
        self._mode = Mode.resolve(mode)

    @property
    def target(self):
        return self._target

    @property
    def arity(self):
        return self._arity

    @property
    def collected(self):
        return self._collected

    @property
    def mode(self):
        return self._mode

    @property
    def remaining(self):
        return self._arity - len(self._collected)

    @property
    def expected(self):
        # curry steps are always unary, partial steps take everything that is left
        return 1 if self._mode == Mode.CURRY else self.remaining

    def __call__(self, *more_args, **more_kwargs) -> Union[DeferredCall[ReturnType], ReturnType]:
        if more_kwargs or len(more_args) != self.expected:
            received = len(more_args) + len(more_kwargs)
            logging.getLogger(DeferredCall.__name__).warning(
                "%s step of %r called with %d argument(s), expected %d",
                Mode.tag(self._mode), self._target, received, self.expected
            )
            raise ArityMismatch(self.expected, received)
        return next_step(self._target, self._arity, self._collected + more_args, self._mode)

    def __setattr__(self, name, value):
        if name[0] == '_' and not hasattr(self, '_mode'):
            super().__setattr__(name, value)
        else:
            raise AttributeError("DeferredCall is immutable")

    def __repr__(self):
        return f"DeferredCall({self._target}, mode={Mode.tag(self._mode)}, " \
               f"args={self._collected}, remaining={self.remaining})"


def next_step(target: Callable[..., ReturnType], arity: int, collected: Tuple, mode) \
        -> Union[DeferredCall[ReturnType], ReturnType]:
    logger = logging.getLogger(DeferredCall.__name__)
    mode = Mode.resolve(mode)
    collected = tuple(collected)
    remaining = arity - len(collected)
    if remaining == 0:
        logger.debug("Invoking %r with %d argument(s)", target, arity)
        return target(*collected)
    if remaining < 0:
        logger.warning("%r takes %d argument(s) but %d were collected", target, arity, len(collected))
        raise ArityMismatch(arity, len(collected))
    logger.debug("Deferring %r (%s): %d collected, %d still needed",
                 target, Mode.tag(mode), len(collected), remaining)
    return DeferredCall(target, arity, collected, mode)


def curry(target: Callable[..., ReturnType], arity: Optional[int] = None) \
        -> Union[DeferredCall[ReturnType], ReturnType]:
    """Curry ``target``: the result takes one argument per call.

    >>> add3 = lambda a, b, c: a + b + c
    >>> curry(add3)(1)(77)(10)
    88

    A zero-arity target has nothing to wait for and is invoked right away.
    """
    return next_step(target, _resolve_arity(target, arity), (), Mode.CURRY)


def partial(target: Callable[..., ReturnType], *args, arity: Optional[int] = None) \
        -> Union[DeferredCall[ReturnType], ReturnType]:
    """Partially apply ``target`` to ``args``.

    The result takes all of the remaining arguments in a single call.

    >>> add5 = lambda a, b, c, d, e: a + b + c + d + e
    >>> partial(add5, 1, 2)(3, 4, 5)
    15
    """
    return next_step(target, _resolve_arity(target, arity), args, Mode.PARTIAL)


def curried(arity: Optional[int] = None):
    def decorator(fn: Callable[..., ReturnType]):
        return curry(fn, arity=arity)

    return decorator
