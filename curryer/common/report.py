import json
from abc import ABC, abstractmethod
import objectfactory
from curryer.utils.Meta import reconcile_meta


class IReport(ABC):
    @abstractmethod
    def flatten(self):
        pass


@objectfactory.register
class InfoReport(reconcile_meta(objectfactory.Serializable, IReport, ABC)):
    """Read-only snapshot of a deferred call, as returned by ``info``.

    Only the name of the target is serialized, so a report rebuilt from JSON
    has no ``target_identity``.
    """

    _function = objectfactory.String(key="function")
    _mode_label = objectfactory.String(key="mode_label")
    _function_arity = objectfactory.Integer(key="function_arity")
    _args_still_needed = objectfactory.Integer(key="args_still_needed")
    _args_collected = objectfactory.Integer(key="args_collected")

    def __init__(self, target=None, mode_label: str = None, function_arity: int = 0, args_collected: int = 0):
        self._target = target
        self._function = getattr(target, "__qualname__", repr(target))
        self._mode_label = mode_label
        self._function_arity = function_arity
        self._args_still_needed = function_arity - args_collected
        self._args_collected = args_collected

    @property
    def target_identity(self):
        return self._target

    @property
    def mode_label(self):
        return self._mode_label

    @property
    def function_arity(self):
        return self._function_arity

    @property
    def args_still_needed(self):
        return self._args_still_needed

    @property
    def args_collected(self):
        return self._args_collected

    def items(self):
        return [
            ("function", self.target_identity),
            ("mode_label", self.mode_label),
            ("function_arity", self.function_arity),
            ("args_still_needed", self.args_still_needed),
            ("args_collected", self.args_collected),
        ]

    def flatten(self):
        return json.dumps(self.serialize())

    def __eq__(self, other):
        if not isinstance(other, InfoReport):
            return NotImplemented
        return self.items() == other.items()

    def __hash__(self):
        try:
            return hash(tuple(self.items()))
        except TypeError:
            # unhashable target
            return hash(tuple(self.items()[1:]))

    def __repr__(self):
        return "InfoReport({0})".format(", ".join("{0}={1!r}".format(k, v) for k, v in self.items()))
