class CurryError(RuntimeError):
    pass


class ArityMismatch(CurryError):
    def __init__(self, expected: int, received: int):
        super().__init__("Bad arity. Should be {0} but got {1}".format(expected, received))
        self._expected = expected
        self._received = received

    @property
    def expected(self):
        return self._expected

    @property
    def received(self):
        return self._received


class NotSupported(CurryError):
    pass
