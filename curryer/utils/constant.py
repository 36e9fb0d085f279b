class MetaConst(type):
    def __getattr__(cls, key):
        raise AttributeError("{0} has no constant {1}".format(cls.__name__, key))

    def __setattr__(cls, key, value):
        if key[0] == '_':
            super().__setattr__(key, value)
        else:
            raise TypeError("constants are read-only", cls)


class Const(object, metaclass=MetaConst):
    pass
