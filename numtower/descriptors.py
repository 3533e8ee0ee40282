from functools import partial


class OperatorAdapter:
    """
    The python operator face of a MultiDispatch, such as __add__, or __radd__ when reflected. Operands with no
     applicable candidate give NotImplemented instead of an error, so python can go on to the other operand.
    """

    def __init__(self, md, reflected=False):
        self.md = md
        self.reflected = reflected

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return partial(self, instance)

    def __call__(self, instance, *others, **kwargs):
        # a reflected operator receives its operands in reverse
        args = (*others, instance) if self.reflected else (instance, *others)
        return self.md.get(args, kwargs, default=NotImplemented)


class ImplementorSlot:
    """
    What an implementor leaves behind in its class body. More implementors of the same name are declared through it,
     and instances reach the whole MultiDispatch through it as a bound method.
    """

    def __init__(self, md):
        self.md = md

    def implementor(self, *args, **kwargs):
        return self.md.implementor(*args, **kwargs)

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return partial(self.md, instance)
