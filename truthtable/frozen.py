def immutable(self, *args, **kws):
    raise TypeError("cannot change object - object is immutable")


class FrozenList(list):
    """
    A list that refuses mutation once built

    Postfix programs are stored as FrozenLists so a single parse can be
    shared by every evaluation
    """

    append = extend = insert = immutable
    pop = remove = clear = immutable
    reverse = sort = immutable
    __setitem__ = __delitem__ = __iadd__ = __imul__ = immutable

    def __repr__(self):
        return f"{self.__class__.__name__}({list.__repr__(self)})"


class FrozenDict(dict):
    """
    Read-only lookup table, filled once from the constructor
    """

    __setitem__ = __delitem__ = immutable
    update = setdefault = pop = immutable
