class Struct(dict):
    """
    Struct is a dict that can be accessed like an object. Metadata values are handed out as
    Structs so that `bag.all().media` reads the same as `bag.all()['media']`.

    .. code-block:: python

        >>> s = Struct(media='all', preprocess=True)
        >>> s
        Struct(media='all', preprocess=True)
        >>> s.media
        'all'

    """

    __slots__ = ()

    def __repr__(self):
        pieces = (
            "{}={}".format(key, (repr(val) if val is not self else "{}(...)".format(type(self).__name__)))
            for (key, val) in sorted(self.items())
        )
        return "{}({})".format(type(self).__name__, ", ".join(pieces))

    __str__ = __repr__

    def __getattribute__(self, item):
        try:
            return dict.__getitem__(self, item)
        except KeyError:
            pass
        return object.__getattribute__(self, item)

    __setattr__ = dict.__setitem__

    def __delattr__(self, item):
        try:
            del self[item]
        except KeyError:
            object.__delattr__(self, item)

    def copy(self):
        return type(self)(self)


def merged(*dicts, **kwargs):
    """
    Merge dictionaries into a new Struct. Later keys overwrite.

    .. code-block:: python

        merged(dict(media='all'), dict(media='print'), weight=1)

    """
    result = Struct()
    for d in dicts:
        result.update(d)
    result.update(kwargs)
    return result
