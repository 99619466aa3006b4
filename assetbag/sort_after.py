from collections import defaultdict

from assetbag.base import (
    items,
    keys,
)


class SortAfterException(Exception):
    pass


def sort_after(d):
    """
    Reorder the dict `d` (asset id -> asset) in place so that every asset comes after
    the predecessors it declared with `after()`. Predecessors that are not keys of `d`
    are ignored. Assets without constraints keep their relative order.
    """
    pending_count = {}
    dependents = defaultdict(list)
    for key, asset in items(d):
        predecessors = [p for p in sorted(asset.get_predecessors()) if p in d and p != key]
        pending_count[key] = len(predecessors)
        for p in predecessors:
            dependents[p].append(key)

    if not dependents:
        return d

    placed = set()

    def place(key):
        stack = [key]
        while stack:
            x = stack.pop()
            placed.add(x)
            yield x
            ready = []
            for dependent in dependents.pop(x, []):
                pending_count[dependent] -= 1
                if pending_count[dependent] == 0:
                    ready.append(dependent)
            stack.extend(reversed(ready))

    def traverse():
        for key in keys(d):
            if key not in placed and pending_count[key] == 0:
                yield from place(key)

    result = [(key, d[key]) for key in traverse()]

    if len(result) != len(d):
        stuck = "\n    ".join(sorted(k for k in keys(d) if k not in placed))
        raise SortAfterException(f'Ordering cycle detected, unable to place:\n    {stuck}')

    d.clear()
    d.update(dict(result))
    return d
