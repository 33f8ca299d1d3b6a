
from ..utils import split_path, star_path


class DiffConfig:
    """Set of options to pass around during a diff"""

    def __init__(self, *, prefilter=None, order_independent=False):
        self.prefilter = prefilter
        self.order_independent = bool(order_independent)

    def should_skip(self, path, key):
        "Return True if the child key of the value at path is not to be compared."
        if self.prefilter is None:
            return False
        return bool(self.prefilter(list(path), key))

    def __repr__(self):
        return "DiffConfig(prefilter=%r, order_independent=%r)" % (
            self.prefilter, self.order_independent)


def prefilter_from_paths(paths):
    """Build a prefilter skipping the given paths.

    Paths are on the form '/foo/*/bar', where '*' (or any integer)
    matches any array index. Skipping a path also skips everything
    below it.
    """
    starred = {star_path(split_path(p)) for p in paths}

    def prefilter(path, key):
        return star_path(list(path) + [key]) in starred

    return prefilter
