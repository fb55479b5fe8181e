from typing import Any, Dict, Iterable

from errors import KeyPathConflict

Tree = Dict[str, Any]


def set_key_path(tree: Tree, key: str, value: str) -> Tree:
    """
    Set 'value' in 'tree' at the path given by splitting 'key' on '.'.

    Intermediate mappings are created as needed and the tree is updated in
    place and returned. Descending through an existing string, or putting a
    string where a mapping already lives, raises KeyPathConflict. Setting
    the same full key twice keeps the last value.
    """
    segments = key.split('.')
    node = tree
    for depth, segment in enumerate(segments[:-1]):
        child = node.get(segment)
        if child is None:
            child = {}
            node[segment] = child
        elif not isinstance(child, dict):
            path = '.'.join(segments[:depth + 1])
            raise KeyPathConflict(key, path, 'already holds a value, cannot nest under it')
        node = child

    last = segments[-1]
    if isinstance(node.get(last), dict):
        raise KeyPathConflict(key, key, 'already holds nested keys, cannot replace with a value')
    node[last] = value
    return tree


def build_tree(translations: Iterable) -> Tree:
    """Fold translations into one nested mapping, in translation order."""
    tree: Tree = {}
    for t in translations:
        set_key_path(tree, t.key, t.value)
    return tree
