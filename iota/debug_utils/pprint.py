from iota.types.tree import Binary, Leaf, Tree


def to_source(tree: Tree) -> str:
    """Canonical source text for `tree`.

    Parsing the result gives back an equal tree, as long as every leaf is
    non-negative (the grammar has no negative literals). Objects that are not
    Leaf or Binary raise TypeError.
    """
    match tree:
        case Leaf(value=value):
            return str(value)
        case Binary(op=op, left=left, right=right):
            return f"({op} {to_source(left)} {to_source(right)})"
    raise TypeError(f"Not a tree: {tree!r}")


def pprint_tree(tree: Tree, indent: int = 0, max_line_length: int = 80) -> str:
    pad = "  " * indent
    flat = to_source(tree)
    if isinstance(tree, Leaf) or len(pad) + len(flat) <= max_line_length:
        return pad + flat
    left = pprint_tree(tree.left, indent + 1, max_line_length)
    right = pprint_tree(tree.right, indent + 1, max_line_length)
    return f"{pad}({tree.op}\n{left}\n{right})"


if __name__ == "__main__":
    from iota.reader.parser import parse

    example = parse("(* (- 7 4) (+ (/ 26 2) 1))")
    print(pprint_tree(example, max_line_length=12))
