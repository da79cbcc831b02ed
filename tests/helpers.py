def node(label, *children):
    """Nested-mapping tree node."""
    return {"label": label, "children": list(children)}
