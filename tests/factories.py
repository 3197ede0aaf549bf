"""Schema node builders shared by the tests."""


def node(name, id=None, props=None, children=None, styles=None):
    """Build one schema node dict."""
    entry = {"name": name, "props": props or {}}
    if id is not None:
        entry["id"] = id
    if children is not None:
        entry["children"] = children
    if styles is not None:
        entry["styles"] = styles
    return entry


def page(*children, id=1, **props):
    """A one-page schema with ``children`` under the ``Page`` root."""
    return [node("Page", id=id, props=props, children=list(children))]
