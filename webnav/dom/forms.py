"""
Form controls: reading and writing the value of input elements, and
collecting the data a form submits.
"""

import enum

from webnav.dom.nodes import Element, Text
from webnav.dom.utils import ancestors, as_text, tree_to_list


class InputKind(enum.Enum):
    CHECKBOX = "checkbox"
    RADIO = "radio"
    TEXT = "text"
    PASSWORD = "password"
    FILE = "file"
    TEXTAREA = "textarea"
    OTHER = "other"


SETTABLE_KINDS = (InputKind.CHECKBOX, InputKind.RADIO, InputKind.TEXT,
                  InputKind.PASSWORD, InputKind.FILE, InputKind.TEXTAREA)


def input_kind(node):
    if not isinstance(node, Element):
        return InputKind.OTHER
    if node.tag == "textarea":
        return InputKind.TEXTAREA
    if node.tag != "input":
        return InputKind.OTHER

    kind = (node.get_attribute("type") or "text").casefold()
    if kind == "checkbox":
        return InputKind.CHECKBOX
    elif kind == "radio":
        return InputKind.RADIO
    elif kind == "text":
        return InputKind.TEXT
    elif kind == "password":
        return InputKind.PASSWORD
    elif kind == "file":
        return InputKind.FILE
    return InputKind.OTHER


def is_settable(node):
    return input_kind(node) in SETTABLE_KINDS


def is_checked(node):
    return node.get_attribute("checked") is not None


def enclosing_form(node):
    for parent in ancestors(node):
        if isinstance(parent, Element) and parent.tag == "form":
            return parent
    return None


def get_value(node):
    """Current value of a form control, or None if node has no value.

    Checkboxes and radio buttons report "checked" or "".
    """
    kind = input_kind(node)
    if kind in (InputKind.CHECKBOX, InputKind.RADIO):
        return "checked" if is_checked(node) else ""
    elif kind in (InputKind.TEXT, InputKind.PASSWORD, InputKind.FILE):
        return node.get_attribute("value") or ""
    elif kind == InputKind.TEXTAREA:
        return "".join(child.text for child in node.children if isinstance(child, Text))
    elif kind == InputKind.OTHER:
        return None
    raise ValueError("Unhandled input kind: {}".format(kind))


def _uncheck_group(node):
    name = node.get_attribute("name")
    if name is None:
        return
    scope = enclosing_form(node) or (ancestors(node) or [node])[-1]
    for other in tree_to_list(scope, []):
        if (other is not node and input_kind(other) == InputKind.RADIO
                and other.get_attribute("name") == name):
            other.remove_attribute("checked")


def set_checked(node, checked):
    if checked:
        if input_kind(node) == InputKind.RADIO:
            _uncheck_group(node)
        node.set_attribute("checked", "checked")
    else:
        node.remove_attribute("checked")


def set_value(node, value):
    """Write value into a form control. Returns False if node is not settable."""
    kind = input_kind(node)
    if kind in (InputKind.CHECKBOX, InputKind.RADIO):
        set_checked(node, value.strip().casefold() == "true")
    elif kind in (InputKind.TEXT, InputKind.PASSWORD, InputKind.FILE):
        node.set_attribute("value", value)
    elif kind == InputKind.TEXTAREA:
        node.children = [Text(value, node)]
    elif kind == InputKind.OTHER:
        return False
    else:
        raise ValueError("Unhandled input kind: {}".format(kind))
    return True


def form_data(form, submitter=None):
    """Name/value pairs a form submits, in document order."""
    pairs = []
    for node in tree_to_list(form, [])[1:]:
        if not isinstance(node, Element):
            continue
        name = node.get_attribute("name")
        if name is None or node.get_attribute("disabled") is not None:
            continue

        if node.tag == "input":
            kind = (node.get_attribute("type") or "text").casefold()
            if kind in ("checkbox", "radio"):
                if is_checked(node):
                    pairs.append((name, node.get_attribute("value") or "on"))
            elif kind in ("submit", "image", "button"):
                if node is submitter:
                    pairs.append((name, node.get_attribute("value") or ""))
            elif kind != "reset":
                pairs.append((name, node.get_attribute("value") or ""))
        elif node.tag == "textarea":
            pairs.append((name, get_value(node)))
        elif node.tag == "select":
            options = [o for o in tree_to_list(node, []) if isinstance(o, Element) and o.tag == "option"]
            chosen = [o for o in options if o.get_attribute("selected") is not None] or options[:1]
            for option in chosen:
                value = option.get_attribute("value")
                pairs.append((name, value if value is not None else as_text(option)))
        elif node.tag == "button" and node is submitter:
            pairs.append((name, node.get_attribute("value") or ""))
    return pairs
