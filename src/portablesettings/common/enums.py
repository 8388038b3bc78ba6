from enum import Enum


class SerializeAs(Enum):
    """How a setting's serialized value is stored inside its property node.

    The kind is declared with the property and decides the node content
    format on both write and read; the content itself is never inspected
    to guess it.
    """

    STRING = "string"  # single text node
    XML = "xml"  # nested element
