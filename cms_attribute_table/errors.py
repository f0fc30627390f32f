class AttributeTableError(Exception):
    pass


class AttributeDecodeError(AttributeTableError, ValueError):
    """A tagged value could not be decoded as a CMS Attribute."""


class InternalConsistencyError(AttributeTableError, RuntimeError):
    """An entry of an attribute table is neither a single attribute nor a
    non-empty run of attributes.

    Only reachable when a malformed mapping was handed to the table
    constructor; it is a programming error and is never recovered from.
    """
