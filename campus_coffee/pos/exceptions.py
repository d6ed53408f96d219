"""
Error kinds raised by the POS services.

Every error carries the identifier that caused it so callers can report
it without parsing the message.
"""


class PosError(Exception):
    """Base class for POS service errors."""


class OsmNodeNotFoundError(PosError):
    """The OSM node could not be fetched, whatever the cause."""

    def __init__(self, node_id: int):
        self.node_id = node_id
        super().__init__(f"OpenStreetMap node {node_id} not found")


class OsmNodeMissingFieldsError(PosError):
    """The OSM node lacks a required tag or carries an invalid one."""

    def __init__(self, node_id: int):
        self.node_id = node_id
        super().__init__(
            f"OpenStreetMap node {node_id} is missing required fields"
        )


class PosNotFoundError(PosError):
    """No POS exists with the given ID."""

    def __init__(self, pos_id: int):
        self.pos_id = pos_id
        super().__init__(f"POS with ID {pos_id} does not exist")


class DuplicatePosNameError(PosError):
    """Another POS already uses the given name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"POS with name '{name}' already exists")
