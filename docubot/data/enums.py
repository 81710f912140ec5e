from enum import Enum


class ProtocolVersion(Enum):
    """Request/response shapes the service has shipped, oldest first."""

    V1 = 1  # bare message client
    V2 = 2  # tree-aware: docTreeId, hasDocument, variables
    V3 = 3  # preview endpoints and a separate preview base URL

    @property
    def supports_trees(self) -> bool:
        return self.value >= ProtocolVersion.V2.value

    @property
    def supports_variables(self) -> bool:
        return self.value >= ProtocolVersion.V2.value

    @property
    def supports_preview(self) -> bool:
        return self.value >= ProtocolVersion.V3.value

    @staticmethod
    def parse(value: "str | int | ProtocolVersion") -> "ProtocolVersion":
        if isinstance(value, ProtocolVersion):
            return value
        raw = str(value).strip().lower().lstrip("v")
        try:
            return ProtocolVersion(int(raw))
        except ValueError:
            raise ValueError(f"Unknown protocol version: {value!r}") from None


class LogicalOperator(str, Enum):
    AND = "and"
    OR = "or"


class Comparator(str, Enum):
    EQ = "=="
    NE = "!="
    GT = ">"
    GTE = ">="
    LT = "<"
    LTE = "<="


class EntityType(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    EMAIL = "email"
    BOOLEAN = "boolean"
    MULTIPLE_CHOICE = "multipleChoice"


def enum_or_raw(enum_cls, value):
    """Map a wire value onto enum_cls, keeping unrecognised strings as-is."""
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return value


def enum_value(value):
    return value.value if isinstance(value, Enum) else value
