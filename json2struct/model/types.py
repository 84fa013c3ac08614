"""Type model produced by structural inference.

The model is a strict tree: every RecordType owns the records it introduces,
and FieldSlots refer to those records by name. Instances are frozen once the
engine has built them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union


class PrimitiveKind(Enum):
    """Scalar kinds a field can be inferred as."""
    STRING = "String"
    INTEGER = "Integer"
    NUMBER = "Number"
    BOOLEAN = "Boolean"
    ANY = "Any"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CustomType:
    """Reference to a named RecordType."""
    name: str

    def __str__(self) -> str:
        return self.name


FieldType = Union[PrimitiveKind, CustomType]


def is_primitive(field_type: FieldType) -> bool:
    """True for String, Integer, Number and Boolean; Any is not a concrete primitive."""
    return isinstance(field_type, PrimitiveKind) and field_type is not PrimitiveKind.ANY


def is_custom(field_type: FieldType) -> bool:
    return isinstance(field_type, CustomType)


def custom_type_name(field_type: FieldType) -> Optional[str]:
    if isinstance(field_type, CustomType):
        return field_type.name
    return None


def field_type_to_str(field_type: FieldType) -> str:
    return str(field_type)


@dataclass(frozen=True)
class FieldSlot:
    """One field of a RecordType."""
    source_key: str
    display_name: str
    type: FieldType
    is_array: bool = False
    is_optional: bool = False
    annotation: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'source_key': self.source_key,
            'display_name': self.display_name,
            'type': field_type_to_str(self.type),
            'is_custom': is_custom(self.type),
            'is_array': self.is_array,
            'is_optional': self.is_optional,
        }
        if self.annotation:
            data['annotation'] = self.annotation
        return data


@dataclass(frozen=True)
class RecordType:
    """A named, object-shaped type with fields ordered by source key."""
    name: str
    fields: Tuple[FieldSlot, ...] = ()
    nested_records: Tuple["RecordType", ...] = ()
    annotation: str = ""

    def is_empty(self) -> bool:
        return not self.fields

    def field(self, source_key: str) -> Optional[FieldSlot]:
        """Look up a field by its original key."""
        for slot in self.fields:
            if slot.source_key == source_key:
                return slot
        return None

    def referenced_types(self) -> List[str]:
        """
        Names of the records this record's own fields refer to.

        Returns:
            Unique names in field order
        """
        names: List[str] = []
        for slot in self.fields:
            name = custom_type_name(slot.type)
            if name and name not in names:
                names.append(name)
        return names

    def iter_records(self) -> Iterator["RecordType"]:
        """Walk this record and every nested record, depth-first, parents first."""
        stack = [self]
        while stack:
            record = stack.pop()
            yield record
            stack.extend(reversed(record.nested_records))

    def find(self, name: str) -> Optional["RecordType"]:
        """Find a record by name anywhere in this tree."""
        for record in self.iter_records():
            if record.name == name:
                return record
        return None

    def unresolved_references(self) -> List[str]:
        """
        Custom type names used in this tree that no nested record defines.

        An engine-built model always returns an empty list.
        """
        defined = {record.name for record in self.iter_records()}
        missing: List[str] = []
        for record in self.iter_records():
            for name in record.referenced_types():
                if name not in defined and name not in missing:
                    missing.append(name)
        return missing

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'name': self.name,
            'fields': [slot.to_dict() for slot in self.fields],
        }
        if self.nested_records:
            data['nested_records'] = [record.to_dict() for record in self.nested_records]
        if self.annotation:
            data['annotation'] = self.annotation
        return data


@dataclass
class NameRegistry:
    """
    Record names allocated during one inference run.

    Owned by a single run and discarded afterwards; never shared.
    """
    allocated: set = field(default_factory=set)

    def allocate(self, base_name: str) -> str:
        """
        Reserve a unique name derived from base_name.

        Args:
            base_name: Preferred name

        Returns:
            base_name, or base_name with the lowest free numeric suffix
            starting at 2
        """
        name = base_name
        suffix = 2
        while name in self.allocated:
            name = f"{base_name}{suffix}"
            suffix += 1
        self.allocated.add(name)
        return name

    def __contains__(self, name: str) -> bool:
        return name in self.allocated

    def __len__(self) -> int:
        return len(self.allocated)
