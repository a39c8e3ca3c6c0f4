"""
Document model for docgen

Records produced by the block parser and the Document that accumulates them
over a run. The serialized shape keeps the original tool's key names:

    {"Meta": {"Generator", "Format", "Date"},
     "Functions": [...],
     "Structures": [...]}

Empty strings, empty lists and an empty Returns are left out.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Field:
    """One documented parameter, property, or return value."""

    name: str = ""
    type: str = ""
    description: str = ""

    def is_empty(self) -> bool:
        return not (self.name or self.type or self.description)

    def to_dict(self) -> Dict[str, str]:
        result = {}
        if self.type:
            result["Type"] = self.type
        if self.name:
            result["Name"] = self.name
        if self.description:
            result["Description"] = self.description
        return result

    @classmethod
    def from_dict(cls, data: Dict) -> "Field":
        return cls(
            name=data.get("Name", ""),
            type=data.get("Type", ""),
            description=data.get("Description", ""),
        )


@dataclass
class FunctionRecord:
    """A documented function or method."""

    name: str
    signature_line: str = ""
    description: str = ""
    example: Optional[str] = None
    parameters: List[Field] = field(default_factory=list)
    returns: Optional[Field] = None
    # Owning structure name for methods; never serialized
    owner: Optional[str] = field(default=None, compare=False)

    @property
    def is_method(self) -> bool:
        return self.owner is not None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"Name": self.name}
        if self.signature_line:
            result["Line"] = self.signature_line
        if self.description:
            result["Description"] = self.description
        if self.example:
            result["Example"] = self.example
        if self.parameters:
            result["Parameters"] = [p.to_dict() for p in self.parameters]
        if self.returns is not None and not self.returns.is_empty():
            result["Returns"] = self.returns.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: Dict, owner: Optional[str] = None) -> "FunctionRecord":
        returns = data.get("Returns")
        return cls(
            name=data.get("Name", ""),
            signature_line=data.get("Line", ""),
            description=data.get("Description", ""),
            example=data.get("Example"),
            parameters=[Field.from_dict(p) for p in data.get("Parameters", [])],
            returns=Field.from_dict(returns) if returns else None,
            owner=owner,
        )


@dataclass
class StructureRecord:
    """A documented structure and the methods attached to it."""

    name: str
    signature_line: str = ""
    description: str = ""
    properties: List[Field] = field(default_factory=list)
    methods: List[FunctionRecord] = field(default_factory=list)

    def get_method(self, name: str) -> Optional[FunctionRecord]:
        """Get a method by name."""
        for method in self.methods:
            if method.name == name:
                return method
        return None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"Name": self.name}
        if self.signature_line:
            result["Line"] = self.signature_line
        if self.description:
            result["Description"] = self.description
        if self.properties:
            result["Properties"] = [p.to_dict() for p in self.properties]
        if self.methods:
            result["Methods"] = [m.to_dict() for m in self.methods]
        return result

    @classmethod
    def from_dict(cls, data: Dict) -> "StructureRecord":
        name = data.get("Name", "")
        return cls(
            name=name,
            signature_line=data.get("Line", ""),
            description=data.get("Description", ""),
            properties=[Field.from_dict(p) for p in data.get("Properties", [])],
            methods=[FunctionRecord.from_dict(m, owner=name) for m in data.get("Methods", [])],
        )


@dataclass
class Meta:
    """General meta information of the generated documentation."""

    generator: str = ""
    format: str = ""
    date: str = ""

    @classmethod
    def now(cls, generator: str, format: str) -> "Meta":
        return cls(generator=generator, format=format, date=datetime.now().astimezone().isoformat())

    def to_dict(self) -> Dict[str, str]:
        result = {}
        if self.generator:
            result["Generator"] = self.generator
        if self.format:
            result["Format"] = self.format
        if self.date:
            result["Date"] = self.date
        return result

    @classmethod
    def from_dict(cls, data: Dict) -> "Meta":
        return cls(
            generator=data.get("Generator", ""),
            format=data.get("Format", ""),
            date=data.get("Date", ""),
        )


@dataclass
class Document:
    """
    Accumulated extraction result for one run.

    Methods are attached to the first structure with a matching name that
    has already been added. A method whose structure has not been seen yet
    is discarded and counted in dropped_methods.

    Usage:
        document = Document()
        document.add_structure(StructureRecord(name="Example"))
        document.add_function(FunctionRecord(name="Greet", owner="Example"))
        data = document.finalize(Meta.now("docgen", "1"))
    """

    meta: Meta = field(default_factory=Meta)
    functions: List[FunctionRecord] = field(default_factory=list)
    structures: List[StructureRecord] = field(default_factory=list)
    dropped_methods: int = field(default=0, compare=False)

    def get_structure(self, name: str) -> Optional[StructureRecord]:
        """Get the first structure with the given name."""
        for structure in self.structures:
            if structure.name == name:
                return structure
        return None

    def get_function(self, name: str) -> Optional[FunctionRecord]:
        """Get a top-level function by name."""
        for function in self.functions:
            if function.name == name:
                return function
        return None

    def add_function(self, record: FunctionRecord) -> bool:
        """
        Add a function or method record.

        Returns:
            False if the record was a method with no known owner and was dropped
        """
        if not record.is_method:
            self.functions.append(record)
            return True

        owner = self.get_structure(record.owner)
        if owner is None:
            self.dropped_methods += 1
            logger.warning(
                f"Dropping method {record.name}: structure {record.owner} not documented before it"
            )
            return False

        owner.methods.append(record)
        logger.debug(f"Attached method {record.name} to {owner.name}")
        return True

    def add_structure(self, record: StructureRecord):
        """Add a structure record. Duplicate names stay separate entries."""
        self.structures.append(record)

    def method_count(self) -> int:
        return sum(len(s.methods) for s in self.structures)

    def finalize(self, meta: Meta) -> Dict[str, Any]:
        """Stamp the document with meta information and build its serializable tree."""
        self.meta = meta
        return self.to_dict()

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"Meta": self.meta.to_dict()}
        if self.functions:
            result["Functions"] = [f.to_dict() for f in self.functions]
        if self.structures:
            result["Structures"] = [s.to_dict() for s in self.structures]
        return result

    @classmethod
    def from_dict(cls, data: Dict) -> "Document":
        """Decode a tree produced by to_dict back into a Document."""
        return cls(
            meta=Meta.from_dict(data.get("Meta", {})),
            functions=[FunctionRecord.from_dict(f) for f in data.get("Functions", [])],
            structures=[StructureRecord.from_dict(s) for s in data.get("Structures", [])],
        )

    def summary(self) -> Dict:
        """Generate summary statistics."""
        return {
            "functions": len(self.functions),
            "structures": len(self.structures),
            "methods": self.method_count(),
            "dropped_methods": self.dropped_methods,
        }
