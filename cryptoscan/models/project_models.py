"""
Project Models — Package / module / document handles supplied by the host.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from cryptoscan.models.syntax_models import ModulePart


class ModuleId(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    module_name: str = Field(..., description="Dotted module name, e.g. 'app.utils'")


class DocumentId(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    module_id: ModuleId


class Document(BaseModel):
    """One source file and its parsed tree."""

    model_config = ConfigDict(frozen=True)

    document_id: DocumentId
    name: str = Field(..., description="File name, e.g. 'main.bal'")
    syntax_tree: ModulePart


class Module(BaseModel):
    model_config = ConfigDict(frozen=True)

    module_id: ModuleId
    documents: list[Document] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique_document_ids(self) -> Module:
        ids = [doc.document_id for doc in self.documents]
        if len(set(ids)) != len(ids):
            raise ValueError(
                f"Duplicate document ids in module '{self.module_id.module_name}'"
            )
        return self

    def document(self, document_id: DocumentId) -> Document:
        for doc in self.documents:
            if doc.document_id == document_id:
                return doc
        raise KeyError(f"Document '{document_id.id}' not found in module '{self.module_id.module_name}'")


class Package(BaseModel):
    """A compiled package: the unit the scan engine runs over."""

    model_config = ConfigDict(frozen=True)

    name: str
    modules: list[Module] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique_module_ids(self) -> Package:
        ids = [mod.module_id for mod in self.modules]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Duplicate module ids in package '{self.name}'")
        return self

    def module(self, module_id: ModuleId) -> Module:
        for mod in self.modules:
            if mod.module_id == module_id:
                return mod
        raise KeyError(f"Module '{module_id.module_name}' not found in package '{self.name}'")

    def document_count(self) -> int:
        return sum(len(mod.documents) for mod in self.modules)
