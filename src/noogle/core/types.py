"""Core data types for Noogle documentation entries."""

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


# --- Corpus Domain ---
class FilePosition(_Frozen):
    file: str
    line: int | None = None
    column: int | None = None


class ContentMeta(_Frozen):
    position: FilePosition | None = None
    path: list[str] | None = None


class PrimopMeta(_Frozen):
    name: str | None = None
    args: list[str] = Field(default_factory=list)
    arity: int | None = None
    experimental: bool = False


class DocMeta(_Frozen):
    title: str
    path: list[str]
    aliases: list[list[str]] | None = None
    signature: str | None = None
    is_primop: bool = False
    primop_meta: PrimopMeta | None = None
    attr_position: FilePosition | None = None
    lambda_position: FilePosition | None = None
    count_applied: int | None = None
    content_meta: ContentMeta | None = None


class DocContent(_Frozen):
    content: str | None = None
    source: ContentMeta | None = None


class Doc(_Frozen):
    meta: DocMeta
    content: DocContent | None = None

    @property
    def name(self) -> str | None:
        """Last path segment, the identifier the entry is known by."""
        if not self.meta.path:
            return None
        return self.meta.path[-1]

    @property
    def body(self) -> str:
        if self.content is None:
            return ""
        return self.content.content or ""


# --- Derived Types ---
class Heading(_Frozen):
    level: int
    value: str
    id: str


class TypeSignature(_Frozen):
    args: list[str] = Field(default_factory=list)
    returns: list[str] = Field(default_factory=list)


class RenderedPage(_Frozen):
    path: list[str]
    title: str | None = None
    html: str
