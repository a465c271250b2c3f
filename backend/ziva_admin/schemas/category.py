from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class CategoryNode(BaseModel):
    """Category tree node as served by the storefront.

    Root categories have no ``categoryId``; subtitles at any depth carry the
    id of the root category that owns their chain.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(alias="_id")
    category_id: str | None = Field(default=None, alias="categoryId")
    name: str = ""
    description: str | None = None
    slug: str | None = None
    product_count: int | None = Field(default=None, alias="productCount")
    status: str | None = None
    subtitles: list["CategoryNode"] = Field(
        default_factory=list,
        validation_alias=AliasChoices("subtitles", "children"),
        serialization_alias="subtitles",
    )

    @property
    def is_inactive(self) -> bool:
        return self.status == "inactive"

    def to_payload(self) -> dict:
        """Serialize back to the storefront's wire format, keeping only the keys it sent."""
        return self.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)


CategoryNode.model_rebuild()


class NodeIdentity(BaseModel):
    """Identity of a tree node as posted back by the tree actions."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    category_id: str | None = Field(default=None, alias="categoryId")


class CategoryDraft(BaseModel):
    """In-progress add/edit form state.

    Unknown keys are kept so an edited root category is sent back whole.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str | None = Field(default=None, alias="_id")
    category_id: str | None = Field(default=None, alias="categoryId")
    name: str = ""
    description: str = ""
    slug: str | None = None
    status: str | None = None
    product_count: int | None = Field(default=None, alias="productCount")

    @classmethod
    def from_node(cls, node: CategoryNode) -> "CategoryDraft":
        """Populate a draft from a node, leaving its children behind."""
        payload = node.to_payload()
        payload.pop("subtitles", None)
        return cls.model_validate(payload)

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class SubtitleCreate(BaseModel):
    """Schema for adding a subtitle under an existing node"""

    target: NodeIdentity
    name: str
    description: str = ""


class CategoryStats(BaseModel):
    """Dashboard statistics for the category screen"""

    main_categories: int
    subcategories: int
    products: int | None = None


class CategoryTreeResponse(BaseModel):
    """Schema for the full category tree with statistics"""

    categories: list[CategoryNode]
    stats: CategoryStats


class MutationResponse(BaseModel):
    """Schema for the result of a confirmed tree mutation"""

    message: str
    categories: list[CategoryNode]
